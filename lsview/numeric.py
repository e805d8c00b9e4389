"""Locale rules for writing numbers."""

from __future__ import annotations

import locale
from dataclasses import dataclass


@dataclass(frozen=True)
class NumericLocale:
    """The decimal and thousands separators used to format numbers."""

    decimal_sep: str = "."
    thousands_sep: str = ","

    @classmethod
    def english(cls) -> NumericLocale:
        return cls(".", ",")

    @classmethod
    def load_user_locale(cls) -> NumericLocale:
        """Read the separators from the user's locale; raises locale.Error if it is unusable."""
        previous = locale.setlocale(locale.LC_NUMERIC)
        try:
            locale.setlocale(locale.LC_NUMERIC, "")
            conventions = locale.localeconv()
        finally:
            locale.setlocale(locale.LC_NUMERIC, previous)
        return cls(str(conventions["decimal_point"]), str(conventions["thousands_sep"]))

    def format_int(self, number: int) -> str:
        """Write an integer with its digits grouped in threes."""
        grouped = f"{abs(int(number)):,}".replace(",", self.thousands_sep)
        return f"-{grouped}" if number < 0 else grouped

    def format_float(self, number: float, decimals: int) -> str:
        """Write a number with a fixed count of decimal places."""
        return f"{number:.{decimals}f}".replace(".", self.decimal_sep)