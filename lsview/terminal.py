"""The width of the terminal that output is fitted into."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TerminalWidth:
    """A terminal width chosen by the user, or looked up at runtime when ``columns`` is None."""

    columns: Optional[int] = None

    def __post_init__(self) -> None:
        if self.columns is not None and self.columns < 0:
            raise ValueError(f"terminal width cannot be negative: {self.columns}")

    @classmethod
    def exact(cls, width: int) -> TerminalWidth:
        """A width of exactly this many columns."""
        return cls(width)

    @classmethod
    def automatic(cls) -> TerminalWidth:
        """A width taken from the terminal that standard output is connected to."""
        return cls(None)

    @property
    def is_automatic(self) -> bool:
        return self.columns is None

    def actual_terminal_width(self) -> Optional[int]:
        """The number of columns to use, or None when standard output is not a terminal."""
        if self.columns is not None:
            return self.columns
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (AttributeError, OSError, ValueError):
            return None