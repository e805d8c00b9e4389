"""Rendering of hard-link counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..cell import TextCell
from ..numeric import NumericLocale
from ..style import Style


class LinksColours(Protocol):
    def normal(self) -> Style: ...

    def multi_link_file(self) -> Style: ...


@dataclass(frozen=True)
class Links:
    """A file's hard-link count, and whether it is a file linked more than once."""

    count: int
    multiple: bool

    def render(self, colours: LinksColours, numeric: NumericLocale) -> TextCell:
        style = colours.multi_link_file() if self.multiple else colours.normal()
        return TextCell.paint(style, numeric.format_int(self.count))