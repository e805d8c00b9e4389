"""Rendering of file sizes and device numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union

from ..cell import TextCell, TextCellContents, display_width
from ..numeric import NumericLocale
from ..style import Style
from ..table import SizeFormat


class Prefix(Enum):
    """Decimal and binary unit prefixes."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"

    def symbol(self) -> str:
        return self.value


_DECIMAL = (
    Prefix.KILO, Prefix.MEGA, Prefix.GIGA, Prefix.TERA,
    Prefix.PETA, Prefix.EXA, Prefix.ZETTA, Prefix.YOTTA,
)
_BINARY = (
    Prefix.KIBI, Prefix.MEBI, Prefix.GIBI, Prefix.TEBI,
    Prefix.PEBI, Prefix.EXBI, Prefix.ZEBI, Prefix.YOBI,
)


class SizeColours(Protocol):
    def size(self, prefix: Optional[Prefix]) -> Style: ...

    def unit(self, prefix: Optional[Prefix]) -> Style: ...

    def no_size(self) -> Style: ...

    def major(self) -> Style: ...

    def comma(self) -> Style: ...

    def minor(self) -> Style: ...


def _with_prefix(amount: float, base: int, prefixes: tuple[Prefix, ...]) -> tuple[Optional[Prefix], float]:
    """Scale an amount down by the base until it fits, returning the prefix used."""
    if amount < base:
        return None, amount
    index = 0
    while amount >= base and index < len(prefixes):
        amount /= base
        index += 1
    return prefixes[index - 1], amount


@dataclass(frozen=True)
class DeviceIDs:
    """The major and minor numbers of a device file."""

    major: int
    minor: int

    def render(self, colours: SizeColours) -> TextCell:
        major, minor = str(self.major), str(self.minor)
        contents = TextCellContents(
            [colours.major().paint(major), colours.comma().paint(","), colours.minor().paint(minor)]
        )
        return TextCell(contents, len(major) + 1 + len(minor))


def render_size(
    size: Union[int, DeviceIDs, None],
    colours: SizeColours,
    size_format: SizeFormat,
    numerics: NumericLocale,
) -> TextCell:
    """Render a byte count, device numbers, or a hyphen when there is no size."""
    if size is None:
        return TextCell.blank(colours.no_size())
    if isinstance(size, DeviceIDs):
        return size.render(colours)

    if size_format is SizeFormat.JUST_BYTES:
        prefix, _ = _with_prefix(float(size), 1024, _BINARY)
        return TextCell.paint(colours.size(prefix), numerics.format_int(size))

    if size_format is SizeFormat.DECIMAL_BYTES:
        prefix, number = _with_prefix(float(size), 1000, _DECIMAL)
    else:
        prefix, number = _with_prefix(float(size), 1024, _BINARY)

    if prefix is None:
        return TextCell.paint(colours.size(None), numerics.format_int(int(number)))

    symbol = prefix.symbol()
    if number < 10:
        text = numerics.format_float(number, 1)
    else:
        text = numerics.format_int(math.floor(number + 0.5))

    contents = TextCellContents(
        [colours.size(prefix).paint(text), colours.unit(prefix).paint(symbol)]
    )
    return TextCell(contents, display_width(text) + len(symbol))