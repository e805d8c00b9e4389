"""Terminal colours and styles, and strings painted with them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

_RESET = "\x1b[0m"

_FLAGS = (
    ("bold", "1"),
    ("dimmed", "2"),
    ("italic", "3"),
    ("underline", "4"),
    ("blink", "5"),
    ("reverse", "7"),
    ("hidden", "8"),
    ("strikethrough", "9"),
)


@dataclass(frozen=True)
class Colour:
    """One of the eight basic terminal colours, or an entry of the 256-colour palette."""

    index: int
    fixed: bool = False

    def __post_init__(self) -> None:
        limit = 256 if self.fixed else 8
        if not 0 <= self.index < limit:
            raise ValueError(f"colour index {self.index} out of range 0..{limit - 1}")

    def _foreground_code(self) -> str:
        return f"38;5;{self.index}" if self.fixed else f"3{self.index}"

    def _background_code(self) -> str:
        return f"48;5;{self.index}" if self.fixed else f"4{self.index}"

    def normal(self) -> Style:
        return Style(foreground=self)

    def bold(self) -> Style:
        return Style(foreground=self, bold=True)

    def italic(self) -> Style:
        return Style(foreground=self, italic=True)

    def underline(self) -> Style:
        return Style(foreground=self, underline=True)

    def blink(self) -> Style:
        return Style(foreground=self, blink=True)

    def on(self, background: Colour) -> Style:
        return Style(foreground=self, background=background)

    def paint(self, text: str) -> ANSIString:
        return self.normal().paint(text)


BLACK = Colour(0)
RED = Colour(1)
GREEN = Colour(2)
YELLOW = Colour(3)
BLUE = Colour(4)
PURPLE = Colour(5)
CYAN = Colour(6)
WHITE = Colour(7)


def fixed(number: int) -> Colour:
    """Return the colour with the given number in the 256-colour palette."""
    return Colour(number, fixed=True)


@dataclass(frozen=True)
class Style:
    """A combination of colours and text attributes."""

    foreground: Optional[Colour] = None
    background: Optional[Colour] = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        return self == Style()

    def paint(self, text: str) -> ANSIString:
        return ANSIString(text, self)

    def prefix(self) -> str:
        """The escape sequence that switches this style on."""
        if self.is_plain:
            return ""
        codes = [code for name, code in _FLAGS if getattr(self, name)]
        if self.background is not None:
            codes.append(self.background._background_code())
        if self.foreground is not None:
            codes.append(self.foreground._foreground_code())
        return f"\x1b[{';'.join(codes)}m"

    def suffix(self) -> str:
        """The escape sequence that switches this style off again."""
        return "" if self.is_plain else _RESET


@dataclass(frozen=True)
class ANSIString:
    """A piece of text together with the style to paint it in."""

    text: str
    style: Style = Style()

    def __str__(self) -> str:
        return f"{self.style.prefix()}{self.text}{self.style.suffix()}"


def _transition(first: Style, following: Style) -> str:
    """The escape codes needed to move from one style to the next."""
    if first == following:
        return ""
    lost_flag = any(getattr(first, name) and not getattr(following, name) for name, _ in _FLAGS)
    lost_colour = (first.foreground is not None and following.foreground is None) or (
        first.background is not None and following.background is None
    )
    if lost_flag or lost_colour:
        return _RESET + following.prefix()
    extra = Style(
        foreground=following.foreground if first.foreground != following.foreground else None,
        background=following.background if first.background != following.background else None,
        **{name: getattr(first, name) != getattr(following, name) for name, _ in _FLAGS},
    )
    return extra.prefix()


def paint_strings(strings: Iterable[ANSIString]) -> str:
    """Join painted strings, emitting only the escape codes that change between them."""
    parts = list(strings)
    if not parts:
        return ""
    out = [parts[0].style.prefix(), parts[0].text]
    for previous, current in zip(parts, parts[1:]):
        out.append(_transition(previous.style, current.style))
        out.append(current.text)
    if not parts[-1].style.is_plain:
        out.append(_RESET)
    return "".join(out)