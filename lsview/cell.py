"""Table cells holding styled text and its display width."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from wcwidth import wcwidth

from .style import ANSIString, Style, paint_strings


def display_width(text: str) -> int:
    """The number of terminal columns the text takes up."""
    return sum(max(wcwidth(ch), 0) for ch in text)


@dataclass
class TextCellContents:
    """A sequence of styled strings whose width is not tracked."""

    parts: list[ANSIString] = field(default_factory=list)

    def __iter__(self) -> Iterator[ANSIString]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index):
        return self.parts[index]

    def strings(self) -> str:
        """The contents rendered as one terminal-formatted string."""
        return paint_strings(self.parts)

    def width(self) -> int:
        return sum(display_width(part.text) for part in self.parts)

    def promote(self) -> TextCell:
        """Turn these contents into a cell carrying their computed width."""
        return TextCell(self, self.width())


@dataclass
class TextCell:
    """Styled strings together with their combined display width."""

    contents: TextCellContents = field(default_factory=TextCellContents)
    width: int = 0

    def __iter__(self) -> Iterator[ANSIString]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    @classmethod
    def paint(cls, style: Style, text: str) -> TextCell:
        return cls(TextCellContents([style.paint(text)]), display_width(text))

    @classmethod
    def blank(cls, style: Style) -> TextCell:
        """A cell holding a single hyphen, used in place of an empty value."""
        return cls(TextCellContents([style.paint("-")]), 1)

    def add_spaces(self, count: int) -> None:
        self.width += count
        self.contents.parts.append(Style().paint(" " * count))

    def push(self, string: ANSIString, extra_width: int) -> None:
        self.contents.parts.append(string)
        self.width += extra_width

    def append(self, other: TextCell) -> None:
        self.width += other.width
        self.contents.parts.extend(other.contents.parts)