"""Rendering of the file-type character in the permissions column."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from ..style import ANSIString, Style


class FiletypeColours(Protocol):
    def normal(self) -> Style: ...

    def directory(self) -> Style: ...

    def pipe(self) -> Style: ...

    def symlink(self) -> Style: ...

    def block_device(self) -> Style: ...

    def char_device(self) -> Style: ...

    def socket(self) -> Style: ...

    def special(self) -> Style: ...


class FileType(Enum):
    """The kind of a file on disk."""

    FILE = (".", "normal")
    DIRECTORY = ("d", "directory")
    PIPE = ("|", "pipe")
    LINK = ("l", "symlink")
    BLOCK_DEVICE = ("b", "block_device")
    CHAR_DEVICE = ("c", "char_device")
    SOCKET = ("s", "socket")
    SPECIAL = ("?", "special")

    @property
    def char(self) -> str:
        return self.value[0]

    def is_regular_file(self) -> bool:
        return self is FileType.FILE

    def render(self, colours: FiletypeColours) -> ANSIString:
        style = getattr(colours, self.value[1])()
        return style.paint(self.char)