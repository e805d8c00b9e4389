"""Rendering of Git status columns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ..cell import TextCell, TextCellContents
from ..style import ANSIString, Style


class GitColours(Protocol):
    def not_modified(self) -> Style: ...

    def new(self) -> Style: ...

    def modified(self) -> Style: ...

    def deleted(self) -> Style: ...

    def renamed(self) -> Style: ...

    def type_change(self) -> Style: ...

    def ignored(self) -> Style: ...

    def conflicted(self) -> Style: ...


class GitStatus(Enum):
    """The status of a file in one part of a Git repository."""

    NOT_MODIFIED = ("-", "not_modified")
    NEW = ("N", "new")
    MODIFIED = ("M", "modified")
    DELETED = ("D", "deleted")
    RENAMED = ("R", "renamed")
    TYPE_CHANGE = ("T", "type_change")
    IGNORED = ("I", "ignored")
    CONFLICTED = ("U", "conflicted")

    @property
    def char(self) -> str:
        return self.value[0]

    def render(self, colours: GitColours) -> ANSIString:
        style = getattr(colours, self.value[1])()
        return style.paint(self.char)


@dataclass(frozen=True)
class Git:
    """The staged and unstaged Git status of a file."""

    staged: GitStatus = GitStatus.NOT_MODIFIED
    unstaged: GitStatus = GitStatus.NOT_MODIFIED

    def render(self, colours: GitColours) -> TextCell:
        contents = TextCellContents([self.staged.render(colours), self.unstaged.render(colours)])
        return TextCell(contents, 2)