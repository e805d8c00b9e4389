"""Rendering of the permissions column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from ..cell import TextCell, TextCellContents
from ..style import ANSIString, Style
from .filetype import FileType, FiletypeColours


class PermissionsColours(Protocol):
    def dash(self) -> Style: ...

    def user_read(self) -> Style: ...

    def user_write(self) -> Style: ...

    def user_execute_file(self) -> Style: ...

    def user_execute_other(self) -> Style: ...

    def group_read(self) -> Style: ...

    def group_write(self) -> Style: ...

    def group_execute(self) -> Style: ...

    def other_read(self) -> Style: ...

    def other_write(self) -> Style: ...

    def other_execute(self) -> Style: ...

    def special_user_file(self) -> Style: ...

    def special_other(self) -> Style: ...

    def attribute(self) -> Style: ...


class AllColours(PermissionsColours, FiletypeColours, Protocol):
    pass


def _bit(colours: PermissionsColours, on: bool, char: str, style: Style) -> ANSIString:
    return style.paint(char) if on else colours.dash().paint("-")


@dataclass(frozen=True)
class Permissions:
    """The Unix permission bits of a file."""

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    def render(self, colours: PermissionsColours, is_regular_file: bool) -> list[ANSIString]:
        """The nine rwx characters, each in its own style."""
        return [
            _bit(colours, self.user_read, "r", colours.user_read()),
            _bit(colours, self.user_write, "w", colours.user_write()),
            self._user_execute_bit(colours, is_regular_file),
            _bit(colours, self.group_read, "r", colours.group_read()),
            _bit(colours, self.group_write, "w", colours.group_write()),
            self._group_execute_bit(colours),
            _bit(colours, self.other_read, "r", colours.other_read()),
            _bit(colours, self.other_write, "w", colours.other_write()),
            self._other_execute_bit(colours),
        ]

    def _user_execute_bit(self, colours: PermissionsColours, is_regular_file: bool) -> ANSIString:
        if not self.setuid:
            if not self.user_execute:
                return colours.dash().paint("-")
            style = colours.user_execute_file() if is_regular_file else colours.user_execute_other()
            return style.paint("x")
        if not self.user_execute:
            return colours.special_other().paint("S")
        style = colours.special_user_file() if is_regular_file else colours.special_other()
        return style.paint("s")

    def _group_execute_bit(self, colours: PermissionsColours) -> ANSIString:
        if self.setgid:
            return colours.special_other().paint("s" if self.group_execute else "S")
        if self.group_execute:
            return colours.group_execute().paint("x")
        return colours.dash().paint("-")

    def _other_execute_bit(self, colours: PermissionsColours) -> ANSIString:
        if self.sticky:
            return colours.special_other().paint("t" if self.other_execute else "T")
        if self.other_execute:
            return colours.other_execute().paint("x")
        return colours.dash().paint("-")


@dataclass(frozen=True)
class Attributes:
    """The attribute flags of a file on systems without Unix permissions."""

    directory: bool = False
    archive: bool = False
    readonly: bool = False
    hidden: bool = False
    system: bool = False
    reparse_point: bool = False

    def render(self, colours: AllColours) -> list[ANSIString]:
        return [
            _bit(colours, self.archive, "a", colours.normal()),
            _bit(colours, self.readonly, "r", colours.user_read()),
            _bit(colours, self.hidden, "h", colours.special_user_file()),
            _bit(colours, self.system, "s", colours.special_other()),
        ]

    def render_type(self, colours: AllColours) -> ANSIString:
        if self.reparse_point:
            return colours.pipe().paint("l")
        if self.directory:
            return colours.directory().paint("d")
        return colours.dash().paint("-")


@dataclass(frozen=True)
class PermissionsPlus:
    """Everything shown in the permissions column: type, bits and an xattr marker."""

    file_type: FileType
    permissions: Union[Permissions, Attributes]
    xattrs: bool = False

    def render(self, colours: AllColours) -> TextCell:
        if isinstance(self.permissions, Attributes):
            chars = [self.permissions.render_type(colours), *self.permissions.render(colours)]
        else:
            chars = [self.file_type.render(colours)]
            chars.extend(self.permissions.render(colours, self.file_type.is_regular_file()))
            if self.xattrs:
                chars.append(colours.attribute().paint("@"))
        # Every character here is ASCII, so each is one column wide.
        return TextCell(TextCellContents(chars), len(chars))