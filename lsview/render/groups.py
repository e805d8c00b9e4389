"""Rendering of a file's owning group."""

from __future__ import annotations

from typing import Optional, Protocol

from ..cell import TextCell
from ..style import Style
from ..table import UserFormat
from ..userdb import Group, User


class GroupColours(Protocol):
    def yours(self) -> Style: ...

    def not_yours(self) -> Style: ...


class GroupLookup(Protocol):
    def get_user_by_uid(self, uid: int) -> Optional[User]: ...

    def get_group_by_gid(self, gid: int) -> Optional[Group]: ...

    def get_current_uid(self) -> int: ...


def render_group(
    gid: int, colours: GroupColours, users: GroupLookup, format: UserFormat
) -> TextCell:
    """Render a group by name or number, highlighting groups the current user belongs to."""
    style = colours.not_yours()

    group = users.get_group_by_gid(gid)
    if group is None:
        return TextCell.paint(style, str(gid))

    current_user = users.get_user_by_uid(users.get_current_uid())
    if current_user is not None and (
        current_user.primary_group == group.gid or current_user.name in group.members
    ):
        style = colours.yours()

    group_name = group.name if format is UserFormat.NAME else str(group.gid)
    return TextCell.paint(style, group_name)