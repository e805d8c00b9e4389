"""Rendering of a file's owning user."""

from __future__ import annotations

from typing import Optional, Protocol

from ..cell import TextCell
from ..style import Style
from ..table import UserFormat
from ..userdb import User


class UserColours(Protocol):
    def you(self) -> Style: ...

    def someone_else(self) -> Style: ...


class UserLookup(Protocol):
    def get_user_by_uid(self, uid: int) -> Optional[User]: ...

    def get_current_uid(self) -> int: ...


def render_user(uid: int, colours: UserColours, users: UserLookup, format: UserFormat) -> TextCell:
    """Render a user by name or number, highlighting the current user."""
    user = users.get_user_by_uid(uid)
    if user is None or format is UserFormat.NUMERIC:
        user_name = str(uid)
    else:
        user_name = user.name
    style = colours.you() if users.get_current_uid() == uid else colours.someone_else()
    return TextCell.paint(style, user_name)