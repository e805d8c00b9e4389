"""Rendering of permissions as an octal number."""

from __future__ import annotations

from dataclasses import dataclass

from ..cell import TextCell
from ..style import Style
from .permissions import Permissions


def _bits_to_octal(r: bool, w: bool, x: bool) -> int:
    return int(r) * 4 + int(w) * 2 + int(x)


@dataclass(frozen=True)
class OctalPermissions:
    """A file's permissions, shown as four octal digits."""

    permissions: Permissions

    def render(self, style: Style) -> TextCell:
        perm = self.permissions
        digits = (
            _bits_to_octal(perm.setuid, perm.setgid, perm.sticky),
            _bits_to_octal(perm.user_read, perm.user_write, perm.user_execute),
            _bits_to_octal(perm.group_read, perm.group_write, perm.group_execute),
            _bits_to_octal(perm.other_read, perm.other_write, perm.other_execute),
        )
        return TextCell.paint(style, "".join(map(str, digits)))