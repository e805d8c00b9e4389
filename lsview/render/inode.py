"""Rendering of inode numbers."""

from __future__ import annotations

from ..cell import TextCell
from ..style import Style


def render_inode(inode: int, style: Style) -> TextCell:
    return TextCell.paint(style, str(inode))