"""Rendering of block counts."""

from __future__ import annotations

from typing import Optional, Protocol

from ..cell import TextCell
from ..style import Style


class BlocksColours(Protocol):
    def block_count(self) -> Style: ...

    def no_blocks(self) -> Style: ...


def render_blocks(blocks: Optional[int], colours: BlocksColours) -> TextCell:
    """Render a block count, or a hyphen for files that have none."""
    if blocks is None:
        return TextCell.blank(colours.no_blocks())
    return TextCell.paint(colours.block_count(), str(blocks))