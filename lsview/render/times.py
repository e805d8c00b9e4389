"""Rendering of timestamps into table cells."""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional

from ..cell import TextCell
from ..style import Style
from ..time import TimeFormat


def render_time(
    time: Optional[int], style: Style, tz: Optional[tzinfo], format: TimeFormat
) -> TextCell:
    """Render a nanosecond timestamp, or a hyphen when there is none."""
    if time is None:
        datestamp = "-"
    elif tz is not None:
        datestamp = format.format_zoned(time, tz)
    else:
        datestamp = format.format_local(time)
    return TextCell.paint(style, datestamp)