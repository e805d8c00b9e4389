"""Escaping of control characters in displayed names."""

from __future__ import annotations

from .style import ANSIString, Style

_NAMED_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _is_printable(ch: str) -> bool:
    return ch >= " " and ch != "\x7f"


def _escape_char(ch: str) -> str:
    return _NAMED_ESCAPES.get(ch) or f"\\u{{{ord(ch):x}}}"


def escape(string: str, good: Style, bad: Style) -> list[ANSIString]:
    """Paint a string, escaping control characters in the ``bad`` style."""
    if all(_is_printable(ch) for ch in string):
        return [good.paint(string)]
    return [
        good.paint(ch) if _is_printable(ch) else bad.paint(_escape_char(ch))
        for ch in string
    ]