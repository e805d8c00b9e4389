"""Styled cells, trees, tables, icons and time formatting for terminal file listings."""

__version__ = "0.1.0"