import pytest

from lsview.cell import TextCell
from lsview.style import BLUE, Style
from lsview.table import (
    Alignment,
    Column,
    ColumnKind,
    Columns,
    Row,
    Table,
    TableOptions,
    TableWidths,
    TimeType,
    TimeTypes,
)


def _plain_row(table, text="x"):
    return Row([TextCell.paint(Style(), text) for _ in table.columns])


def test_default_columns():
    assert Columns().collect(True) == [
        Column(ColumnKind.PERMISSIONS),
        Column(ColumnKind.FILE_SIZE),
        Column(ColumnKind.USER),
        Column.timestamp(TimeType.MODIFIED),
    ]


def test_git_column_needs_enabling():
    columns = Columns(git=True)
    assert Column(ColumnKind.GIT_STATUS) not in columns.collect(False)
    assert columns.collect(True)[-1] == Column(ColumnKind.GIT_STATUS)


def test_time_column_order():
    types = TimeTypes(modified=True, changed=True, accessed=True, created=True)
    collected = Columns(time_types=types, permissions=False, filesize=False, user=False).collect(False)
    assert [c.time_type for c in collected] == [
        TimeType.MODIFIED,
        TimeType.CHANGED,
        TimeType.CREATED,
        TimeType.ACCESSED,
    ]


def test_headers():
    assert Column(ColumnKind.PERMISSIONS).header() == "Permissions"
    assert Column(ColumnKind.INODE).header() == "inode"
    assert Column.timestamp(TimeType.ACCESSED).header() == "Date Accessed"
    assert TimeType.CREATED.header() == "Date Created"


def test_alignment():
    assert Column(ColumnKind.FILE_SIZE).alignment() is Alignment.RIGHT
    assert Column(ColumnKind.GIT_STATUS).alignment() is Alignment.RIGHT
    assert Column(ColumnKind.USER).alignment() is Alignment.LEFT


def test_timestamp_column_requires_time_type():
    with pytest.raises(ValueError):
        Column(ColumnKind.TIMESTAMP)
    with pytest.raises(ValueError):
        Column(ColumnKind.USER, TimeType.MODIFIED)


def test_widths_total_invariant():
    widths = TableWidths([3, 0, 7])
    assert widths.total() == len(widths) + sum(widths)
    assert TableWidths.zero(4) == TableWidths([0, 0, 0, 0])


def test_add_widths_keeps_maximum():
    widths = TableWidths.zero(2)
    widths.add_widths(Row([TextCell.paint(Style(), "abc"), TextCell.paint(Style(), "a")]))
    widths.add_widths(Row([TextCell.paint(Style(), "a"), TextCell.paint(Style(), "abcd")]))
    assert list(widths) == [len("abc"), len("abcd")]


def test_header_row_uses_style():
    header_style = BLUE.bold()
    table = Table.from_options(TableOptions(), False, header_style)
    header = table.header_row()
    assert [cell.contents[0].text for cell in header.cells] == [
        "Permissions",
        "Size",
        "User",
        "Date Modified",
    ]
    assert all(cell.contents[0].style == header_style for cell in header.cells)


def test_render_width_matches_total():
    table = Table.from_options(TableOptions(), False, Style())
    table.add_widths(table.header_row())
    rendered = table.render(_plain_row(table))
    assert rendered.width == table.widths.total()
    assert rendered.width == sum(len(part.text) for part in rendered)


def test_render_alignment():
    table = Table.from_options(TableOptions(), False, Style())
    table.add_widths(table.header_row())
    parts = list(table.render(_plain_row(table)))
    # Permissions is left-aligned: text, padding, separator.
    assert parts[0].text == "x"
    assert parts[1].text.strip() == ""
    # Size is right-aligned: padding, text, separator.
    assert parts[3].text.strip() == ""
    assert parts[4].text == "x"


def test_render_too_wide_cell_raises():
    table = Table([Column(ColumnKind.USER)])
    with pytest.raises(ValueError):
        table.render(Row([TextCell.paint(Style(), "wide")]))