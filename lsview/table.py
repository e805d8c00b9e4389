"""Columns, rows and widths of the details table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from .cell import TextCell
from .style import Style
from .time import TimeFormat


class SizeFormat(Enum):
    """How file sizes are written."""

    DECIMAL_BYTES = "decimal"
    BINARY_BYTES = "binary"
    JUST_BYTES = "bytes"


class UserFormat(Enum):
    """Whether users and groups are shown by name or by number."""

    NUMERIC = "numeric"
    NAME = "name"


class TimeType(Enum):
    """Which of a file's timestamps a column shows."""

    MODIFIED = "modified"
    CHANGED = "changed"
    ACCESSED = "accessed"
    CREATED = "created"

    def header(self) -> str:
        return _TIME_HEADERS[self]


_TIME_HEADERS = {
    TimeType.MODIFIED: "Date Modified",
    TimeType.CHANGED: "Date Changed",
    TimeType.ACCESSED: "Date Accessed",
    TimeType.CREATED: "Date Created",
}


@dataclass(frozen=True)
class TimeTypes:
    """Which timestamp columns to show; by default only the modified time."""

    modified: bool = True
    changed: bool = False
    accessed: bool = False
    created: bool = False


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"


class ColumnKind(Enum):
    PERMISSIONS = "permissions"
    FILE_SIZE = "file_size"
    TIMESTAMP = "timestamp"
    BLOCKS = "blocks"
    USER = "user"
    GROUP = "group"
    HARD_LINKS = "hard_links"
    INODE = "inode"
    GIT_STATUS = "git_status"
    OCTAL = "octal"


_HEADERS = {
    ColumnKind.PERMISSIONS: "Permissions",
    ColumnKind.FILE_SIZE: "Size",
    ColumnKind.BLOCKS: "Blocks",
    ColumnKind.USER: "User",
    ColumnKind.GROUP: "Group",
    ColumnKind.HARD_LINKS: "Links",
    ColumnKind.INODE: "inode",
    ColumnKind.GIT_STATUS: "Git",
    ColumnKind.OCTAL: "Octal",
}

_RIGHT_ALIGNED = frozenset(
    {
        ColumnKind.FILE_SIZE,
        ColumnKind.HARD_LINKS,
        ColumnKind.INODE,
        ColumnKind.BLOCKS,
        ColumnKind.GIT_STATUS,
    }
)


@dataclass(frozen=True)
class Column:
    """One column of the table; timestamp columns also carry their time type."""

    kind: ColumnKind
    time_type: Optional[TimeType] = None

    def __post_init__(self) -> None:
        if (self.kind is ColumnKind.TIMESTAMP) != (self.time_type is not None):
            raise ValueError("a time type is given exactly for timestamp columns")

    @classmethod
    def timestamp(cls, time_type: TimeType) -> Column:
        return cls(ColumnKind.TIMESTAMP, time_type)

    def alignment(self) -> Alignment:
        """Numbers are right-aligned, text is left-aligned."""
        return Alignment.RIGHT if self.kind in _RIGHT_ALIGNED else Alignment.LEFT

    def header(self) -> str:
        """The text shown in the header row."""
        if self.time_type is not None:
            return self.time_type.header()
        return _HEADERS[self.kind]


@dataclass(frozen=True)
class Columns:
    """Which columns the user asked for."""

    time_types: TimeTypes = field(default_factory=TimeTypes)
    inode: bool = False
    links: bool = False
    blocks: bool = False
    group: bool = False
    git: bool = False
    octal: bool = False
    permissions: bool = True
    filesize: bool = True
    user: bool = True

    def collect(self, actually_enable_git: bool) -> list[Column]:
        """The columns to show, in display order."""
        wanted = [
            (self.inode, Column(ColumnKind.INODE)),
            (self.octal, Column(ColumnKind.OCTAL)),
            (self.permissions, Column(ColumnKind.PERMISSIONS)),
            (self.links, Column(ColumnKind.HARD_LINKS)),
            (self.filesize, Column(ColumnKind.FILE_SIZE)),
            (self.blocks, Column(ColumnKind.BLOCKS)),
            (self.user, Column(ColumnKind.USER)),
            (self.group, Column(ColumnKind.GROUP)),
            (self.time_types.modified, Column.timestamp(TimeType.MODIFIED)),
            (self.time_types.changed, Column.timestamp(TimeType.CHANGED)),
            (self.time_types.created, Column.timestamp(TimeType.CREATED)),
            (self.time_types.accessed, Column.timestamp(TimeType.ACCESSED)),
            (self.git and actually_enable_git, Column(ColumnKind.GIT_STATUS)),
        ]
        return [column for enabled, column in wanted if enabled]


@dataclass(frozen=True)
class TableOptions:
    """Options for drawing a table."""

    size_format: SizeFormat = SizeFormat.DECIMAL_BYTES
    time_format: TimeFormat = TimeFormat.DEFAULT_FORMAT
    user_format: UserFormat = UserFormat.NAME
    columns: Columns = field(default_factory=Columns)


@dataclass
class Row:
    """The cells of one table row, one per column."""

    cells: list[TextCell] = field(default_factory=list)


class TableWidths:
    """The width of each column, grown to fit every row added."""

    def __init__(self, widths: list[int]) -> None:
        self._widths = list(widths)

    @classmethod
    def zero(cls, count: int) -> TableWidths:
        return cls([0] * count)

    def __iter__(self) -> Iterator[int]:
        return iter(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __getitem__(self, index: int) -> int:
        return self._widths[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableWidths):
            return NotImplemented
        return self._widths == other._widths

    def __repr__(self) -> str:
        return f"TableWidths({self._widths!r})"

    def add_widths(self, row: Row) -> None:
        self._widths = [
            max(old, cell.width) for old, cell in zip(self._widths, row.cells)
        ] + self._widths[len(row.cells):]

    def total(self) -> int:
        """The combined width of all columns, with one separating space each."""
        return len(self._widths) + sum(self._widths)


class Table:
    """Lays out rows of cells into padded, aligned columns."""

    def __init__(
        self,
        columns: list[Column],
        header_style: Style = Style(),
        time_format: TimeFormat = TimeFormat.DEFAULT_FORMAT,
        size_format: SizeFormat = SizeFormat.DECIMAL_BYTES,
        user_format: UserFormat = UserFormat.NAME,
    ) -> None:
        self.columns = list(columns)
        self.header_style = header_style
        self.time_format = time_format
        self.size_format = size_format
        self.user_format = user_format
        self.widths = TableWidths.zero(len(self.columns))

    @classmethod
    def from_options(
        cls, options: TableOptions, git_enabled: bool, header_style: Style
    ) -> Table:
        return cls(
            options.columns.collect(git_enabled),
            header_style,
            options.time_format,
            options.size_format,
            options.user_format,
        )

    def header_row(self) -> Row:
        return Row([TextCell.paint(self.header_style, column.header()) for column in self.columns])

    def add_widths(self, row: Row) -> None:
        self.widths.add_widths(row)

    def render(self, row: Row) -> TextCell:
        """Pad and align a row's cells into one cell, each followed by a space."""
        cell = TextCell()
        for column, this_cell, width in zip(self.columns, row.cells, self.widths):
            padding = width - this_cell.width
            if padding < 0:
                raise ValueError(
                    f"cell of width {this_cell.width} does not fit column of width {width}"
                )
            if column.alignment() is Alignment.LEFT:
                cell.append(this_cell)
                cell.add_spaces(padding)
            else:
                cell.add_spaces(padding)
                cell.append(this_cell)
            cell.add_spaces(1)
        return cell