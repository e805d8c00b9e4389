# lsview

Building blocks for rendering file listings in a terminal. The package
provides:

- ANSI-styled text cells that know their display width;
- tree-drawing characters;
- padded, aligned tables;
- renderers for the usual detail columns: permissions, sizes, owners,
  groups, links, inodes, blocks, Git status and timestamps;
- icon glyphs for file names.

## Installation

```
pip install lsview
```

## Styles and cells

`lsview.style` defines `Colour` and `Style`. The eight basic colours are
module constants: `BLACK`, `RED`, `GREEN`, `YELLOW`, `BLUE`, `PURPLE`,
`CYAN` and `WHITE`. `fixed(n)` picks a colour from the 256-colour palette.

```python
from lsview.style import RED, fixed
from lsview.cell import TextCell, display_width

cell = TextCell.paint(RED.bold(), "README.md")
cell.add_spaces(2)
print(cell.width)             # 11
print(display_width("漢字"))   # 4: two characters, each two columns wide
print(cell.contents.strings())
```

`paint_strings` joins a sequence of `ANSIString`s and emits only the escape
codes that change from one string to the next.

`TextCell.blank(style)` returns a cell holding a single hyphen, for use where
a column has no value. `TextCellContents.promote()` turns a list of styled
strings into a cell that carries its computed width.

`lsview.escape.escape(string, good, bad)` paints a string in the `good`
style. Control characters in it are written as escape sequences painted in
the `bad` style.

## Trees

```python
from lsview.tree import TreeTrunk, TreeDepth

trunk = TreeTrunk()
for params, name in TreeDepth.root().deeper().iterate_over(["a", "b", "c"]):
    parts = trunk.new_row(params)
    print("".join(p.ascii_art() for p in parts), name)
```

`iterate_over` marks the last item of each group. `TreeTrunk.new_row`
returns the `TreePart`s to draw before each row. The zeroth level is never
drawn.

## Tables

`lsview.table` holds the table itself:

- `Columns.collect(actually_enable_git)` decides which columns are shown and
  in what order.
- `Table.from_options(options, git_enabled, header_style)` builds a table
  from `TableOptions`.
- `Table.header_row()` gives the header cells.
- `Table.add_widths(row)` grows each column to fit a row.
- `Table.render(row)` pads every cell to its column's width. Numbers are
  aligned right and text is aligned left, and each cell is followed by one
  space.
- `TableWidths.total()` is the sum of the column widths plus one separator
  per column.

## Column renderers

Each detail column has a renderer under `lsview.render`. A renderer takes a
value and a colour scheme, and returns a `TextCell`:

- `render_size(size, colours, size_format, numerics)` shows decimal
  prefixes, binary prefixes or plain byte counts (`SizeFormat`). It shows
  `DeviceIDs` as `major,minor`, and a hyphen when the size is `None`.
- `Permissions.render`, `PermissionsPlus.render`, `Attributes.render` and
  `OctalPermissions.render` show permission bits, including
  setuid/setgid/sticky.
- `render_user` and `render_group` look names up through `SystemUsers`, or
  through any object with the same methods, such as `MockUsers`. The current
  user and their groups are highlighted.
- `Links.render`, `render_blocks`, `render_inode`, `Git.render` and
  `FileType.render` cover the remaining columns.
- `render_time(time, style, tz, format)` formats a nanosecond timestamp with
  a `TimeFormat`: default, ISO, long ISO or full ISO. It uses the given time
  zone when there is one. `lsview.time.determine_time_zone()` loads the zone
  named by `TZ`, or `/etc/localtime`.

Numbers are grouped according to a `NumericLocale`. For example,
`NumericLocale.english().format_int(3005)` gives `"3,005"`.
`NumericLocale.load_user_locale()` reads the separators from the user's
locale.

## Terminal width

`TerminalWidth.exact(n)` always gives `n` columns.
`TerminalWidth.automatic().actual_terminal_width()` asks the terminal on
standard output, and returns `None` when there is no terminal.

## Icons

`icon_for_file(name, points_to_directory, ext)` picks a Nerd Font glyph for a
file. It looks first at the full name, then at whether the file is a
directory, then at the extension. `iconify_style(style)` turns a file-name
style into one for its icon.

## What this package does not do

lsview does not read directories, stat files, or query Git. It has no
command-line program, no grid layout, and no painting of complete file
names with link targets. It renders values that the caller has already
gathered.