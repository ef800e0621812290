# lsdmeta

`lsdmeta` collects metadata about files and directories and renders it the
way a colourful `ls`-style listing shows it: file type, permissions, owner and
group, size, modification date, inode, hard-link count, symlink target, ACL
and security-context markers, git status, type indicators and the file name
itself. It also provides the comparison rules used to sort such a listing.

It has no dependencies beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Gather metadata for a path and render some of its columns. Every `render`
method returns a plain `str`:

```python
from lsdmeta.meta import Meta
from lsdmeta.options import Flags, PermissionFlag, PlainColors

meta = Meta.from_path("README.md", False, PermissionFlag.RWX)
colors = PlainColors()          # an empty palette gives uncoloured text
flags = Flags()

print(meta.permissions_or_attributes.render(colors, flags))  # e.g. "rw-r--r--"
print(meta.size.render(colors, flags, None))                  # e.g. "2.1 KB"
print(meta.date.render(colors, flags))
print(meta.name.render(colors))
```

`Meta.from_path` raises `OSError` when the path cannot be read. With
`PermissionFlag.DISABLE` neither owner nor permissions are collected; with
`dereference=True` a symlink is described by its target, and a broken link
gets no size, date, owner, permissions, inode, links or access-control data.

### Colours

`PlainColors` takes a palette that maps an `Elem` (or any hashable key) to an
ANSI colour. An `int` selects a 256-colour foreground, a `str` is used as raw
SGR parameters; elements not in the palette stay uncoloured.

```python
from lsdmeta.options import Elem, PlainColors

colors = PlainColors({Elem.DIR: 33, Elem.EXEC_FILE: "1;32"})
```

Git status symbols are coloured under the key `(Elem.GIT_STATUS, status)`;
`GitFileStatus.render` takes a mapping from `GitStatus` to the symbol to show.

### Walking and sorting

```python
from lsdmeta.meta import Meta
from lsdmeta.options import DirGrouping, Flags, PermissionFlag, SortColumn
from lsdmeta.sort import sort_metas

flags = Flags(sort_column=SortColumn.SIZE, dir_grouping=DirGrouping.FIRST)

root = Meta.from_path(".", False, PermissionFlag.RWX)
content, exit_code = root.recurse_into(1, flags, None)
for entry in sort_metas(content or [], flags):
    print(entry.name.name)
```

`recurse_into` honours `Flags.display` (hidden entries, `.` and `..`),
`Flags.ignore_globs`, `Flags.layout` and `Flags.dereference`, and returns the
worst `ExitCode` met. Its optional third argument is any object with a
`get(path, is_directory)` method returning a `GitFileStatus` or `None`.
`Meta.calculate_total_size` replaces a directory's size with the total of
everything beneath it.

`lsdmeta.sort` offers `assemble_sorters`, `by_meta` and `sort_metas`, the
individual comparisons `by_name`, `by_size`, `by_date`, `by_version`,
`by_extension`, `by_git_status` and `with_dirs_first`, and
`version_compare` for natural ordering of names such as `2` < `11` < `12`.

## Modules

- `lsdmeta.options` – `Flags`, the option enums, `Elem` and `PlainColors`.
- `lsdmeta.filetype`, `lsdmeta.permissions`, `lsdmeta.size`, `lsdmeta.inode`,
  `lsdmeta.links`, `lsdmeta.owner`, `lsdmeta.access_control`, `lsdmeta.date`,
  `lsdmeta.symlink`, `lsdmeta.indicator`, `lsdmeta.git_file_status`,
  `lsdmeta.name`, `lsdmeta.attributes` – the individual columns.
- `lsdmeta.meta` – `Meta`, which ties the columns together for one path,
  and `ExitCode`.
- `lsdmeta.sort` – the sorting rules.

## What it does not do

This is a library only. It has no command-line program and does not lay
entries out in grids, trees or tables, parse command-line options, read
configuration or theme files, honour `LS_COLORS`, or choose file icons (an
icon is passed to `Name.render` as a string). It does not read git
repositories itself: git status comes from the cache object the caller
passes to `recurse_into`.