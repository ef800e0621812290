"""Ordering of entries by name, size, date, version, extension and git status."""

from __future__ import annotations

import functools
import re
from itertools import zip_longest
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from lsdmeta.meta import Meta
from lsdmeta.options import DirGrouping, Flags, SortColumn, SortOrder

SortFn = Callable[[Meta, Meta], int]
Sorter = Tuple[SortOrder, SortFn]

T = TypeVar("T")

_CHUNK = re.compile(r"([^0-9]*)([0-9]*)")
_SUFFIX = re.compile(r"(?:\.[A-Za-z~][A-Za-z0-9~]*)*$")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _cmp_optional(a: Optional[T], b: Optional[T]) -> int:
    """Compare optional values with a missing value ordered first."""
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return _cmp(a, b)


def _char_order(char: str) -> int:
    if char.isascii() and char.isalpha():
        return ord(char)
    if char == "~":
        return -1
    return ord(char) + 256


def _compare_text_chunk(a: str, b: str) -> int:
    for left, right in zip_longest(a, b):
        left_order = 0 if left is None else _char_order(left)
        right_order = 0 if right is None else _char_order(right)
        if left_order != right_order:
            return _cmp(left_order, right_order)
    return 0


def _compare_digit_chunk(a: str, b: str) -> int:
    return _cmp(int(a or "0"), int(b or "0"))


def _verrevcmp(a: str, b: str) -> int:
    """Compare alternating text and number runs, numbers by value."""
    for (text_a, num_a), (text_b, num_b) in zip_longest(
        _CHUNK.findall(a), _CHUNK.findall(b), fillvalue=("", "")
    ):
        result = _compare_text_chunk(text_a, text_b) or _compare_digit_chunk(num_a, num_b)
        if result:
            return result
    return 0


def _strip_suffix(name: str) -> str:
    match = _SUFFIX.search(name)
    return name[: match.start()] if match else name


def version_compare(a: str, b: str) -> int:
    """Natural version ordering of two file names; returns -1, 0 or 1."""
    if a == b:
        return 0
    if not a:
        return -1
    if not b:
        return 1
    for special in (".", ".."):
        if a == special:
            return -1
        if b == special:
            return 1
    a_hidden, b_hidden = a.startswith("."), b.startswith(".")
    if a_hidden and not b_hidden:
        return -1
    if b_hidden and not a_hidden:
        return 1
    if a_hidden and b_hidden:
        a, b = a[1:], b[1:]
    result = _verrevcmp(_strip_suffix(a), _strip_suffix(b)) or _verrevcmp(a, b)
    return _cmp(result, 0) if result else _cmp(a, b)


def with_dirs_first(a: Meta, b: Meta) -> int:
    return _cmp(b.file_type.is_dirlike(), a.file_type.is_dirlike())


def by_size(a: Meta, b: Meta) -> int:
    """Larger first; an entry without a size sorts before one with a size."""
    if a.size is not None and b.size is not None:
        return _cmp(b.size.bytes, a.size.bytes)
    if a.size is not None:
        return 1
    if b.size is not None:
        return -1
    return 0


def by_name(a: Meta, b: Meta) -> int:
    return _cmp(a.name, b.name)


def by_date(a: Meta, b: Meta) -> int:
    """Newest first, then by name."""
    return _cmp_optional(b.date, a.date) or by_name(a, b)


def by_version(a: Meta, b: Meta) -> int:
    return version_compare(a.name.name, b.name.name)


def by_extension(a: Meta, b: Meta) -> int:
    return _cmp_optional(a.name.extension(), b.name.extension())


def by_git_status(a: Meta, b: Meta) -> int:
    return _cmp_optional(a.git_status, b.git_status)


_COLUMN_SORTERS = {
    SortColumn.NAME: by_name,
    SortColumn.SIZE: by_size,
    SortColumn.TIME: by_date,
    SortColumn.VERSION: by_version,
    SortColumn.EXTENSION: by_extension,
    SortColumn.GIT_STATUS: by_git_status,
}


def assemble_sorters(flags: Flags) -> List[Sorter]:
    """The comparison functions, with their directions, that flags ask for."""
    sorters: List[Sorter] = []
    if flags.dir_grouping is DirGrouping.FIRST:
        sorters.append((SortOrder.DEFAULT, with_dirs_first))
    elif flags.dir_grouping is DirGrouping.LAST:
        sorters.append((SortOrder.REVERSE, with_dirs_first))
    column_sorter = _COLUMN_SORTERS.get(flags.sort_column)
    if column_sorter is not None:
        sorters.append((flags.sort_order, column_sorter))
    return sorters


def by_meta(sorters: Iterable[Sorter], a: Meta, b: Meta) -> int:
    """Compare with the first sorter that tells the entries apart."""
    for direction, sorter in sorters:
        result = sorter(a, b)
        if result:
            return -result if direction is SortOrder.REVERSE else result
    return 0


def sort_metas(metas: Iterable[Meta], flags: Flags) -> List[Meta]:
    """Return the entries sorted as flags ask; the sort is stable."""
    sorters = assemble_sorters(flags)
    return sorted(metas, key=functools.cmp_to_key(lambda a, b: by_meta(sorters, a, b)))