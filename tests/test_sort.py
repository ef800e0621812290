import dataclasses
import os
import time
from datetime import datetime

import pytest

from lsdmeta.git_file_status import GitFileStatus, GitStatus
from lsdmeta.meta import Meta
from lsdmeta.options import DirGrouping, Flags, PermissionFlag, SortColumn, SortOrder
from lsdmeta.sort import (
    assemble_sorters,
    by_date,
    by_extension,
    by_git_status,
    by_meta,
    by_name,
    by_size,
    by_version,
    sort_metas,
    version_compare,
    with_dirs_first,
)


def _file(tmp_path, name, content=b""):
    path = tmp_path / name
    path.write_bytes(content)
    return Meta.from_path(path, False, PermissionFlag.RWX)


def _dir(tmp_path, name):
    path = tmp_path / name
    path.mkdir()
    return Meta.from_path(path, False, PermissionFlag.RWX)


def test_by_name_with_dirs_first(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")
    flags = Flags(dir_grouping=DirGrouping.FIRST)
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == 1
    flags.sort_order = SortOrder.REVERSE
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == 1


def test_by_name_with_files_first(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")
    flags = Flags(dir_grouping=DirGrouping.LAST)
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == -1
    flags.sort_order = SortOrder.REVERSE
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == -1


def test_by_name_unordered(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    meta_z = _dir(tmp_path, "zzz")
    flags = Flags(dir_grouping=DirGrouping.NONE)
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == -1
    flags.sort_order = SortOrder.REVERSE
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == 1


def test_by_name_unordered_2(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")
    flags = Flags(dir_grouping=DirGrouping.NONE)
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == 1
    flags.sort_order = SortOrder.REVERSE
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == -1


def test_by_time(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    path_z = tmp_path / "zzz"
    path_z.write_bytes(b"")
    old = time.mktime(datetime(1985, 11, 16).timetuple())
    os.utime(path_z, (old, old))
    meta_z = Meta.from_path(path_z, False, PermissionFlag.RWX)

    flags = Flags(sort_column=SortColumn.TIME)
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == -1
    flags.sort_order = SortOrder.REVERSE
    assert by_meta(assemble_sorters(flags), meta_a, meta_z) == 1


def test_by_extension(tmp_path):
    meta_a = _file(tmp_path, "aaa.rs")
    meta_z = _file(tmp_path, "zzz.rs")
    meta_j = _file(tmp_path, "zzz.js")
    meta_t = _file(tmp_path, "zzz.txt")
    sorters = assemble_sorters(Flags(sort_column=SortColumn.EXTENSION))
    assert by_meta(sorters, meta_a, meta_z) == 0
    assert by_meta(sorters, meta_a, meta_j) == 1
    assert by_meta(sorters, meta_a, meta_t) == -1


def test_by_version(tmp_path):
    meta_a = _file(tmp_path, "2")
    meta_b = _file(tmp_path, "11")
    meta_c = _file(tmp_path, "12")
    sorters = assemble_sorters(Flags(sort_column=SortColumn.VERSION))
    assert by_meta(sorters, meta_b, meta_a) == 1
    assert by_meta(sorters, meta_b, meta_c) == -1


def test_no_sort(tmp_path):
    metas = [
        _file(tmp_path, "aaa.aa"),
        _dir(tmp_path, "aaa"),
        _file(tmp_path, "zzz.zz"),
        _dir(tmp_path, "zzz"),
    ]
    sorters = assemble_sorters(Flags(sort_column=SortColumn.NONE))
    assert sorters == []
    results = {by_meta(sorters, a, b) for a in metas for b in metas}
    assert results == {0}


def test_by_size(tmp_path):
    meta_a = _file(tmp_path, "aaa.aa", b"1, 2, 3")
    meta_b = _file(tmp_path, "bbb.bb", b"1, 2, 3, 4, 5, 6, 7, 8, 9, 10")
    path_c = tmp_path / "ccc.cc"
    os.symlink(tmp_path / "ddd.dd", path_c)
    meta_c = Meta.from_path(path_c, True, PermissionFlag.RWX)

    assert by_size(meta_a, meta_a) == 0
    assert by_size(meta_a, meta_b) == 1
    assert by_size(meta_a, meta_c) == 1
    assert by_size(meta_b, meta_a) == -1
    assert by_size(meta_b, meta_b) == 0
    assert by_size(meta_b, meta_c) == 1
    assert by_size(meta_c, meta_a) == -1
    assert by_size(meta_c, meta_b) == -1
    assert by_size(meta_c, meta_c) == 0


def test_with_dirs_first_direct(tmp_path):
    meta_f = _file(tmp_path, "f")
    meta_d = _dir(tmp_path, "d")
    assert with_dirs_first(meta_d, meta_f) == -1
    assert with_dirs_first(meta_f, meta_d) == 1
    assert with_dirs_first(meta_f, meta_f) == 0


def test_by_name_is_case_insensitive(tmp_path):
    meta_a = _file(tmp_path, "Alpha")
    meta_b = _file(tmp_path, "beta")
    assert by_name(meta_a, meta_b) == -1
    assert by_name(meta_b, meta_a) == 1


def test_by_date_ties_broken_by_name(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    meta_b = _file(tmp_path, "bbb")
    meta_b = dataclasses.replace(meta_b, date=meta_a.date)
    assert by_date(meta_a, meta_b) == -1


def test_by_extension_missing_first(tmp_path):
    meta_none = _file(tmp_path, "README")
    meta_txt = _file(tmp_path, "a.txt")
    assert by_extension(meta_none, meta_txt) == -1


def test_by_git_status(tmp_path):
    meta = _file(tmp_path, "f")
    clean = dataclasses.replace(
        meta, git_status=GitFileStatus(GitStatus.UNMODIFIED, GitStatus.UNMODIFIED)
    )
    modified = dataclasses.replace(
        meta, git_status=GitFileStatus(GitStatus.UNMODIFIED, GitStatus.MODIFIED)
    )
    untracked = dataclasses.replace(meta, git_status=None)
    assert by_git_status(clean, modified) == -1
    assert by_git_status(modified, clean) == 1
    assert by_git_status(untracked, clean) == -1


def test_by_version_direct(tmp_path):
    meta_a = _file(tmp_path, "file1.10")
    meta_b = _file(tmp_path, "file1.9")
    assert by_version(meta_a, meta_b) == 1


def test_sort_metas_orders_list(tmp_path):
    metas = [_file(tmp_path, "b"), _dir(tmp_path, "c"), _file(tmp_path, "a")]
    flags = Flags(dir_grouping=DirGrouping.FIRST)
    result = sort_metas(metas, flags)
    assert [m.name.name for m in result] == ["c", "a", "b"]
    flags.sort_order = SortOrder.REVERSE
    result = sort_metas(metas, flags)
    assert [m.name.name for m in result] == ["c", "b", "a"]