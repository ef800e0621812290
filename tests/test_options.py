import pytest

from lsdmeta.options import (
    DirGrouping,
    Elem,
    Flags,
    HyperlinkOption,
    PermissionFlag,
    PlainColors,
    SizeFlag,
    SortColumn,
    SortOrder,
)


def test_empty_palette_leaves_text_plain():
    colors = PlainColors()
    assert colors.colorize("file.txt", Elem.FILE) == "file.txt"


def test_int_palette_value_uses_256_colour():
    colors = PlainColors({Elem.MISSING_SYMLINK_TARGET: 124})
    assert colors.colorize("/target", Elem.MISSING_SYMLINK_TARGET) == (
        "\x1b[38;5;124m/target\x1b[39m"
    )


def test_missing_element_is_not_coloured():
    colors = PlainColors({Elem.DIR: 33})
    assert colors.colorize("x", Elem.FILE) == "x"


def test_string_palette_value_is_raw_sgr():
    colors = PlainColors({Elem.ACL: "36"})
    out = colors.colorize("+", Elem.ACL)
    assert out.startswith("\x1b[36m")
    assert out.endswith("+\x1b[39m")


def test_colorize_using_path_matches_colorize():
    colors = PlainColors({Elem.DIR: 33})
    assert colors.colorize_using_path("d", "/tmp", Elem.DIR) == colors.colorize(
        "d", Elem.DIR
    )


def test_colorize_accepts_tuple_keys():
    key = (Elem.GIT_STATUS, "modified")
    colors = PlainColors({key: 40})
    assert colors.colorize("M", key) == "\x1b[38;5;40mM\x1b[39m"


@pytest.mark.parametrize(
    "exec_, uid, expected",
    [
        (False, False, Elem.FILE),
        (True, False, Elem.EXEC_FILE),
        (False, True, Elem.UID_FILE),
        (True, True, Elem.EXEC_UID_FILE),
    ],
)
def test_elem_file(exec_, uid, expected):
    assert Elem.file(exec_, uid) is expected


def test_elem_helpers():
    assert Elem.dir(False) is Elem.DIR
    assert Elem.dir(True) is Elem.UID_DIR
    assert Elem.inode(True) is Elem.INODE_VALID
    assert Elem.inode(False) is Elem.INODE_INVALID
    assert Elem.links(True) is Elem.LINKS_VALID
    assert Elem.links(False) is Elem.LINKS_INVALID


def test_flags_defaults():
    flags = Flags()
    assert flags.size is SizeFlag.DEFAULT
    assert flags.permission is PermissionFlag.RWX
    assert flags.sort_column is SortColumn.NAME
    assert flags.sort_order is SortOrder.DEFAULT
    assert flags.dir_grouping is DirGrouping.NONE
    assert flags.hyperlink is HyperlinkOption.NEVER
    assert flags.symlink_arrow == "\u21d2"
    assert flags.display_indicators is False