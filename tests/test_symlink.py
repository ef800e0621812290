import os

from lsdmeta.options import Elem, Flags, PlainColors
from lsdmeta.symlink import SymLink


def test_symlink_render_default_valid_target_nocolor():
    link = SymLink("/target", True)
    assert link.render(PlainColors(), Flags()) == " ⇒ /target"


def test_symlink_render_default_invalid_target_nocolor():
    link = SymLink("/target", False)
    assert link.render(PlainColors(), Flags()) == " ⇒ /target"


def test_symlink_render_default_invalid_target_withcolor():
    link = SymLink("/target", False)
    colors = PlainColors({Elem.MISSING_SYMLINK_TARGET: 124, Elem.SYMLINK: 44})
    assert link.render(colors, Flags()) == " ⇒ \x1b[38;5;124m/target\x1b[39m"


def test_not_a_link_renders_nothing(tmp_path):
    path = tmp_path / "plain"
    path.touch()
    link = SymLink.from_path(path)
    assert link.symlink_string() is None
    assert link.valid is False
    assert link.render(PlainColors(), Flags()) == ""


def test_relative_valid_link(tmp_path):
    (tmp_path / "real").touch()
    os.symlink("real", tmp_path / "alias")
    link = SymLink.from_path(tmp_path / "alias")
    assert link == SymLink("real", True)
    assert link.symlink_string() == "real"


def test_broken_link(tmp_path):
    os.symlink(tmp_path / "missing", tmp_path / "alias")
    link = SymLink.from_path(tmp_path / "alias")
    assert link.target == str(tmp_path / "missing")
    assert link.valid is False


def test_custom_arrow():
    link = SymLink("dest", True)
    assert link.render(PlainColors(), Flags(symlink_arrow="->")) == " -> dest"