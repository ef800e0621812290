import os

from lsdmeta.inode import INode
from lsdmeta.options import Elem, PlainColors


def test_inode_matches_stat(tmp_path):
    path = tmp_path / "inode.tmp"
    path.touch()
    st = path.stat()
    inode = INode.from_stat(st)
    expected = None if os.name == "nt" else st.st_ino
    assert inode.index == expected


def test_render_valid():
    colors = PlainColors({Elem.INODE_VALID: 13})
    assert INode(1234).render(colors) == "\x1b[38;5;13m1234\x1b[39m"


def test_render_invalid():
    colors = PlainColors({Elem.INODE_INVALID: 245})
    assert INode(None).render(colors) == "\x1b[38;5;245m-\x1b[39m"
    assert INode(None).render(PlainColors()) == "-"