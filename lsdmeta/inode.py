"""Inode numbers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from lsdmeta.options import Elem, PlainColors


@dataclass(frozen=True)
class INode:
    index: Optional[int] = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "INode":
        if os.name == "nt":
            return cls(None)
        return cls(st.st_ino)

    def render(self, colors: PlainColors) -> str:
        if self.index is None:
            return colors.colorize("-", Elem.inode(False))
        return colors.colorize(str(self.index), Elem.inode(True))