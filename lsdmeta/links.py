"""Hard link counts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from lsdmeta.options import Elem, PlainColors


@dataclass(frozen=True)
class Links:
    nlink: Optional[int] = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Links":
        if os.name == "nt":
            return cls(None)
        return cls(st.st_nlink)

    def render(self, colors: PlainColors) -> str:
        if self.nlink is None:
            return colors.colorize("-", Elem.links(False))
        return colors.colorize(str(self.nlink), Elem.links(True))