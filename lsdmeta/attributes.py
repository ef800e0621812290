"""Windows file attributes: archive, read-only, hidden and system."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass

from lsdmeta.options import Elem, Flags, PlainColors


@dataclass(frozen=True)
class WindowsAttributes:
    archive: bool = False
    readonly: bool = False
    hidden: bool = False
    system: bool = False

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "WindowsAttributes":
        """Read the attribute bits; a stat without them has none set."""
        bits = getattr(st, "st_file_attributes", 0) or 0

        def has(bit: int) -> bool:
            return bits & bit == bit

        return cls(
            archive=has(stat.FILE_ATTRIBUTE_ARCHIVE),
            readonly=has(stat.FILE_ATTRIBUTE_READONLY),
            hidden=has(stat.FILE_ATTRIBUTE_HIDDEN),
            system=has(stat.FILE_ATTRIBUTE_SYSTEM),
        )

    def render(self, colors: PlainColors, flags: Flags) -> str:
        parts = (
            (self.archive, "a", Elem.ARCHIVE),
            (self.readonly, "r", Elem.ATTRIBUTE_READ),
            (self.hidden, "h", Elem.HIDDEN),
            (self.system, "s", Elem.SYSTEM),
        )
        return "".join(
            colors.colorize(letter, elem) if on else colors.colorize("-", Elem.NO_ACCESS)
            for on, letter, elem in parts
        )