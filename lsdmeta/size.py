"""Entry sizes and their human-readable rendering."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lsdmeta.options import Elem, Flags, PlainColors, SizeFlag

KB = 1024
MB = 1024**2
GB = 1024**3
TB = 1024**4


class Unit(Enum):
    BYTE = 1
    KILO = KB
    MEGA = MB
    GIGA = GB
    TERA = TB


_LONG_UNITS = {
    Unit.BYTE: "B",
    Unit.KILO: "KB",
    Unit.MEGA: "MB",
    Unit.GIGA: "GB",
    Unit.TERA: "TB",
}

_SHORT_UNITS = {
    Unit.BYTE: "B",
    Unit.KILO: "K",
    Unit.MEGA: "M",
    Unit.GIGA: "G",
    Unit.TERA: "T",
}


def _format_size(number: float) -> str:
    return f"{number:.1f}" if number < 10.0 else f"{number:.0f}"


@dataclass(frozen=True)
class Size:
    """A size in bytes."""

    bytes: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Size":
        return cls(st.st_size)

    def _unit(self, flags: Flags) -> Unit:
        if flags.size is SizeFlag.BYTES:
            return Unit.BYTE
        if self.bytes < KB:
            return Unit.BYTE
        if self.bytes < MB:
            return Unit.KILO
        if self.bytes < GB:
            return Unit.MEGA
        if self.bytes < TB:
            return Unit.GIGA
        return Unit.TERA

    def _paint(self, colors: PlainColors, content: str) -> str:
        if self.bytes >= GB:
            elem = Elem.FILE_LARGE
        elif self.bytes >= MB:
            elem = Elem.FILE_MEDIUM
        else:
            elem = Elem.FILE_SMALL
        return colors.colorize(content, elem)

    def value_string(self, flags: Flags) -> str:
        unit = self._unit(flags)
        if unit is Unit.BYTE:
            return str(self.bytes)
        # Round half away from zero to one decimal place.
        rounded = math.floor(self.bytes / unit.value * 10.0 + 0.5) / 10.0
        return _format_size(rounded)

    def unit_string(self, flags: Flags) -> str:
        unit = self._unit(flags)
        if flags.size is SizeFlag.SHORT:
            return _SHORT_UNITS[unit]
        if flags.size is SizeFlag.BYTES:
            return ""
        return _LONG_UNITS[unit]

    def render_value(self, colors: PlainColors, flags: Flags) -> str:
        return self._paint(colors, self.value_string(flags))

    def render_unit(self, colors: PlainColors, flags: Flags) -> str:
        return self._paint(colors, self.unit_string(flags))

    def render(
        self, colors: PlainColors, flags: Flags, val_alignment: Optional[int] = None
    ) -> str:
        """Render value and unit, right-aligning the value to val_alignment."""
        value = self.value_string(flags)
        left_pad = "" if val_alignment is None else " " * (val_alignment - len(value))
        separator = "" if flags.size is SizeFlag.SHORT else " "
        return (
            left_pad
            + self._paint(colors, value)
            + separator
            + self.render_unit(colors, flags)
        )