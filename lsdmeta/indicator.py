"""Trailing type indicators such as '/' for directories."""

from __future__ import annotations

from dataclasses import dataclass

from lsdmeta.filetype import FileKind, FileType
from lsdmeta.options import Flags

_SYMBOLS = {
    FileKind.DIRECTORY: "/",
    FileKind.PIPE: "|",
    FileKind.SOCKET: "=",
    FileKind.SYMLINK: "@",
}


@dataclass(frozen=True)
class Indicator:
    symbol: str = ""

    @classmethod
    def from_file_type(cls, file_type: FileType) -> "Indicator":
        if file_type.kind is FileKind.FILE:
            return cls("*" if file_type.exec else "")
        return cls(_SYMBOLS.get(file_type.kind, ""))

    def render(self, flags: Flags) -> str:
        return self.symbol if flags.display_indicators else ""