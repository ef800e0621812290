"""The type of a filesystem entry."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lsdmeta.options import Elem, PlainColors
from lsdmeta.permissions import Permissions


class FileKind(Enum):
    BLOCK_DEVICE = "block-device"
    CHAR_DEVICE = "char-device"
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SOCKET = "socket"
    SPECIAL = "special"


_RENDER = {
    FileKind.PIPE: ("|", Elem.PIPE),
    FileKind.SYMLINK: ("l", Elem.SYMLINK),
    FileKind.BLOCK_DEVICE: ("b", Elem.BLOCK_DEVICE),
    FileKind.CHAR_DEVICE: ("c", Elem.CHAR_DEVICE),
    FileKind.SOCKET: ("s", Elem.SOCKET),
    FileKind.SPECIAL: ("?", Elem.SPECIAL),
}


@dataclass(frozen=True)
class FileType:
    """An entry's kind with its setuid, executable and link-to-dir details."""

    kind: FileKind
    uid: bool = False
    exec: bool = False
    is_dir: bool = False

    @classmethod
    def from_stat(
        cls,
        st: os.stat_result,
        target_st: Optional[os.stat_result] = None,
        permissions: Optional[Permissions] = None,
    ) -> "FileType":
        """Classify an entry from its stat result.

        target_st is the stat of a symlink's target, or None when the link is
        broken or the entry is not a link.
        """
        mode = st.st_mode
        uid = permissions.setuid if permissions is not None else False
        if stat.S_ISREG(mode):
            executable = permissions.is_executable() if permissions is not None else False
            return cls(FileKind.FILE, uid=uid, exec=executable)
        if stat.S_ISDIR(mode):
            return cls(FileKind.DIRECTORY, uid=uid)
        if stat.S_ISFIFO(mode):
            return cls(FileKind.PIPE)
        if stat.S_ISLNK(mode):
            points_to_dir = target_st is not None and stat.S_ISDIR(target_st.st_mode)
            return cls(FileKind.SYMLINK, is_dir=points_to_dir)
        if stat.S_ISCHR(mode):
            return cls(FileKind.CHAR_DEVICE)
        if stat.S_ISBLK(mode):
            return cls(FileKind.BLOCK_DEVICE)
        if stat.S_ISSOCK(mode):
            return cls(FileKind.SOCKET)
        return cls(FileKind.SPECIAL)

    def is_dirlike(self) -> bool:
        """True for directories and for symlinks that point to a directory."""
        return self.kind is FileKind.DIRECTORY or (
            self.kind is FileKind.SYMLINK and self.is_dir
        )

    def render(self, colors: PlainColors) -> str:
        if self.kind is FileKind.FILE:
            return colors.colorize(".", Elem.file(self.exec, False))
        if self.kind is FileKind.DIRECTORY:
            return colors.colorize("d", Elem.dir(False))
        symbol, elem = _RENDER[self.kind]
        return colors.colorize(symbol, elem)