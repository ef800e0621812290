"""Unix permission bits and their rendering."""

from __future__ import annotations

import stat
from dataclasses import dataclass

from lsdmeta.options import Elem, Flags, PermissionFlag, PlainColors


@dataclass(frozen=True)
class Permissions:
    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> "Permissions":
        """Read the permission bits from a stat mode."""
        return cls(
            user_read=bool(mode & stat.S_IRUSR),
            user_write=bool(mode & stat.S_IWUSR),
            user_execute=bool(mode & stat.S_IXUSR),
            group_read=bool(mode & stat.S_IRGRP),
            group_write=bool(mode & stat.S_IWGRP),
            group_execute=bool(mode & stat.S_IXGRP),
            other_read=bool(mode & stat.S_IROTH),
            other_write=bool(mode & stat.S_IWOTH),
            other_execute=bool(mode & stat.S_IXOTH),
            sticky=bool(mode & stat.S_ISVTX),
            setgid=bool(mode & stat.S_ISGID),
            setuid=bool(mode & stat.S_ISUID),
        )

    def render(self, colors: PlainColors, flags: Flags) -> str:
        if flags.permission is PermissionFlag.RWX:
            return "".join(self._rwx(colors))
        if flags.permission is PermissionFlag.OCTAL:
            digits = (
                _octal(self.setuid, self.setgid, self.sticky),
                _octal(self.user_read, self.user_write, self.user_execute),
                _octal(self.group_read, self.group_write, self.group_execute),
                _octal(self.other_read, self.other_write, self.other_execute),
            )
            return colors.colorize("".join(map(str, digits)), Elem.OCTAL)
        return colors.colorize("-", Elem.NO_ACCESS)

    def _rwx(self, colors: PlainColors):
        triples = (
            (self.user_read, self.user_write, self.user_execute, self.setuid, "s"),
            (self.group_read, self.group_write, self.group_execute, self.setgid, "s"),
            (self.other_read, self.other_write, self.other_execute, self.sticky, "t"),
        )
        for read, write, execute, special, letter in triples:
            yield _bit(colors, read, "r", Elem.READ)
            yield _bit(colors, write, "w", Elem.WRITE)
            if special:
                yield colors.colorize(letter if execute else letter.upper(), Elem.EXEC_STICKY)
            else:
                yield _bit(colors, execute, "x", Elem.EXEC)

    def is_executable(self) -> bool:
        return self.user_execute or self.group_execute or self.other_execute


def _bit(colors: PlainColors, on: bool, char: str, elem: Elem) -> str:
    return colors.colorize(char, elem) if on else colors.colorize("-", Elem.NO_ACCESS)


def _octal(r: bool, w: bool, x: bool) -> int:
    return int(r) * 4 + int(w) * 2 + int(x)