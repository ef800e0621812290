"""Symbolic link targets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from lsdmeta.options import Elem, Flags, PlainColors


@dataclass(frozen=True)
class SymLink:
    """The target of a link, if the entry is one, and whether it exists."""

    target: Optional[str] = None
    valid: bool = False

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "SymLink":
        try:
            target = os.readlink(path)
        except (OSError, ValueError):
            return cls(None, False)
        target = os.fspath(target)
        # A relative target is resolved against the link's own directory.
        resolved = os.path.join(os.path.dirname(os.fspath(path)), target)
        return cls(target, os.path.exists(resolved))

    def symlink_string(self) -> Optional[str]:
        return self.target

    def render(self, colors: PlainColors, flags: Flags) -> str:
        if self.target is None:
            return ""
        elem = Elem.SYMLINK if self.valid else Elem.MISSING_SYMLINK_TARGET
        return f" {flags.symlink_arrow} " + colors.colorize(self.target, elem)