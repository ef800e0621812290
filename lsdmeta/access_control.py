"""ACL and security-context indicators."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from lsdmeta.options import Elem, PlainColors

_ACL_ATTR = "system.posix_acl_access"
_SELINUX_ATTR = "security.selinux"
_SMACK_ATTR = "security.SMACK64"


def _read_xattr(path: Union[str, "os.PathLike[str]"], name: str) -> bytes:
    try:
        return os.getxattr(path, name)  # type: ignore[attr-defined]
    except OSError:
        return b""


@dataclass(frozen=True)
class AccessControl:
    has_acl: bool = False
    selinux_context: str = ""
    smack_context: str = ""

    @classmethod
    def for_path(cls, path: Union[str, "os.PathLike[str]"]) -> "AccessControl":
        """Read ACL and context attributes; absent or unreadable ones count as empty."""
        if not hasattr(os, "getxattr"):
            return cls.from_data(False, b"", b"")
        return cls.from_data(
            bool(_read_xattr(path, _ACL_ATTR)),
            _read_xattr(path, _SELINUX_ATTR),
            _read_xattr(path, _SMACK_ATTR),
        )

    @classmethod
    def from_data(
        cls, has_acl: bool, selinux_context: bytes, smack_context: bytes
    ) -> "AccessControl":
        return cls(
            has_acl,
            bytes(selinux_context).decode("utf-8", errors="replace"),
            bytes(smack_context).decode("utf-8", errors="replace"),
        )

    def render_method(self, colors: PlainColors) -> str:
        if self.has_acl:
            return colors.colorize("+", Elem.ACL)
        if self.selinux_context or self.smack_context:
            return colors.colorize(".", Elem.CONTEXT)
        return colors.colorize("", Elem.ACL)

    def render_context(self, colors: PlainColors) -> str:
        context = "+".join(c for c in (self.selinux_context, self.smack_context) if c)
        return colors.colorize(context or "?", Elem.CONTEXT)