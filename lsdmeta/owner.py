"""File owner and group."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from lsdmeta.options import Elem, Flags, PlainColors

try:
    import grp
    import pwd
except ImportError:  # not available on every platform
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]


def truncate(text: str, after: Optional[int], marker: Optional[str]) -> str:
    """Cut text to after characters, appending marker when it was cut."""
    if after is None or len(text) <= after:
        return text
    return text[:after] + (marker or "")


@dataclass
class OwnerCache:
    """Remembers user and group names looked up by id."""

    _users: Dict[int, str] = field(default_factory=dict, repr=False)
    _groups: Dict[int, str] = field(default_factory=dict, repr=False)

    def user_name(self, uid: int) -> str:
        if uid not in self._users:
            name = str(uid)
            if pwd is not None:
                try:
                    name = pwd.getpwuid(uid).pw_name
                except (KeyError, OverflowError):
                    pass
            self._users[uid] = name
        return self._users[uid]

    def group_name(self, gid: int) -> str:
        if gid not in self._groups:
            name = str(gid)
            if grp is not None:
                try:
                    name = grp.getgrgid(gid).gr_name
                except (KeyError, OverflowError):
                    pass
            self._groups[gid] = name
        return self._groups[gid]


@dataclass(frozen=True)
class Owner:
    """User and group of an entry, as numeric ids or as names."""

    user: Union[int, str] = 0
    group: Union[int, str] = 0

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Owner":
        return cls(st.st_uid, st.st_gid)

    def render_user(self, colors: PlainColors, cache: OwnerCache, flags: Flags) -> str:
        name = cache.user_name(self.user) if isinstance(self.user, int) else self.user
        return colors.colorize(
            truncate(name, flags.truncate_owner_after, flags.truncate_owner_marker),
            Elem.USER,
        )

    def render_group(self, colors: PlainColors, cache: OwnerCache, flags: Flags) -> str:
        name = cache.group_name(self.group) if isinstance(self.group, int) else self.group
        return colors.colorize(
            truncate(name, flags.truncate_owner_after, flags.truncate_owner_marker),
            Elem.GROUP,
        )