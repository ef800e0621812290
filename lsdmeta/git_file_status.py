"""Git status of an entry in the index and in the working tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Mapping

from lsdmeta.options import Elem, PlainColors


class GitStatus(IntEnum):
    DEFAULT = 0
    UNMODIFIED = 1
    IGNORED = 2
    NEW_IN_INDEX = 3
    NEW_IN_WORKDIR = 4
    TYPECHANGE = 5
    DELETED = 6
    RENAMED = 7
    MODIFIED = 8
    CONFLICTED = 9


class GitStatusFlag(IntFlag):
    """Status bits as reported by the git library for a single path."""

    CURRENT = 0
    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4
    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    WT_UNREADABLE = 1 << 12
    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


_INDEX_RULES = (
    (GitStatusFlag.INDEX_NEW, GitStatus.NEW_IN_INDEX),
    (GitStatusFlag.INDEX_DELETED, GitStatus.DELETED),
    (GitStatusFlag.INDEX_MODIFIED, GitStatus.MODIFIED),
    (GitStatusFlag.INDEX_RENAMED, GitStatus.RENAMED),
    (GitStatusFlag.INDEX_TYPECHANGE, GitStatus.TYPECHANGE),
)

_WORKDIR_RULES = (
    (GitStatusFlag.WT_NEW, GitStatus.NEW_IN_WORKDIR),
    (GitStatusFlag.WT_DELETED, GitStatus.DELETED),
    (GitStatusFlag.WT_MODIFIED, GitStatus.MODIFIED),
    (GitStatusFlag.WT_RENAMED, GitStatus.RENAMED),
    (GitStatusFlag.IGNORED, GitStatus.IGNORED),
    (GitStatusFlag.WT_TYPECHANGE, GitStatus.TYPECHANGE),
    (GitStatusFlag.CONFLICTED, GitStatus.CONFLICTED),
)


def _first_match(status: GitStatusFlag, rules) -> GitStatus:
    return next(
        (result for bit, result in rules if status & bit),
        GitStatus.UNMODIFIED,
    )


@dataclass(frozen=True, order=True)
class GitFileStatus:
    index: GitStatus = GitStatus.DEFAULT
    workdir: GitStatus = GitStatus.DEFAULT

    @classmethod
    def from_status(cls, status: int) -> "GitFileStatus":
        flags = GitStatusFlag(status)
        return cls(
            _first_match(flags, _INDEX_RULES),
            _first_match(flags, _WORKDIR_RULES),
        )

    def render(self, colors: PlainColors, symbols: Mapping[GitStatus, str]) -> str:
        """Render the index and workdir symbols.

        Each symbol is coloured under the palette key (Elem.GIT_STATUS, status).
        """
        return "".join(
            colors.colorize(symbols.get(status, ""), (Elem.GIT_STATUS, status))
            for status in (self.index, self.workdir)
        )