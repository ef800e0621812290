"""Display options, colour elements and a simple colouriser."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Mapping, Optional, Tuple, Union


class Elem(Enum):
    """The kinds of displayed element that may receive a colour."""

    FILE = "file"
    EXEC_FILE = "exec-file"
    UID_FILE = "uid-file"
    EXEC_UID_FILE = "exec-uid-file"
    DIR = "dir"
    UID_DIR = "uid-dir"
    SYMLINK = "symlink"
    BROKEN_SYMLINK = "broken-symlink"
    MISSING_SYMLINK_TARGET = "missing-symlink-target"
    PIPE = "pipe"
    BLOCK_DEVICE = "block-device"
    CHAR_DEVICE = "char-device"
    SOCKET = "socket"
    SPECIAL = "special"
    USER = "user"
    GROUP = "group"
    READ = "read"
    WRITE = "write"
    EXEC = "exec"
    EXEC_STICKY = "exec-sticky"
    NO_ACCESS = "no-access"
    OCTAL = "octal"
    ACL = "acl"
    CONTEXT = "context"
    FILE_LARGE = "file-large"
    FILE_MEDIUM = "file-medium"
    FILE_SMALL = "file-small"
    INODE_VALID = "inode-valid"
    INODE_INVALID = "inode-invalid"
    LINKS_VALID = "links-valid"
    LINKS_INVALID = "links-invalid"
    HOUR_OLD = "hour-old"
    DAY_OLD = "day-old"
    OLDER = "older"
    GIT_STATUS = "git-status"
    ARCHIVE = "archive"
    ATTRIBUTE_READ = "attribute-read"
    HIDDEN = "hidden"
    SYSTEM = "system"

    @classmethod
    def file(cls, exec: bool, uid: bool) -> "Elem":
        """Element for a regular file with the given exec and setuid state."""
        if exec and uid:
            return cls.EXEC_UID_FILE
        if exec:
            return cls.EXEC_FILE
        if uid:
            return cls.UID_FILE
        return cls.FILE

    @classmethod
    def dir(cls, uid: bool) -> "Elem":
        """Element for a directory with the given setuid state."""
        return cls.UID_DIR if uid else cls.DIR

    @classmethod
    def inode(cls, valid: bool) -> "Elem":
        return cls.INODE_VALID if valid else cls.INODE_INVALID

    @classmethod
    def links(cls, valid: bool) -> "Elem":
        return cls.LINKS_VALID if valid else cls.LINKS_INVALID


class SizeFlag(Enum):
    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"


class PermissionFlag(Enum):
    RWX = "rwx"
    OCTAL = "octal"
    ATTRIBUTES = "attributes"
    DISABLE = "disable"


class DateFlag(Enum):
    DATE = "date"
    LOCALE = "locale"
    RELATIVE = "relative"
    ISO = "iso"
    FORMATTED = "formatted"


class SortColumn(Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"
    VERSION = "version"
    EXTENSION = "extension"
    GIT_STATUS = "git"
    NONE = "none"


class SortOrder(Enum):
    DEFAULT = "default"
    REVERSE = "reverse"


class DirGrouping(Enum):
    FIRST = "first"
    LAST = "last"
    NONE = "none"


class HyperlinkOption(Enum):
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


class Display(Enum):
    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"
    VISIBLE_ONLY = "visible-only"
    SYSTEM_PROTECTED = "system-protected"


class Layout(Enum):
    GRID = "grid"
    TREE = "tree"
    ONE_LINE = "one-line"


@dataclass
class Flags:
    """The options that steer how entries are read, sorted and rendered."""

    size: SizeFlag = SizeFlag.DEFAULT
    permission: PermissionFlag = PermissionFlag.RWX
    date: DateFlag = DateFlag.DATE
    date_format: Optional[str] = None
    sort_column: SortColumn = SortColumn.NAME
    sort_order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE
    display: Display = Display.VISIBLE_ONLY
    layout: Layout = Layout.GRID
    display_indicators: bool = False
    dereference: bool = False
    blocks: Tuple[str, ...] = ("name",)
    ignore_globs: Tuple[str, ...] = ()
    truncate_owner_after: Optional[int] = None
    truncate_owner_marker: Optional[str] = None
    symlink_arrow: str = "\u21d2"
    hyperlink: HyperlinkOption = HyperlinkOption.NEVER
    literal: bool = False


PaletteValue = Union[int, str]


@dataclass
class PlainColors:
    """Colours text from a palette of element keys.

    A palette value that is an int selects a 256-colour foreground; a str is
    used as raw SGR parameters. Elements missing from the palette are left
    uncoloured, so an empty palette yields plain text.
    """

    palette: Mapping[Hashable, PaletteValue] = field(default_factory=dict)

    def colorize(self, text: str, elem: Hashable) -> str:
        text = str(text)
        value = self.palette.get(elem)
        if value is None:
            return text
        sgr = f"38;5;{value}" if isinstance(value, int) else value
        return f"\x1b[{sgr}m{text}\x1b[39m"

    def colorize_using_path(
        self, text: str, path: Union[str, "os.PathLike[str]"], elem: Hashable
    ) -> str:
        """Colour text for an entry at path; the palette decides by element."""
        return self.colorize(text, elem)