"""Entry names: escaping, relative paths, hyperlinks and ordering."""

from __future__ import annotations

import functools
import os
import sys
from enum import Enum
from pathlib import Path, PurePath
from typing import Optional, Union

from lsdmeta.filetype import FileKind, FileType
from lsdmeta.options import Elem, HyperlinkOption, PlainColors

PathLike = Union[str, "os.PathLike[str]"]

_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


class DisplayOption(Enum):
    """How much of an entry's path is shown."""

    FILE_NAME = "file-name"
    RELATIVE = "relative"
    NONE = "none"


def _last_component(path: str) -> Optional[str]:
    """The final normal component of path, or None for roots and '..'."""
    name = PurePath(path).name
    if name in ("", ".."):
        return None
    return name


def _extension_of(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1:]


def _printable(char: str) -> bool:
    return char >= "\x20" and char != "\x7f"


def _escape_char(char: str) -> str:
    if _printable(char):
        return char
    return _ESCAPES.get(char, f"\\u{{{ord(char):x}}}")


@functools.total_ordering
class Name:
    """The displayed name of an entry; compares case-insensitively."""

    def __init__(self, path: PathLike, file_type: FileType) -> None:
        self._raw = os.fspath(path)
        self.path = Path(self._raw)
        component = _last_component(self._raw)
        self.name = component if component is not None else self._raw
        self._extension = _extension_of(component)
        self.file_type = file_type

    def __repr__(self) -> str:
        return f"Name({self.name!r}, path={self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() < other.name.lower()

    def __hash__(self) -> int:
        return hash(self.name.lower())

    def file_name(self) -> str:
        """The last path component, falling back to the stored name."""
        component = _last_component(self._raw)
        return component if component is not None else self.name

    def extension(self) -> Optional[str]:
        return self._extension

    def relative_path(self, base_path: PathLike) -> Path:
        """The entry's path expressed relative to base_path."""
        target = PurePath(self._raw)
        base = PurePath(os.fspath(base_path))
        if target == base:
            return Path(".")
        shared = 0
        for target_part, base_part in zip(target.parts, base.parts):
            if target_part != base_part:
                break
            shared += 1
        ups = [".."] * (len(base.parts) - shared)
        return Path(*ups, *target.parts[shared:])

    def escape(self, text: str, literal: bool) -> str:
        """Quote text the way a shell would need it, and escape control characters."""
        if not literal:
            if "\\" in text or '"' in text:
                text = "'" + text.replace("'", "'\\''") + "'"
            elif "'" in text:
                text = f'"{text}"'
            elif " " in text or "$" in text:
                text = f"'{text}'"
        if all(_printable(c) for c in text):
            return text
        return "".join(_escape_char(c) for c in text)

    def hyperlink(self, text: str, option: HyperlinkOption) -> str:
        """Wrap text in a terminal hyperlink to the entry when option is ALWAYS."""
        if option is not HyperlinkOption.ALWAYS:
            return text
        try:
            real = self.path.resolve(strict=True)
        except FileNotFoundError:
            # A broken symlink: its colour already tells the user.
            return text
        except OSError as err:
            print(f"{text}: {err}", file=sys.stderr)
            return text
        try:
            url = real.as_uri()
        except ValueError:
            print(f"{text}: unable to form url.", file=sys.stderr)
            return text
        return f"\x1b]8;;{url}\x1b\\{text}\x1b]8;;\x1b\\"

    def _elem(self) -> Elem:
        kind = self.file_type.kind
        if kind is FileKind.CHAR_DEVICE:
            return Elem.CHAR_DEVICE
        if kind is FileKind.DIRECTORY:
            return Elem.dir(self.file_type.uid)
        if kind is FileKind.SYMLINK:
            return Elem.SYMLINK
        if kind is FileKind.FILE:
            return Elem.file(self.file_type.exec, self.file_type.uid)
        return Elem.file(False, False)

    def render(
        self,
        colors: PlainColors,
        icon: str = "",
        display_option: DisplayOption = DisplayOption.FILE_NAME,
        hyperlink: HyperlinkOption = HyperlinkOption.NEVER,
        literal: bool = False,
        base_path: Optional[PathLike] = None,
    ) -> str:
        """Render the icon followed by the (escaped, optionally linked) name."""
        if display_option is DisplayOption.FILE_NAME:
            shown = self.file_name()
        elif display_option is DisplayOption.RELATIVE:
            if base_path is None:
                raise ValueError("a base path is required for relative display")
            shown = str(self.relative_path(base_path))
        else:
            shown = self._raw
        content = icon + self.hyperlink(self.escape(shown, literal), hyperlink)
        return colors.colorize_using_path(content, self.path, self._elem())