"""A filesystem entry with all the details that can be displayed for it."""

from __future__ import annotations

import copy
import dataclasses
import fnmatch
import os
import stat
import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union

from lsdmeta.access_control import AccessControl
from lsdmeta.attributes import WindowsAttributes
from lsdmeta.date import Date
from lsdmeta.filetype import FileKind, FileType
from lsdmeta.git_file_status import GitFileStatus
from lsdmeta.indicator import Indicator
from lsdmeta.inode import INode
from lsdmeta.links import Links
from lsdmeta.name import Name
from lsdmeta.options import Display, Flags, Layout, PermissionFlag
from lsdmeta.owner import Owner
from lsdmeta.permissions import Permissions
from lsdmeta.size import Size
from lsdmeta.symlink import SymLink

PathLike = Union[str, "os.PathLike[str]"]
PermissionsOrAttributes = Union[Permissions, WindowsAttributes]


class GitCache(Protocol):
    def get(self, path: Path, is_directory: bool) -> Optional[GitFileStatus]:
        ...


class ExitCode(IntEnum):
    """Severity of problems met while listing; larger is worse."""

    OK = 0
    MINOR_ISSUE = 1
    MAJOR_ISSUE = 2


def _print_error(message: str) -> None:
    print(f"lsd: {message}", file=sys.stderr)


def _has_attribute(path: Path, bit: int) -> bool:
    try:
        bits = getattr(os.lstat(path), "st_file_attributes", 0) or 0
    except OSError:
        return False
    return bool(bits & bit)


def calculate_total_file_size(path: PathLike) -> int:
    """Size of a file, or of a directory and everything under it, in bytes."""
    try:
        st = os.lstat(path)
    except OSError as err:
        _print_error(f"{os.fspath(path)}: {err}.")
        return 0
    if stat.S_ISREG(st.st_mode):
        return st.st_size
    if not stat.S_ISDIR(st.st_mode):
        return 0
    size = st.st_size
    try:
        with os.scandir(path) as entries:
            children = [entry.path for entry in entries]
    except OSError as err:
        _print_error(f"{os.fspath(path)}: {err}.")
        return size
    return size + sum(calculate_total_file_size(child) for child in children)


@dataclass
class Meta:
    name: Name
    path: Path
    permissions_or_attributes: Optional[PermissionsOrAttributes]
    date: Optional[Date]
    owner: Optional[Owner]
    file_type: FileType
    size: Optional[Size]
    symlink: SymLink
    indicator: Indicator
    inode: Optional[INode]
    links: Optional[Links]
    content: Optional[List["Meta"]] = None
    access_control: Optional[AccessControl] = None
    git_status: Optional[GitFileStatus] = None

    @classmethod
    def from_path(
        cls,
        path: PathLike,
        dereference: bool = False,
        permission_flag: PermissionFlag = PermissionFlag.RWX,
    ) -> "Meta":
        """Gather the details of the entry at path; raises OSError if it cannot be read."""
        path = Path(path)
        st = os.lstat(path)
        target_st = None
        broken_link = False
        if stat.S_ISLNK(st.st_mode):
            try:
                resolved = os.stat(path)
            except OSError as err:
                if dereference:
                    broken_link = True
                    print(f"lsd: {path}: {err}", file=sys.stderr)
            else:
                if dereference:
                    st = resolved
                else:
                    target_st = resolved

        owner: Optional[Owner] = None
        permissions: Optional[Permissions] = None
        perms_or_attrs: Optional[PermissionsOrAttributes] = None
        if permission_flag is PermissionFlag.ATTRIBUTES and os.name == "nt":
            perms_or_attrs = WindowsAttributes.from_stat(st)
        elif permission_flag is not PermissionFlag.DISABLE:
            owner = Owner.from_stat(st)
            permissions = Permissions.from_mode(st.st_mode)
            perms_or_attrs = permissions

        file_type = FileType.from_stat(st, target_st, permissions or Permissions())
        name = Name(path, file_type)

        if broken_link:
            return cls(
                name=name,
                path=path,
                permissions_or_attributes=None,
                date=None,
                owner=None,
                file_type=file_type,
                size=None,
                symlink=SymLink.from_path(path),
                indicator=Indicator.from_file_type(file_type),
                inode=None,
                links=None,
            )
        return cls(
            name=name,
            path=path,
            permissions_or_attributes=perms_or_attrs,
            date=Date.from_stat(st),
            owner=owner,
            file_type=file_type,
            size=Size.from_stat(st),
            symlink=SymLink.from_path(path),
            indicator=Indicator.from_file_type(file_type),
            inode=INode.from_stat(st),
            links=Links.from_stat(st),
            access_control=AccessControl.for_path(path),
        )

    def _renamed(self, name: str) -> "Meta":
        new_name = copy.copy(self.name)
        new_name.name = name
        return dataclasses.replace(self, name=new_name)

    def recurse_into(
        self, depth: int, flags: Flags, cache: Optional[GitCache] = None
    ) -> Tuple[Optional[List["Meta"]], ExitCode]:
        """Read the entries below this one, down to depth levels.

        Returns the entries (None when nothing is to be read) and the worst
        exit code met on the way.
        """
        if depth == 0:
            return None, ExitCode.OK
        if flags.display is Display.DIRECTORY_ONLY and flags.layout is not Layout.TREE:
            return None, ExitCode.OK

        kind = self.file_type.kind
        if kind is FileKind.SYMLINK and self.file_type.is_dir:
            if len(flags.blocks) > 1:
                return None, ExitCode.OK
        elif kind is not FileKind.DIRECTORY:
            return None, ExitCode.OK

        try:
            with os.scandir(self.path) as iterator:
                entries = list(iterator)
        except OSError as err:
            _print_error(f"{self.path}: {err}.")
            return None, ExitCode.MINOR_ISSUE

        content: List[Meta] = []

        if (
            flags.display in (Display.ALL, Display.SYSTEM_PROTECTED)
            and flags.layout is not Layout.TREE
        ):
            current = self._renamed(".")
            parent = Meta.from_path(self.path / "..", flags.dereference, flags.permission)
            parent = parent._renamed("..")
            if cache is not None:
                current.git_status = cache.get(current.path, True)
                parent.git_status = cache.get(parent.path, True)
            content.extend((current, parent))

        exit_code = ExitCode.OK

        for entry in entries:
            name = entry.name
            path = Path(entry.path)

            if any(fnmatch.fnmatchcase(name, glob) for glob in flags.ignore_globs):
                continue

            is_hidden = name.startswith(".")
            is_system = False
            if os.name == "nt":
                is_hidden = is_hidden or _has_attribute(path, stat.FILE_ATTRIBUTE_HIDDEN)
                is_system = _has_attribute(path, stat.FILE_ATTRIBUTE_SYSTEM)

            if flags.display in (Display.ALL, Display.ALMOST_ALL) and is_system:
                continue
            if flags.display is Display.VISIBLE_ONLY and (is_hidden or is_system):
                continue

            try:
                entry_meta = Meta.from_path(path, flags.dereference, flags.permission)
            except OSError as err:
                _print_error(f"{path}: {err}.")
                exit_code = max(exit_code, ExitCode.MINOR_ISSUE)
                continue

            is_directory = entry.is_dir(follow_symlinks=False)

            if (
                flags.layout is Layout.TREE
                and flags.display is Display.DIRECTORY_ONLY
                and not is_directory
            ):
                continue

            if flags.dereference or entry_meta.file_type.kind is not FileKind.SYMLINK:
                try:
                    sub_content, sub_code = entry_meta.recurse_into(depth - 1, flags, cache)
                except OSError as err:
                    _print_error(f"{path}: {err}.")
                    exit_code = max(exit_code, ExitCode.MINOR_ISSUE)
                    continue
                entry_meta.content = sub_content
                exit_code = max(exit_code, sub_code)

            if cache is not None:
                entry_meta.git_status = cache.get(entry_meta.path, is_directory)
            content.append(entry_meta)

        return content, exit_code

    def calculate_total_size(self) -> None:
        """Replace a directory's size with the size of everything under it."""
        if self.size is None:
            return
        if self.file_type.kind is not FileKind.DIRECTORY:
            return
        if self.content is not None:
            total = self.size.bytes
            for child in self.content:
                child.calculate_total_size()
                if child.size is not None:
                    total += child.size.bytes
            self.size = Size(total)
        else:
            # The depth limit may have stopped the recursion here.
            self.size = Size(calculate_total_file_size(self.path))