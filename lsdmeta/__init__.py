"""File metadata gathering, rendering and sorting for directory listings."""

__version__ = "0.1.0"

__all__ = [
    "access_control",
    "attributes",
    "date",
    "filetype",
    "git_file_status",
    "indicator",
    "inode",
    "links",
    "meta",
    "name",
    "options",
    "owner",
    "permissions",
    "size",
    "sort",
    "symlink",
]