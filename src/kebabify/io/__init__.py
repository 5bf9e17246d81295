"""
Filesystem side of kebabify.

- **Traversal**: recursive walk following symlinks, source file access
- **Renaming**: ordered kebab-case renames of files and directories
"""

from kebabify.io.walk import Entry, walk_entries, read_source, write_source
from kebabify.io.renamer import RenameOperation, plan_renames, rename_tree

__all__ = [
    "Entry",
    "walk_entries",
    "read_source",
    "write_source",
    "RenameOperation",
    "plan_renames",
    "rename_tree",
]
