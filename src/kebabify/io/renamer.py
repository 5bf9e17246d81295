"""
Renaming of files and directories to kebab-case.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from ..core.case import has_uppercase, to_kebab
from ..exceptions import FileOperationError, PathStructureError
from .walk import Entry, split_name, walk_entries


@dataclass(frozen=True)
class RenameOperation:
    """
    One planned rename.

    Attributes
    ----------
    source : Path
        Path of the entry as recorded by the walk
    target : Path
        Path the entry is renamed to (same parent, new base name)
    is_dir : bool
        Whether the entry is a directory
    """

    source: Path
    target: Path
    is_dir: bool

    @property
    def new_name(self) -> str:
        return self.target.name

    def to_dict(self) -> dict:
        return {
            "source": str(self.source),
            "target": str(self.target),
            "is_dir": self.is_dir,
        }


def _is_text(name: str) -> bool:
    # Undecodable bytes in a name show up as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def new_basename(entry: Entry) -> Optional[str]:
    """
    Compute the kebab-case name for ``entry``, or None if it keeps its name.

    Files are converted on their stem only (the suffix after the last dot
    is kept verbatim); directories are converted on their whole name.
    Names that are not valid text are left alone.

    Raises
    ------
    PathStructureError
        If the entry has no name
    """
    name = entry.path.name
    if not name:
        raise PathStructureError(entry.path, "path has no file name")
    if not _is_text(name):
        return None

    if entry.is_dir:
        stem, suffix = name, ""
    else:
        stem, suffix = split_name(name)

    if not has_uppercase(stem):
        return None

    new_name = to_kebab(stem) + suffix
    if new_name == name:
        return None
    return new_name


def _operation_for(entry: Entry) -> Optional[RenameOperation]:
    new_name = new_basename(entry)
    if new_name is None:
        return None
    parent = entry.path.parent
    if parent == entry.path:
        raise PathStructureError(entry.path, "path has no parent directory")
    return RenameOperation(entry.path, parent / new_name, entry.is_dir)


def plan_renames(entries: Iterable[Entry]) -> list[RenameOperation]:
    """
    Order the renames needed for a walked tree.

    Files come first in walk order, then directories in reverse walk order
    (deepest first). With a pre-order walk this guarantees that every
    recorded path is still valid when its rename runs: a file's parents are
    renamed after it, and a directory is only renamed after all of its
    descendants. The walk root (depth 0) is never renamed.

    Parameters
    ----------
    entries : iterable of Entry
        Entries in pre-order, as produced by ``walk_entries``

    Returns
    -------
    list of RenameOperation
        Renames in the order they must be applied
    """
    entries = [e for e in entries if e.depth > 0]
    operations = []

    for entry in entries:
        if entry.is_file:
            op = _operation_for(entry)
            if op is not None:
                operations.append(op)

    for entry in reversed(entries):
        if entry.is_dir:
            op = _operation_for(entry)
            if op is not None:
                operations.append(op)

    return operations


def apply_rename(op: RenameOperation) -> None:
    """
    Rename ``op.source`` to ``op.target``.

    An existing, different entry at the target is never overwritten. A
    target that is the same file as the source (case-only rename on a
    case-insensitive filesystem) is allowed.

    Raises
    ------
    FileOperationError
        If the target is taken or the rename fails
    """
    if os.path.lexists(op.target):
        try:
            same = os.path.samefile(op.source, op.target)
        except OSError as e:
            raise FileOperationError("rename", op.source, e) from e
        if not same:
            raise FileOperationError(
                "rename", op.source, FileExistsError(f"target already exists: {op.target}")
            )

    try:
        os.rename(op.source, op.target)
    except OSError as e:
        raise FileOperationError("rename", op.source, e) from e


def rename_tree(
    root: Path | str,
    dry_run: bool = False,
    verbose: bool = True,
) -> list[RenameOperation]:
    """
    Rename every file and directory under ``root`` to kebab-case.

    The whole tree is walked before anything is renamed. A failure aborts
    the pass; renames already done are kept, and a re-run finishes the job.

    Parameters
    ----------
    root : Path or str
        Directory to process
    dry_run : bool, default=False
        Report the renames without performing them
    verbose : bool, default=True
        Print a line per rename

    Returns
    -------
    list of RenameOperation
        Renames performed (or planned, for a dry run)

    Raises
    ------
    FileOperationError
        If the root cannot be read or a rename fails
    PathStructureError
        If an entry has no usable name or parent
    """
    operations = plan_renames(list(walk_entries(root)))

    done = []
    for op in operations:
        if verbose:
            print(f"Renaming: {op.source} -> {op.new_name}")
        if not dry_run:
            apply_rename(op)
        done.append(op)

    return done
