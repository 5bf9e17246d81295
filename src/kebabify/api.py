"""
High-level API for normalizing a source tree to kebab-case.

This module provides the entry points used by the CLI:

- process_imports(): rewrite import/require specifiers in source files
- process_directory(): rename files and directories
- normalize(): run either or both, in the order that keeps references valid
"""

from enum import Enum
from pathlib import Path
from typing import List, Union

from .core.imports import update_imports
from .exceptions import ConflictingModesError
from .io.renamer import RenameOperation, rename_tree
from .io.walk import is_source_file, read_source, walk_entries, write_source
from .results import ImportUpdate, NormalizeResult


class Mode(str, Enum):
    """What a normalization run does."""
    RENAME = "rename"
    IMPORTS = "imports"
    ALL = "all"

    @classmethod
    def from_flags(cls, imports: bool = False, all: bool = False) -> "Mode":
        """
        Select the mode from the ``--imports`` / ``--all`` flags.

        Raises
        ------
        ConflictingModesError
            If both flags are set
        """
        if imports and all:
            raise ConflictingModesError()
        if all:
            return cls.ALL
        if imports:
            return cls.IMPORTS
        return cls.RENAME

    @property
    def rewrites_imports(self) -> bool:
        return self in (Mode.IMPORTS, Mode.ALL)

    @property
    def renames_entries(self) -> bool:
        return self in (Mode.RENAME, Mode.ALL)


def process_file_imports(
    path: Path,
    relative_only: bool = False,
    dry_run: bool = False,
    verbose: bool = True,
) -> int:
    """
    Rewrite the imports of one source file.

    The file is only written back when at least one segment changed.

    Returns
    -------
    int
        Number of specifier segments rewritten
    """
    content = read_source(path)
    new_content, changes = update_imports(content, relative_only=relative_only)

    if changes > 0:
        if verbose:
            print(f"Updated {changes} imports in: {path}")
        if not dry_run:
            write_source(path, new_content)

    return changes


def process_imports(
    root: Union[str, Path],
    relative_only: bool = False,
    dry_run: bool = False,
    verbose: bool = True,
) -> List[ImportUpdate]:
    """
    Rewrite imports in every source file under ``root``.

    Source files are those with a js, jsx, ts, tsx, svelte or vue
    extension. The file list is collected before any file is touched.

    Parameters
    ----------
    root : str or Path
        Directory to process
    relative_only : bool, default=False
        Leave specifiers not starting with ``./`` or ``../`` alone
    dry_run : bool, default=False
        Report changes without writing files
    verbose : bool, default=True
        Print a line for each updated file

    Returns
    -------
    list of ImportUpdate
        Files whose imports changed
    """
    files = [
        entry.path
        for entry in walk_entries(root)
        if entry.is_file and is_source_file(entry.path)
    ]

    updates = []
    for path in files:
        changes = process_file_imports(
            path, relative_only=relative_only, dry_run=dry_run, verbose=verbose
        )
        if changes > 0:
            updates.append(ImportUpdate(path, changes))
    return updates


def process_directory(
    root: Union[str, Path],
    dry_run: bool = False,
    verbose: bool = True,
) -> List[RenameOperation]:
    """Rename files and directories under ``root`` to kebab-case."""
    return rename_tree(root, dry_run=dry_run, verbose=verbose)


def normalize(
    root: Union[str, Path] = ".",
    mode: Union[str, Mode] = Mode.RENAME,
    relative_only: bool = False,
    dry_run: bool = False,
    verbose: bool = True,
) -> NormalizeResult:
    """
    Normalize a source tree to kebab-case.

    In 'all' mode imports are rewritten first and entries renamed
    afterwards, so the tree never references names that no longer exist.

    Parameters
    ----------
    root : str or Path, default="."
        Directory to process
    mode : str or Mode, default=Mode.RENAME
        'rename', 'imports' or 'all'
    relative_only : bool, default=False
        Only rewrite relative import specifiers
    dry_run : bool, default=False
        Report changes without touching the filesystem
    verbose : bool, default=True
        Print progress lines

    Returns
    -------
    NormalizeResult
        What was changed (or would be, for a dry run)

    Examples
    --------
    >>> result = normalize("src", mode="all")
    >>> print(result.summary())
    """
    mode = Mode(mode)
    root = Path(root)
    result = NormalizeResult(root=root, mode=mode.value, dry_run=dry_run)

    if mode.rewrites_imports:
        result.import_updates = process_imports(
            root, relative_only=relative_only, dry_run=dry_run, verbose=verbose
        )

    if mode.renames_entries:
        result.rename_operations = process_directory(root, dry_run=dry_run, verbose=verbose)

    return result
