"""
Directory traversal and source file access.
"""

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..exceptions import FileOperationError, SourceDecodeError


# Extensions (without the dot) of files whose imports are rewritten
SOURCE_EXTENSIONS = frozenset({"js", "jsx", "ts", "tsx", "svelte", "vue"})


@dataclass(frozen=True)
class Entry:
    """
    Filesystem entry met during a tree walk.

    Attributes
    ----------
    path : Path
        Path as reached from the walk root (symlinks not resolved)
    is_dir : bool
        Entry is a directory (or a symlink to one)
    is_file : bool
        Entry is a regular file (or a symlink to one)
    depth : int
        Distance from the walk root; the root itself has depth 0
    """

    path: Path
    is_dir: bool
    is_file: bool
    depth: int


def split_name(name: str) -> tuple[str, str]:
    """
    Split a file name into stem and suffix at the last dot.

    The suffix keeps its leading dot. Dot-files such as ``.eslintrc`` have
    no suffix.

    Examples
    --------
    >>> split_name("MyComponent.svelte")
    ('MyComponent', '.svelte')
    >>> split_name("archive.tar.gz")
    ('archive.tar', '.gz')
    >>> split_name(".env")
    ('.env', '')
    """
    idx = name.rfind(".")
    if idx <= 0:
        return name, ""
    return name[:idx], name[idx:]


def is_source_file(path: Path) -> bool:
    """Check if ``path`` has one of the source file extensions."""
    _, suffix = split_name(path.name)
    return suffix[1:] in SOURCE_EXTENSIONS


def _entry_for(path: Path, st: os.stat_result, depth: int) -> Entry:
    return Entry(
        path=path,
        is_dir=stat.S_ISDIR(st.st_mode),
        is_file=stat.S_ISREG(st.st_mode),
        depth=depth,
    )


def walk_entries(root: Path | str) -> Iterator[Entry]:
    """
    Walk ``root`` recursively, following symbolic links.

    The root itself is yielded first, then each directory is followed
    directly by its contents (pre-order), with siblings in name order.
    Entries whose metadata cannot be read, or directories that cannot be
    listed, are skipped. A symlink pointing back at one of its own
    ancestors is skipped. Every other directory is yielded, but its
    contents are listed only the first time the walk reaches it, so a
    directory also reachable through a symlink is not listed twice.

    Parameters
    ----------
    root : Path or str
        Directory (or single file) to walk

    Yields
    ------
    Entry
        Every entry under ``root``

    Raises
    ------
    FileOperationError
        If ``root`` itself cannot be read
    """
    root = Path(root)
    try:
        st = root.stat()
    except OSError as e:
        raise FileOperationError("read directory", root, e) from e

    entry = _entry_for(root, st, 0)
    yield entry
    if entry.is_dir:
        key = (st.st_dev, st.st_ino)
        yield from _walk_dir(root, 1, frozenset({key}), {key})


def _walk_dir(
    directory: Path, depth: int, ancestors: frozenset, visited: set
) -> Iterator[Entry]:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda d: d.name)
    except OSError:
        return

    for child in children:
        try:
            st = child.stat(follow_symlinks=True)
        except OSError:
            continue

        entry = _entry_for(Path(child.path), st, depth)
        if entry.is_dir:
            key = (st.st_dev, st.st_ino)
            if key in ancestors:
                continue
            yield entry
            if key not in visited:
                visited.add(key)
                yield from _walk_dir(entry.path, depth + 1, ancestors | {key}, visited)
        else:
            yield entry


def read_source(path: Path) -> str:
    """
    Read a source file as UTF-8 text.

    Line endings are kept as they are on disk.

    Raises
    ------
    FileOperationError
        If the file cannot be read
    SourceDecodeError
        If the file is not valid UTF-8
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileOperationError("read file", path, e) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceDecodeError(path, e) from e


def write_source(path: Path, content: str) -> None:
    """Write ``content`` back to ``path`` as UTF-8."""
    try:
        path.write_bytes(content.encode("utf-8"))
    except OSError as e:
        raise FileOperationError("write file", path, e) from e
