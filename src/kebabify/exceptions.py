"""
Exceptions raised by kebabify.
"""

from pathlib import Path
from typing import Optional


class KebabifyError(Exception):
    """Base class for kebabify errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class PathStructureError(KebabifyError):
    """Raised when a path has no parent or no usable name."""

    def __init__(self, path: Path, problem: str):
        super().__init__(f"Invalid path {path}: {problem}", path)
        self.problem = problem


class FileOperationError(KebabifyError):
    """Raised when reading, writing, renaming or listing a path fails."""

    def __init__(self, operation: str, path: Path, error: Optional[BaseException] = None):
        msg = f"Failed to {operation}: {path}"
        if error is not None:
            msg += f" ({error})"
        super().__init__(msg, path)
        self.operation = operation
        self.error = error


class SourceDecodeError(KebabifyError):
    """Raised when a source file is not valid UTF-8 text."""

    def __init__(self, path: Path, error: UnicodeDecodeError):
        super().__init__(f"Source file is not valid UTF-8: {path} ({error.reason} at byte {error.start})", path)
        self.error = error


class ConflictingModesError(KebabifyError, ValueError):
    """Raised when imports-only and both modes are requested together."""

    def __init__(self):
        super().__init__("--imports and --all cannot be used together")
