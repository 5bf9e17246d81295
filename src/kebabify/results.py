"""
Result objects for a normalization run.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .io.renamer import RenameOperation


@dataclass(frozen=True)
class ImportUpdate:
    """Import rewrites applied to a single source file."""

    path: Path
    changes: int

    def to_dict(self) -> Dict[str, Any]:
        return {"path": str(self.path), "changes": self.changes}


@dataclass
class NormalizeResult:
    """
    Outcome of a normalization run.

    Attributes
    ----------
    root : Path
        Directory that was processed
    mode : str
        Run mode ('rename', 'imports' or 'all')
    dry_run : bool
        Whether changes were only reported, not applied
    import_updates : list[ImportUpdate]
        Files whose imports were rewritten, in processing order
    rename_operations : list[RenameOperation]
        Renames in the order they were applied
    """

    root: Path
    mode: str
    dry_run: bool = False
    import_updates: List[ImportUpdate] = field(default_factory=list)
    rename_operations: List[RenameOperation] = field(default_factory=list)

    @property
    def import_changes(self) -> int:
        """Total number of specifier segments rewritten."""
        return sum(u.changes for u in self.import_updates)

    @property
    def files_updated(self) -> int:
        """Number of source files with rewritten imports."""
        return len(self.import_updates)

    @property
    def renames(self) -> int:
        """Number of files and directories renamed."""
        return len(self.rename_operations)

    @property
    def changed(self) -> bool:
        return bool(self.import_updates or self.rename_operations)

    def summary(self) -> str:
        """One-line human readable summary."""
        prefix = "Dry run" if self.dry_run else "Done"
        return (
            f"{prefix}: {self.import_changes} import segments in "
            f"{self.files_updated} files, {self.renames} renames."
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "mode": self.mode,
            "dry_run": self.dry_run,
            "import_changes": self.import_changes,
            "files_updated": self.files_updated,
            "renames": self.renames,
            "import_updates": [u.to_dict() for u in self.import_updates],
            "rename_operations": [op.to_dict() for op in self.rename_operations],
        }

    def to_json(self, filepath: Optional[str] = None, indent: int = 2) -> str:
        """
        Export the result as JSON.

        Parameters
        ----------
        filepath : str, optional
            If provided, write JSON to this file
        indent : int, default=2
            Indentation level for pretty printing

        Returns
        -------
        str
            JSON string representation
        """
        json_str = json.dumps(self.to_dict(), indent=indent)

        if filepath:
            with open(filepath, 'w') as f:
                f.write(json_str)

        return json_str
