"""Normalize command implementation."""

import sys
from pathlib import Path
from typing import Optional

from kebabify.api import Mode, normalize
from kebabify.exceptions import KebabifyError


def run_normalize(
    path: Path,
    mode: Mode,
    relative_only: bool,
    dry_run: bool,
    format: str,
    output: Optional[Path],
    quiet: bool,
):
    """Normalize the tree at ``path`` and report the result."""
    # A JSON summary on stdout must be the only thing written there
    json_to_stdout = format == "json" and output is None

    try:
        result = normalize(
            path,
            mode=mode,
            relative_only=relative_only,
            dry_run=dry_run,
            verbose=not quiet and not json_to_stdout,
        )
    except KebabifyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    # Format output
    if format == "json":
        output_text = result.to_json()
    else:  # text
        output_text = result.summary()

    # Write output
    if output:
        with open(output, 'w') as f:
            f.write(output_text)
        if not quiet:
            print(f"Summary written to {output}", file=sys.stderr)
    elif format == "json" or not quiet:
        print(output_text)
