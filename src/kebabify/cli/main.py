"""Main CLI application for kebabify."""

import typer
from pathlib import Path
from typing import Optional
from enum import Enum

from kebabify import __version__
from kebabify.api import Mode
from kebabify.exceptions import ConflictingModesError

app = typer.Typer(
    name="kebabify",
    help="Rename PascalCase/camelCase files to kebab-case and fix imports",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Summary output format."""
    TEXT = "text"
    JSON = "json"


def _version_callback(value: bool):
    if value:
        typer.echo(f"kebabify {__version__}")
        raise typer.Exit()


@app.command()
def normalize(
    path: Path = typer.Argument(
        Path("."),
        help="The directory path to process",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    imports: bool = typer.Option(
        False,
        "--imports", "-i",
        help="Only process import statements in source files",
    ),
    all_: bool = typer.Option(
        False,
        "--all", "-a",
        help="Process imports first, then rename files and directories",
    ),
    relative_only: bool = typer.Option(
        False,
        "--relative-only", "-r",
        help="Only rewrite import paths starting with ./ or ../",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run", "-n",
        help="Show what would change without touching any file",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format", "-f",
        help="Summary format",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Write the summary to a file (default: stdout)",
        dir_okay=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Suppress progress output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Convert file and directory names under PATH to kebab-case.

    By default only names are changed. With --imports only import/require
    paths inside js, jsx, ts, tsx, svelte and vue files are rewritten;
    with --all imports are rewritten first and names changed afterwards.

    Example:
        kebabify src
        kebabify src --all --dry-run
    """
    try:
        mode = Mode.from_flags(imports=imports, all=all_)
    except ConflictingModesError as e:
        raise typer.BadParameter(e.message, param_hint="'--imports' / '--all'")

    from .commands.normalize import run_normalize

    run_normalize(
        path=path,
        mode=mode,
        relative_only=relative_only,
        dry_run=dry_run,
        format=format.value,
        output=output,
        quiet=quiet,
    )


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
