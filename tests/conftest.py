"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typer.testing import CliRunner


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path):
    """
    Small frontend tree with PascalCase names.

    project/
        MyComponent.svelte          (imports ./ComponentLibrary/ButtonComponent.svelte)
        ComponentLibrary/
            ButtonComponent.svelte
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "MyComponent.svelte").write_text(
        "<script>\n"
        "  import ButtonComponent from './ComponentLibrary/ButtonComponent.svelte';\n"
        "</script>\n"
    )
    lib = root / "ComponentLibrary"
    lib.mkdir()
    (lib / "ButtonComponent.svelte").write_text("<button><slot /></button>\n")
    return root


@pytest.fixture
def kebab_project_dir(tmp_path):
    """Tree where every name and import is already kebab-case."""
    root = tmp_path / "normalized"
    (root / "component-library").mkdir(parents=True)
    (root / "my-component.svelte").write_text(
        "import button from './component-library/button-component.svelte';\n"
    )
    (root / "component-library" / "button-component.svelte").write_text("<button />\n")
    (root / "index.ts").write_text("export * from './my-component.svelte';\n")
    return root


def _snapshot(root: Path) -> dict:
    result = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_bytes()
    return result


@pytest.fixture
def snapshot():
    """Function mapping every relative path under a root to its bytes (None for directories)."""
    return _snapshot
