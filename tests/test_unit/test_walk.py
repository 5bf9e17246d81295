"""
Unit tests for tree traversal and source file access.
"""

import os
import pytest
from pathlib import Path

from kebabify.exceptions import FileOperationError, SourceDecodeError
from kebabify.io.walk import (
    is_source_file,
    read_source,
    split_name,
    walk_entries,
    write_source,
)


class TestSplitName:
    def test_simple(self):
        assert split_name("MyComponent.svelte") == ("MyComponent", ".svelte")

    def test_last_dot_only(self):
        assert split_name("Button.test.tsx") == ("Button.test", ".tsx")

    def test_no_extension(self):
        assert split_name("Makefile") == ("Makefile", "")

    def test_dotfile(self):
        assert split_name(".eslintrc") == (".eslintrc", "")
        assert split_name(".eslintrc.json") == (".eslintrc", ".json")


class TestIsSourceFile:
    @pytest.mark.parametrize("name", ["a.js", "a.jsx", "a.ts", "a.tsx", "A.svelte", "a.vue"])
    def test_source_extensions(self, name):
        assert is_source_file(Path(name))

    @pytest.mark.parametrize("name", ["a.css", "a.json", "README", "a.JS", "a.d.ts.map"])
    def test_other_files(self, name):
        assert not is_source_file(Path(name))


class TestWalkEntries:
    """Test recursive traversal."""

    def test_preorder(self, project_dir):
        entries = list(walk_entries(project_dir))
        rel = [(e.path.relative_to(project_dir).as_posix(), e.is_dir, e.depth) for e in entries]
        assert rel == [
            (".", True, 0),
            ("ComponentLibrary", True, 1),
            ("ComponentLibrary/ButtonComponent.svelte", False, 2),
            ("MyComponent.svelte", False, 1),
        ]

    def test_files_flagged(self, project_dir):
        files = [e for e in walk_entries(project_dir) if e.is_file]
        assert {e.path.name for e in files} == {"MyComponent.svelte", "ButtonComponent.svelte"}

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileOperationError) as excinfo:
            list(walk_entries(tmp_path / "nope"))
        assert excinfo.value.path == tmp_path / "nope"

    def test_broken_symlink_skipped(self, tmp_path):
        (tmp_path / "real.ts").write_text("")
        os.symlink(tmp_path / "missing", tmp_path / "Dangling")
        names = [e.path.name for e in walk_entries(tmp_path) if e.depth > 0]
        assert names == ["real.ts"]

    def test_follows_symlinked_directory(self, tmp_path):
        target = tmp_path / "target"
        target.mkdir()
        (target / "Inner.ts").write_text("")
        root = tmp_path / "root"
        root.mkdir()
        os.symlink(target, root / "linked")

        paths = [e.path for e in walk_entries(root)]
        assert root / "linked" / "Inner.ts" in paths

    def test_symlink_loop_not_followed(self, tmp_path):
        root = tmp_path / "root"
        (root / "sub").mkdir(parents=True)
        os.symlink(root, root / "sub" / "Back")

        paths = [e.path.relative_to(root).as_posix() for e in walk_entries(root)]
        assert paths == [".", "sub"]

    def test_directory_reached_twice_listed_once(self, tmp_path):
        root = tmp_path / "root"
        (root / "Lib").mkdir(parents=True)
        (root / "Lib" / "MyThing.ts").write_text("")
        os.symlink(root / "Lib", root / "alias")

        paths = [e.path.relative_to(root).as_posix() for e in walk_entries(root)]
        assert paths == [".", "Lib", "Lib/MyThing.ts", "alias"]


class TestSourceIO:
    def test_read_write(self, tmp_path):
        path = tmp_path / "a.ts"
        write_source(path, "import A from './a';\r\n")
        assert path.read_bytes() == b"import A from './a';\r\n"
        assert read_source(path) == "import A from './a';\r\n"

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "bad.js"
        path.write_bytes(b"import x from '\xff\xfe';")
        with pytest.raises(SourceDecodeError) as excinfo:
            read_source(path)
        assert excinfo.value.path == path

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileOperationError):
            read_source(tmp_path / "gone.js")
