"""
Tests for the in-memory and local filesystems.
"""

from __future__ import annotations

import pytest

from ts_ppx.pipeline.errors import FileNotFound
from ts_ppx.pipeline.filesystem import AtomicWriter, InMemoryFilesystem, LocalFilesystem

FILES = {
    "src/b.ts": "b",
    "src/a/z.ts": "z",
    "src/a/y.ts": "y",
    "src/c.ts": "c",
}


@pytest.fixture
def memory_fs():
    return InMemoryFilesystem(dict(FILES))


@pytest.fixture
def local_fs(tmp_path, monkeypatch):
    for path, contents in FILES.items():
        target = tmp_path / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(contents, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return LocalFilesystem()


def walk(fs, directory):
    found = []
    for path in fs.read_dir(directory):
        if fs.stat(path).is_directory:
            found.extend(walk(fs, path))
        else:
            found.append(path)
    return found


class TestInMemoryFilesystem:
    def test_read_write(self, memory_fs):
        memory_fs.write_file("out/new.ts", "new")
        assert memory_fs.read_file("out/new.ts") == "new"
        assert memory_fs.stat("out").is_directory

    def test_paths_are_normalized(self, memory_fs):
        assert memory_fs.read_file("./src/b.ts") == "b"
        assert "src/a/../b.ts" in memory_fs

    def test_read_dir_is_sorted(self, memory_fs):
        assert memory_fs.read_dir("src") == ["src/a", "src/b.ts", "src/c.ts"]

    def test_root_listing(self, memory_fs):
        assert memory_fs.read_dir(".") == ["./src"]

    def test_stat(self, memory_fs):
        assert memory_fs.stat("src/b.ts").is_file
        assert memory_fs.stat("src/a").is_directory

    def test_missing_paths(self, memory_fs):
        with pytest.raises(FileNotFound):
            memory_fs.read_file("src/missing.ts")
        with pytest.raises(FileNotFound):
            memory_fs.read_dir("missing")
        with pytest.raises(FileNotFound):
            memory_fs.stat("missing")

    def test_file_not_found_message(self):
        assert str(FileNotFound("a.ts")) == 'File not found: "a.ts"'

    def test_file_not_found_is_a_file_not_found_error(self):
        assert isinstance(FileNotFound("a.ts"), FileNotFoundError)


class TestLocalFilesystem:
    def test_read_write(self, local_fs, tmp_path):
        local_fs.write_file("out/deep/new.ts", "new")
        assert (tmp_path / "out" / "deep" / "new.ts").read_text(encoding="utf-8") == "new"
        assert local_fs.read_file("out/deep/new.ts") == "new"

    def test_missing_paths(self, local_fs):
        with pytest.raises(FileNotFound):
            local_fs.read_file("src/missing.ts")
        with pytest.raises(FileNotFound):
            local_fs.read_dir("missing")
        with pytest.raises(FileNotFound):
            local_fs.stat("missing")

    def test_walk_order_matches_in_memory(self, local_fs, memory_fs):
        assert walk(local_fs, "src") == walk(memory_fs, "src") == ["src/a/y.ts", "src/a/z.ts", "src/b.ts", "src/c.ts"]


class TestAtomicWriter:
    def test_write_creates_parents(self, tmp_path):
        target = tmp_path / "a" / "b.ts"
        AtomicWriter().write(target, "content")
        assert target.read_text(encoding="utf-8") == "content"

    def test_failed_validation_keeps_existing_file(self, tmp_path):
        target = tmp_path / "b.ts"
        target.write_text("old", encoding="utf-8")

        def reject(content):
            raise ValueError("invalid")

        with pytest.raises(ValueError):
            AtomicWriter(validate=reject).write(target, "new")
        assert target.read_text(encoding="utf-8") == "old"
        assert list(tmp_path.iterdir()) == [target]
