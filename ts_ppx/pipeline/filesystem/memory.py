"""
In-memory filesystem, mostly for tests and dry runs.

Paths are posix-style and normalized, so "./src/a.ts" and "src/a.ts" name
the same file. Directories exist implicitly as soon as a file lives below
them.
"""

from __future__ import annotations

import posixpath

from ..errors import FileNotFound
from .base import FileStat, Filesystem


def _normalize(path: str) -> str:
    return posixpath.normpath(path) if path else "."


class InMemoryFilesystem(Filesystem):
    """Dict-backed filesystem."""

    def __init__(self, files: dict[str, str] | None = None):
        self._files: dict[str, str] = {}
        for path, contents in (files or {}).items():
            self.write_file(path, contents)

    def read_file(self, path: str) -> str:
        key = _normalize(path)
        if key not in self._files:
            raise FileNotFound(path)
        return self._files[key]

    def write_file(self, path: str, contents: str) -> None:
        self._files[_normalize(path)] = contents

    def read_dir(self, path: str) -> list[str]:
        directory = _normalize(path)
        if directory in self._files:
            raise FileNotFound(path)

        names = set()
        for key in self._files:
            relative = self._relative_to(key, directory)
            if relative:
                names.add(relative.split("/", 1)[0])

        if not names and directory != ".":
            raise FileNotFound(path)
        return [posixpath.join(path, name) for name in sorted(names)]

    def stat(self, path: str) -> FileStat:
        key = _normalize(path)
        if key in self._files:
            return FileStat(is_file=True)
        if key == "." or any(self._relative_to(existing, key) for existing in self._files):
            return FileStat(is_directory=True)
        raise FileNotFound(path)

    def paths(self) -> list[str]:
        """Return every file path, sorted."""
        return sorted(self._files)

    def __contains__(self, path: str) -> bool:
        return _normalize(path) in self._files

    @staticmethod
    def _relative_to(key: str, directory: str) -> str | None:
        if directory == ".":
            if key.startswith("/") or key.startswith("../"):
                return None
            return key
        prefix = directory.rstrip("/") + "/"
        return key[len(prefix) :] if key.startswith(prefix) else None
