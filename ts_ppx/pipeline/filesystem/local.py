"""
Filesystem backed by the real disk.
"""

from __future__ import annotations

import os
import stat as stat_module
from pathlib import Path

from ..errors import FileNotFound
from .atomic_writer import AtomicWriter
from .base import FileStat, Filesystem


class LocalFilesystem(Filesystem):
    """Reads and writes files on disk; writes are atomic."""

    def __init__(self, writer: AtomicWriter | None = None):
        self._writer = writer or AtomicWriter()

    def read_file(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as e:
            raise FileNotFound(path) from e

    def write_file(self, path: str, contents: str) -> None:
        self._writer.write(Path(path), contents)

    def read_dir(self, path: str) -> list[str]:
        # Sorted so that the walk order does not depend on the OS
        try:
            names = sorted(os.listdir(path or "."))
        except (FileNotFoundError, NotADirectoryError) as e:
            raise FileNotFound(path) from e
        return [os.path.join(path, name) for name in names]

    def stat(self, path: str) -> FileStat:
        try:
            st = os.stat(path)
        except FileNotFoundError as e:
            raise FileNotFound(path) from e
        return FileStat(
            is_directory=stat_module.S_ISDIR(st.st_mode),
            is_file=stat_module.S_ISREG(st.st_mode),
        )
