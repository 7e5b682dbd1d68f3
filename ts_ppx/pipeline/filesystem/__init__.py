"""
Filesystems used by the pipeline driver.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .base import FileStat, Filesystem
from .local import LocalFilesystem
from .memory import InMemoryFilesystem

__all__ = [
    "AtomicWriter",
    "FileStat",
    "Filesystem",
    "LocalFilesystem",
    "InMemoryFilesystem",
]
