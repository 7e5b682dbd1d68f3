"""
Base class for filesystems.

The driver only touches files through this interface so a run can target
the real disk or an in-memory tree.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class FileStat:
    """What the driver needs to know about a path."""

    is_directory: bool = False
    is_file: bool = False


class Filesystem(ABC):
    """Abstract base class for filesystems. Every call is synchronous."""

    @abstractmethod
    def read_file(self, path: str) -> str:
        """
        Read a text file.

        Raises:
            FileNotFound: If the path does not exist
        """

    @abstractmethod
    def write_file(self, path: str, contents: str) -> None:
        """Write a text file, creating parent directories as needed."""

    @abstractmethod
    def read_dir(self, path: str) -> list[str]:
        """
        List a directory.

        Returns:
            Entry paths joined with ``path``, in a stable order

        Raises:
            FileNotFound: If the directory does not exist
        """

    @abstractmethod
    def stat(self, path: str) -> FileStat:
        """
        Describe a path.

        Raises:
            FileNotFound: If the path does not exist
        """
