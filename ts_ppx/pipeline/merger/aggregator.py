"""
Output aggregator.

Accumulates generated fragments per target file path, regardless of the
source module or declaration that produced them.
"""

from __future__ import annotations

from .base import GeneratedArtifact, TargetFile


class OutputAggregator:
    """Folds fragments into one artifact per target path."""

    def __init__(self):
        self._files: dict[str, TargetFile] = {}

    def add(self, path: str, fragment: GeneratedArtifact) -> TargetFile:
        """
        Merge a fragment into the accumulator of a target path.

        Args:
            path: Target file path
            fragment: Fragment generated for one declaration

        Returns:
            The updated target file
        """
        target = self._files.get(path)
        if target is None:
            target = TargetFile(path=path)
            self._files[path] = target
        target.artifact = target.artifact.merge(fragment)
        return target

    def target_files(self) -> list[TargetFile]:
        """Return the target files in the order they were first produced."""
        return list(self._files.values())

    def __contains__(self, path: str) -> bool:
        return path in self._files

    def __len__(self) -> int:
        return len(self._files)
