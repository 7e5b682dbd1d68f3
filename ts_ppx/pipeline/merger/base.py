"""
Generated artifacts and their merge algebra.

Fragments produced by the generators are folded per target file. Merging
concatenates statements in order and deduplicates imports on exact text,
keeping the first occurrence in place. The empty artifact is the identity,
and merging is associative, so the result only depends on the order in
which fragments are produced.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _dedupe(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


@dataclass
class GeneratedArtifact:
    """Imports and top-level statements generated for one target file.

    Attributes:
        imports: Import statements; semantically a set, first-seen order kept
        statements: Top-level statement blocks in generation order
    """

    imports: list[str] = field(default_factory=list)
    statements: list[str] = field(default_factory=list)

    def merge(self, other: GeneratedArtifact) -> GeneratedArtifact:
        """Return a new artifact with ``other`` appended to this one."""
        return GeneratedArtifact(
            imports=_dedupe([*self.imports, *other.imports]),
            statements=[*self.statements, *other.statements],
        )

    @staticmethod
    def merge_all(artifacts: Iterable[GeneratedArtifact]) -> GeneratedArtifact:
        """Fold artifacts left to right, starting from the empty artifact."""
        merged = GeneratedArtifact()
        for artifact in artifacts:
            merged = merged.merge(artifact)
        return merged

    def is_empty(self) -> bool:
        return not self.imports and not self.statements


@dataclass
class TargetFile:
    """An output file and everything generated into it."""

    path: str
    artifact: GeneratedArtifact = field(default_factory=GeneratedArtifact)

    def render(self, header: str | None = None) -> str:
        """
        Render the file contents.

        Layout: optional header comment, deduplicated imports, a blank line,
        then every statement block in accumulation order.

        Args:
            header: Optional comment placed on the first line

        Returns:
            The source text, ending with a newline
        """
        lines: list[str] = []
        if header:
            lines.append(header)
        lines.extend(_dedupe(self.artifact.imports))
        lines.append("")
        lines.extend(self.artifact.statements)
        return "\n".join(lines) + "\n"
