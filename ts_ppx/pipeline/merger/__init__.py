"""
Merger - accumulation of generated fragments per target file.
"""

from __future__ import annotations

from .aggregator import OutputAggregator
from .base import GeneratedArtifact, TargetFile

__all__ = [
    "GeneratedArtifact",
    "OutputAggregator",
    "TargetFile",
]
