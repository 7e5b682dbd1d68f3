"""
Pipeline - directive-driven TypeScript companion generator.

A run goes through these phases for every source module:

1. Phase 1 (Parser): Parse the module with tree-sitter
2. Phase 2 (Analyzer): Find directives and resolve imported type names
3. Phase 3 (Builder): Build the type expression of each annotated declaration
4. Phase 4 (Backends): Generate companion code with each requested plugin
5. Phase 5 (Merger): Fold fragments per target file and render them
6. Phase 6 (Formatter): Optional post-processing (prettier)
"""

from __future__ import annotations

from .config import FormatterConfig, GeneratorConfig, PathMapping, PpxConfig, RunConfig
from .errors import PpxError
from .filesystem import InMemoryFilesystem, LocalFilesystem
from .generator import PipelineGenerator, run_ts_ppx
from .merger.base import GeneratedArtifact, TargetFile

__all__ = [
    "PipelineGenerator",
    "run_ts_ppx",
    "PpxConfig",
    "RunConfig",
    "GeneratorConfig",
    "FormatterConfig",
    "PathMapping",
    "PpxError",
    "GeneratedArtifact",
    "TargetFile",
    "LocalFilesystem",
    "InMemoryFilesystem",
]
