"""ts_ppx

A preprocessor for TypeScript type declarations. Type aliases tagged with
a ``/** @ts-ppx(...) */`` directive get companion modules generated next
to them: zod schemas for runtime validation and fast-check arbitraries
for property-based testing.
"""

__version__ = "0.1.0"

from .pipeline import (
    GeneratedArtifact,
    InMemoryFilesystem,
    LocalFilesystem,
    PipelineGenerator,
    PpxConfig,
    PpxError,
    RunConfig,
    run_ts_ppx,
)

__all__ = [
    "PipelineGenerator",
    "PpxConfig",
    "RunConfig",
    "PpxError",
    "GeneratedArtifact",
    "LocalFilesystem",
    "InMemoryFilesystem",
    "run_ts_ppx",
]
