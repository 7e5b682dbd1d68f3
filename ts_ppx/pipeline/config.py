"""
Configuration for the ts_ppx pipeline.

These dataclasses mirror the JSON configuration file accepted by the CLI
(``--config``). They are plain data; the driver turns them into generator
and formatter instances.
"""

from __future__ import annotations

import json
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .backends.base import GeneratorPlugin
    from .filesystem.base import Filesystem
    from .formatters.base import Formatter

DEFAULT_GENERATION_COMMENT = "// Generated by ts_ppx"


@dataclass
class PathMapping:
    """Maps a source path (or import specifier) to a generated one.

    The ``replace`` pairs are applied in order to the file name only, then
    the result is moved into ``subdirectory`` when one is set.

    Example: with ``replace=[(".ppx", "")]`` and ``subdirectory="testing"``,
    ``src/fruit.ppx.ts`` maps to ``src/testing/fruit.ts``.
    """

    replace: list[tuple[str, str]] = field(default_factory=lambda: [(".ppx", "")])
    subdirectory: str | None = None

    def apply(self, path: str) -> str:
        directory, base = posixpath.split(path)
        for old, new in self.replace:
            base = base.replace(old, new)
        if self.subdirectory:
            directory = posixpath.join(directory, self.subdirectory)
        return posixpath.join(directory, base) if directory else base

    __call__ = apply

    @staticmethod
    def from_dict(d: dict) -> PathMapping:
        mapping = PathMapping()
        if "replace" in d:
            mapping.replace = [(old, new) for old, new in d["replace"]]
        if "subdirectory" in d:
            mapping.subdirectory = d["subdirectory"]
        return mapping

    def to_dict(self) -> dict:
        return {
            "replace": [[old, new] for old, new in self.replace],
            "subdirectory": self.subdirectory,
        }


@dataclass
class GeneratorConfig:
    """Configuration of one generator plugin."""

    # Plugin name, as referenced in directives
    name: str = ""

    # Where output generated for a source module goes
    target_path: PathMapping = field(default_factory=PathMapping)

    # How an import specifier of a source module maps to the generated module
    target_import_path: PathMapping = field(default_factory=PathMapping)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        config = GeneratorConfig(name=d.get("name", ""))
        if isinstance(d.get("target_path"), dict):
            config.target_path = PathMapping.from_dict(d["target_path"])
        if isinstance(d.get("target_import_path"), dict):
            config.target_import_path = PathMapping.from_dict(d["target_import_path"])
        return config

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "target_path": self.target_path.to_dict(),
            "target_import_path": self.target_import_path.to_dict(),
        }


def default_generators() -> list[GeneratorConfig]:
    return [
        GeneratorConfig(name="zod"),
        GeneratorConfig(name="fast-check", target_path=PathMapping(subdirectory="testing")),
    ]


@dataclass
class FormatterConfig:
    """Configuration for the prettier post-processing step."""

    # Whether formatting is enabled
    enabled: bool = False

    # Command used to invoke prettier (e.g. ["npx", "prettier"])
    command: list[str] = field(default_factory=lambda: ["prettier"])

    # Prettier parser
    parser: str = "typescript"

    # Maximum line length (None = prettier default)
    print_width: int | None = None

    # Seconds before giving up on the formatter
    timeout: int = 30

    # Extra command line arguments
    extra_args: list[str] = field(default_factory=list)


@dataclass
class PpxConfig:
    """Configuration options for a generation run."""

    # Directory walked for source modules
    source_root: str = "."

    # Regex searched in every discovered path (None = all files)
    source_pattern: str | None = None

    # JSDoc tag marking directives
    directive_tag: str = "ts-ppx"

    # Registered generators, in order
    generators: list[GeneratorConfig] = field(default_factory=default_generators)

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Add generation comment at top of each generated file
    add_generation_comment: bool = False

    @staticmethod
    def from_dict(d: dict) -> PpxConfig:
        """Create a config from a dictionary."""
        config = PpxConfig()
        for k, v in d.items():
            if k == "generators" and isinstance(v, list):
                config.generators = [GeneratorConfig.from_dict(g) for g in v]
            elif k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_json_file(path: str | Path) -> PpxConfig:
        """Load a config from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return PpxConfig.from_dict(json.load(f))

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "source_root": self.source_root,
            "source_pattern": self.source_pattern,
            "directive_tag": self.directive_tag,
            "generators": [g.to_dict() for g in self.generators],
            "formatter": {
                "enabled": self.formatter.enabled,
                "command": self.formatter.command,
                "parser": self.formatter.parser,
                "print_width": self.formatter.print_width,
                "timeout": self.formatter.timeout,
                "extra_args": self.formatter.extra_args,
            },
            "add_generation_comment": self.add_generation_comment,
        }

    def build_run_config(self, filesystem: Filesystem | None = None, generation_comment: str | None = None) -> RunConfig:
        """
        Create the runtime configuration handed to the driver.

        Args:
            filesystem: Filesystem to read sources from and write to (local disk by default)
            generation_comment: Header comment for generated files, used when
                ``add_generation_comment`` is set

        Returns:
            RunConfig with instantiated generator plugins and formatters
        """
        from .backends import create_generator
        from .filesystem import LocalFilesystem
        from .formatters import PrettierFormatter

        return RunConfig(
            source_root=self.source_root,
            source_pattern=self.source_pattern,
            generators=[create_generator(g) for g in self.generators],
            formatters=[PrettierFormatter(self.formatter)] if self.formatter.enabled else [],
            filesystem=filesystem if filesystem is not None else LocalFilesystem(),
            directive_tag=self.directive_tag,
            generation_comment=(generation_comment or DEFAULT_GENERATION_COMMENT) if self.add_generation_comment else None,
        )


@dataclass
class RunConfig:
    """Runtime configuration of one generation run."""

    source_root: str
    source_pattern: str | None = None
    generators: list[GeneratorPlugin] = field(default_factory=list)
    formatters: list[Formatter] = field(default_factory=list)
    filesystem: Filesystem | None = None
    directive_tag: str = "ts-ppx"

    # Comment placed at the top of every generated file (None = no comment)
    generation_comment: str | None = None
