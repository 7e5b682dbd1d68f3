"""
Generator plugins.

Contains the companion-module generators selectable from directives.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from .base import GeneratedCode, GenerationContext, GeneratorPlugin
from .fast_check_backend import FastCheckGenerator
from .zod_backend import ZodGenerator

# Plugin classes by the name used in directives
AVAILABLE_GENERATORS: dict[str, type[GeneratorPlugin]] = {
    ZodGenerator.name: ZodGenerator,
    FastCheckGenerator.name: FastCheckGenerator,
}


def create_generator(config: GeneratorConfig) -> GeneratorPlugin:
    """
    Instantiate the plugin described by a generator configuration.

    Args:
        config: Generator configuration

    Returns:
        The configured plugin

    Raises:
        ValueError: If no plugin class is known under the configured name
    """
    if config.name not in AVAILABLE_GENERATORS:
        raise ValueError(f"Unknown generator {config.name!r}, expected one of {', '.join(AVAILABLE_GENERATORS)}")
    return AVAILABLE_GENERATORS[config.name](target_path=config.target_path, target_import_path=config.target_import_path)


__all__ = [
    "AVAILABLE_GENERATORS",
    "FastCheckGenerator",
    "GeneratedCode",
    "GenerationContext",
    "GeneratorPlugin",
    "ZodGenerator",
    "create_generator",
]
