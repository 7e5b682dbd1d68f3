"""
Pipeline generator - orchestrates all phases of a generation run.

1. Discover source modules below the source root
2. Parse each module and scan it for directives
3. Build the type expression of every annotated declaration
4. Run the requested generator plugins and fold their fragments per target file
5. Render and format every target file
6. Write the files
"""

from __future__ import annotations

import re

from ..logging import get_logger
from .analyzer.directive_scanner import DirectiveScanner
from .analyzer.reference_resolver import ImportBindingResolver
from .backends.base import GenerationContext, GeneratorPlugin
from .config import RunConfig
from .errors import DuplicateGenerator, IllegalState, UnknownGenerator
from .filesystem import Filesystem, LocalFilesystem
from .merger.aggregator import OutputAggregator
from .merger.base import TargetFile
from .type_ast.builder import TypeExpressionBuilder
from .type_ast.nodes import SourceModule
from .type_ast.parser import SourceParser

logger = get_logger("generator")


class PipelineGenerator:
    """Runs the generator plugins over every module of a source tree."""

    def __init__(self, run_config: RunConfig):
        """
        Initialize the pipeline generator.

        Args:
            run_config: Runtime configuration

        Raises:
            DuplicateGenerator: If two plugins share a name
        """
        self.run_config = run_config
        self.filesystem: Filesystem = run_config.filesystem if run_config.filesystem is not None else LocalFilesystem()
        self.source_pattern = re.compile(run_config.source_pattern) if run_config.source_pattern else None

        self.generators: dict[str, GeneratorPlugin] = {}
        for plugin in run_config.generators:
            if plugin.name in self.generators:
                raise DuplicateGenerator(plugin.name)
            self.generators[plugin.name] = plugin

        self.parser = SourceParser()
        self.scanner = DirectiveScanner(run_config.directive_tag)

    def discover_modules(self) -> list[str]:
        """
        Walk the source root depth-first.

        Returns:
            Paths of the files matching the source pattern, in walk order
        """
        found: list[str] = []
        self._walk(self.run_config.source_root, found)
        return found

    def _walk(self, directory: str, found: list[str]) -> None:
        for path in self.filesystem.read_dir(directory):
            stat = self.filesystem.stat(path)
            if stat.is_directory:
                self._walk(path, found)
            elif stat.is_file and (self.source_pattern is None or self.source_pattern.search(path)):
                found.append(path)

    def generate(self) -> list[TargetFile]:
        """
        Generate the contents of every target file.

        Returns:
            Target files in the order they were first produced

        Raises:
            PpxError: On the first malformed directive, unknown generator or
                unsupported declaration
            IllegalState: If a generator maps a module onto itself
        """
        aggregator = OutputAggregator()
        for path in self.discover_modules():
            logger.debug("Scanning %s", path)
            self._generate_module(SourceModule(path=path, text=self.filesystem.read_file(path)), aggregator)
        return aggregator.target_files()

    def _generate_module(self, module: SourceModule, aggregator: OutputAggregator) -> None:
        parsed = self.parser.parse(module)
        annotated = self.scanner.scan(parsed)
        if not annotated:
            return

        resolver = ImportBindingResolver(parsed)
        builder = TypeExpressionBuilder(resolver, module.path)

        for item in annotated:
            declaration = builder.build_declaration(item.statement, item.directives)
            for directive in declaration.directives:
                for name in directive.generators:
                    plugin = self.generators.get(name)
                    if plugin is None:
                        raise UnknownGenerator(name, module.path, directive.line)

                    target_path = plugin.target_path(module.path)
                    if target_path == module.path:
                        raise IllegalState(f"The {name} generator would overwrite its source module {module.path}")
                    context = GenerationContext(
                        source_path=module.path,
                        target_path=target_path,
                        resolver=resolver,
                        target_path_for=plugin.target_path,
                        target_import_path_for=plugin.target_import_path,
                    )
                    logger.debug("Generating %s for %s into %s", name, declaration.name, target_path)
                    aggregator.add(target_path, plugin.generate(declaration, context))

    def render(self, target_files: list[TargetFile]) -> dict[str, str]:
        """
        Render target files and run every formatter over them, in order.

        Args:
            target_files: Output of ``generate``

        Returns:
            File contents by target path
        """
        rendered: dict[str, str] = {}
        for target in target_files:
            code = target.render(self.run_config.generation_comment)
            for formatter in self.run_config.formatters:
                code = formatter.format(code)
            rendered[target.path] = code
        return rendered

    def run(self) -> list[str]:
        """
        Generate, render and write every target file.

        Nothing is written until every file has been rendered, so a run that
        fails on its input leaves the filesystem untouched.

        Returns:
            The written paths, in order
        """
        rendered = self.render(self.generate())
        for path, code in rendered.items():
            logger.info("Writing %s...", path)
            self.filesystem.write_file(path, code)
        return list(rendered)


def run_ts_ppx(run_config: RunConfig) -> list[str]:
    """
    Run a full generation.

    Args:
        run_config: Runtime configuration

    Returns:
        The written paths, in order
    """
    return PipelineGenerator(run_config).run()
