"""
Base class for generator plugins.

A generator plugin turns one annotated type alias into a fragment of a
companion module: the imports it needs and the statements it declares.
Concrete plugins only decide how each kind of type expression is
translated. Dispatch and the companion layout are shared here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import jinja2

from ...utils import indent_continuation, named_import, relative_import_path
from ..analyzer.reference_resolver import ImportBindingResolver
from ..errors import UnsupportedDeclarationKind, UnsupportedTypeConstruct
from ..merger.base import GeneratedArtifact
from ..type_ast.nodes import (
    ImportBinding,
    LiteralConstant,
    LiteralKind,
    ObjectShape,
    Primitive,
    PropertyDef,
    Reference,
    TypeDeclaration,
    TypeExpression,
    Union,
)

PathFunction = Callable[[str], str]


@dataclass
class GenerationContext:
    """Everything a plugin knows about the module it generates for.

    Attributes:
        source_path: Path of the source module
        target_path: Path of the file the fragment will be merged into
        resolver: Import resolver of the source module
        target_path_for: The plugin's source path -> target path mapping
        target_import_path_for: The plugin's import specifier mapping
    """

    source_path: str
    target_path: str
    resolver: ImportBindingResolver | None = None
    target_path_for: PathFunction | None = None
    target_import_path_for: PathFunction | None = None


@dataclass
class GeneratedCode:
    """An expression in the target language and the imports it requires."""

    code: str
    imports: list[str] = field(default_factory=list)


def literal_source(literal: LiteralConstant) -> str:
    """Reproduce a literal in the generated source (strings single-quoted)."""
    if literal.kind == LiteralKind.STRING:
        return f"'{literal.raw}'"
    return literal.raw


def property_key(prop: PropertyDef) -> str:
    """Object key as written in generated code."""
    return f"'{prop.name}'" if prop.quoted else prop.name


class GeneratorPlugin(ABC):
    """Abstract base class for generator plugins."""

    # Name used in directives, e.g. @ts-ppx(zod)
    name: str = ""

    # Template directory name
    TEMPLATE_DIR: str = ""

    # Imports every companion module of this plugin needs
    RUNTIME_IMPORTS: list[str] = []

    def __init__(self, target_path: PathFunction, target_import_path: PathFunction):
        """
        Initialize the plugin.

        Args:
            target_path: Maps a source module path to the path of the generated file
            target_import_path: Maps the import specifier of a source module to
                the specifier of the module generated from it
        """
        self._target_path = target_path
        self._target_import_path = target_import_path
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.alias_template = self.jinja_env.get_template("alias.ts.jinja2")
        self.companion_template = self.jinja_env.get_template(f"{self.TEMPLATE_DIR}/companion.ts.jinja2")

    def target_path(self, source_path: str) -> str:
        """Path of the file generated for a source module."""
        return self._target_path(source_path)

    def target_import_path(self, import_path: str) -> str:
        """Import specifier of the module generated from an imported one."""
        return self._target_import_path(import_path)

    def generate(self, declaration: TypeDeclaration, context: GenerationContext) -> GeneratedArtifact:
        """
        Generate the companion fragment of one declaration.

        The fragment re-exports the original type under its own name and
        declares the companion value next to it.

        Args:
            declaration: The annotated declaration
            context: Paths and resolver of the module being generated

        Returns:
            GeneratedArtifact for the target file

        Raises:
            UnsupportedDeclarationKind: If the declaration is not a type alias
            UnsupportedTypeConstruct: If the type uses unsupported syntax
        """
        if not declaration.is_type_alias or declaration.type_expression is None:
            raise UnsupportedDeclarationKind(self.name, declaration.syntax_kind, declaration.source_path, declaration.line)

        translated = self.translate(declaration.type_expression, context)
        type_name = declaration.name
        original_import = f"import {{ type {type_name} as ${type_name} }} from '{relative_import_path(context.source_path, context.target_path)}';"

        return GeneratedArtifact(
            imports=[*self.RUNTIME_IMPORTS, original_import, *translated.imports],
            statements=[
                self.alias_template.render(TYPE_NAME=type_name),
                self.companion_template.render(TYPE_NAME=type_name, EXPRESSION=translated.code),
            ],
        )

    def translate(self, expression: TypeExpression, context: GenerationContext) -> GeneratedCode:
        """
        Translate a type expression into a target-language expression.

        Args:
            expression: The type expression
            context: Generation context

        Returns:
            GeneratedCode
        """
        if isinstance(expression, Primitive):
            return self.translate_primitive(expression)
        if isinstance(expression, LiteralConstant):
            return self.translate_literal(expression)
        if isinstance(expression, ObjectShape):
            return self.translate_object(expression, context)
        if isinstance(expression, Union):
            return self.translate_union(expression, context)
        if isinstance(expression, Reference):
            return self.translate_reference(expression, context)
        raise UnsupportedTypeConstruct(type(expression).__name__, context.source_path, expression.line)

    @abstractmethod
    def translate_primitive(self, primitive: Primitive) -> GeneratedCode:
        """Translate a primitive keyword type."""

    @abstractmethod
    def translate_literal(self, literal: LiteralConstant) -> GeneratedCode:
        """Translate a literal constant type."""

    @abstractmethod
    def translate_object(self, shape: ObjectShape, context: GenerationContext) -> GeneratedCode:
        """Translate an object shape."""

    @abstractmethod
    def translate_union(self, union: Union, context: GenerationContext) -> GeneratedCode:
        """Translate a union."""

    @abstractmethod
    def translate_reference(self, reference: Reference, context: GenerationContext) -> GeneratedCode:
        """Translate a reference to another companion."""

    def _translate_fields(self, shape: ObjectShape, context: GenerationContext, open_: str, close: str) -> GeneratedCode:
        """
        Lay out an object shape as one field per line.

        Args:
            shape: The object shape
            context: Generation context
            open_: Text opening the object, e.g. "z.object({"
            close: Text closing it, e.g. "})"

        Returns:
            GeneratedCode with the nested fragments indented
        """
        if not shape.fields:
            return GeneratedCode(f"{open_}{close}")

        lines = [open_]
        imports: list[str] = []
        for prop in shape.fields:
            value = self.translate(prop.type_expression, context)
            code = self.wrap_optional(value.code) if prop.optional else value.code
            lines.append(f"  {property_key(prop)}: {indent_continuation(code, 2)},")
            imports.extend(value.imports)
        lines.append(close)
        return GeneratedCode("\n".join(lines), imports)

    @abstractmethod
    def wrap_optional(self, code: str) -> str:
        """Make a field expression accept undefined."""

    def _binding(self, reference: Reference, context: GenerationContext) -> ImportBinding | None:
        if reference.origin is not None:
            return reference.origin
        if context.resolver is not None:
            return context.resolver.find_binding(reference.name)
        return None

    def _reference_import(self, binding: ImportBinding, exported_name: str, local_name: str, context: GenerationContext) -> str:
        """Import of a companion from the module generated for ``binding``'s module."""
        import_path = context.target_import_path_for or self.target_import_path
        return named_import(exported_name, local_name, import_path(binding.module_path))
