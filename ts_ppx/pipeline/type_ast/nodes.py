"""
Type-expression model.

These nodes represent the structure of a TypeScript type declaration,
independently of the parser that produced them. Backends only ever
translate these nodes, never raw syntax.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(str, Enum):
    """Primitive keyword types."""

    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    UNDEFINED = "undefined"


class LiteralKind(str, Enum):
    """Kinds of literal constant types."""

    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    NULL = "null"


class DeclarationKind(str, Enum):
    """Kind of a top-level statement carrying a directive."""

    TYPE_ALIAS = "type_alias"
    INTERFACE = "interface"
    CLASS = "class"
    ENUM = "enum"
    FUNCTION = "function"
    VARIABLE = "variable"
    OTHER = "other"


@dataclass
class TypeExpression:
    """Base class for all type-expression nodes."""

    # 1-based line of the syntax the node was built from (for error messages)
    line: int | None = field(default=None, compare=False, kw_only=True)


@dataclass
class Primitive(TypeExpression):
    """A primitive keyword type (string, number, bigint, undefined)."""

    kind: PrimitiveKind = PrimitiveKind.STRING


@dataclass
class LiteralConstant(TypeExpression):
    """A literal type, kept exactly as written.

    For strings, ``raw`` holds the contents without the surrounding quotes.
    """

    kind: LiteralKind = LiteralKind.STRING
    raw: str = ""


@dataclass
class PropertyDef:
    """A named field of an object shape."""

    name: str = ""
    type_expression: TypeExpression | None = None
    optional: bool = False

    # Whether the key was written as a string literal ('foo-bar': ...)
    quoted: bool = False


@dataclass
class ObjectShape(TypeExpression):
    """An object literal type; fields keep declaration order."""

    fields: list[PropertyDef] = field(default_factory=list)


@dataclass
class ImportBinding:
    """A name made visible in a module by a named import."""

    local_name: str = ""
    imported_name: str = ""
    module_path: str = ""  # Module specifier without quotes, e.g. "./nutritions.ppx"

    @property
    def is_renamed(self) -> bool:
        return self.local_name != self.imported_name


@dataclass
class Reference(TypeExpression):
    """A reference to another named type.

    ``origin`` is None when the type is declared in the same module.
    """

    name: str = ""
    origin: ImportBinding | None = None

    @property
    def is_imported(self) -> bool:
        return self.origin is not None


@dataclass
class Union(TypeExpression):
    """A union type; alternatives keep source order and are never deduplicated."""

    alternatives: list[TypeExpression] = field(default_factory=list)


@dataclass
class Directive:
    """An ordered, non-empty list of generator names requested for a declaration."""

    generators: list[str] = field(default_factory=list)
    line: int | None = None


@dataclass
class TypeDeclaration:
    """A top-level declaration that carries at least one directive."""

    name: str = ""
    kind: DeclarationKind = DeclarationKind.OTHER
    syntax_kind: str = ""  # Raw syntax node type, used in error messages
    type_expression: TypeExpression | None = None  # Only set for type aliases
    directives: list[Directive] = field(default_factory=list)
    source_path: str = ""
    line: int | None = None

    @property
    def is_type_alias(self) -> bool:
        return self.kind == DeclarationKind.TYPE_ALIAS


@dataclass
class SourceModule:
    """A source file: its path and raw text."""

    path: str = ""
    text: str = ""

    @property
    def is_tsx(self) -> bool:
        return self.path.endswith(".tsx")
