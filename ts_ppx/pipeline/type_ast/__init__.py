"""
Type-expression model, its tree-sitter parser and builder.
"""

from __future__ import annotations

from .builder import TypeExpressionBuilder
from .nodes import (
    DeclarationKind,
    Directive,
    ImportBinding,
    LiteralConstant,
    LiteralKind,
    ObjectShape,
    Primitive,
    PrimitiveKind,
    PropertyDef,
    Reference,
    SourceModule,
    TypeDeclaration,
    TypeExpression,
    Union,
)
from .parser import ParsedModule, SourceParser, Statement

__all__ = [
    "DeclarationKind",
    "Directive",
    "ImportBinding",
    "LiteralConstant",
    "LiteralKind",
    "ObjectShape",
    "ParsedModule",
    "Primitive",
    "PrimitiveKind",
    "PropertyDef",
    "Reference",
    "SourceModule",
    "SourceParser",
    "Statement",
    "TypeDeclaration",
    "TypeExpression",
    "TypeExpressionBuilder",
    "Union",
]
