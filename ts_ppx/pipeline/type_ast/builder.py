"""
Type-expression builder.

Phase 2 of the pipeline: classify tree-sitter type syntax into the closed
set of type-expression nodes. This is the only place that knows the
tree-sitter node names of the TypeScript grammar.
"""

from __future__ import annotations

import re

from tree_sitter import Node

from ..errors import IllegalState, MissingPropertyType, UnsupportedTypeConstruct
from .nodes import (
    DeclarationKind,
    Directive,
    LiteralConstant,
    LiteralKind,
    ObjectShape,
    Primitive,
    PrimitiveKind,
    PropertyDef,
    Reference,
    TypeDeclaration,
    TypeExpression,
    Union,
)
from .parser import Statement, node_line, node_text

PRIMITIVE_KEYWORDS = {kind.value: kind for kind in PrimitiveKind}

DECLARATION_KINDS = {
    "type_alias_declaration": DeclarationKind.TYPE_ALIAS,
    "interface_declaration": DeclarationKind.INTERFACE,
    "class_declaration": DeclarationKind.CLASS,
    "abstract_class_declaration": DeclarationKind.CLASS,
    "enum_declaration": DeclarationKind.ENUM,
    "function_declaration": DeclarationKind.FUNCTION,
    "generator_function_declaration": DeclarationKind.FUNCTION,
    "function_signature": DeclarationKind.FUNCTION,
    "lexical_declaration": DeclarationKind.VARIABLE,
    "variable_declaration": DeclarationKind.VARIABLE,
}

_NUMBER_PATTERN = re.compile(r"^[+-]?\s*(0[xXoObB])?[0-9a-fA-F_.eE+-]+n?$")


def escape_single_quotes(contents: str) -> str:
    """Escape the unescaped single quotes of string contents.

    Used so that a literal written with double quotes can be reproduced
    between single quotes without changing its value.
    """
    out: list[str] = []
    escaped = False
    for ch in contents:
        if escaped:
            out.append(ch)
            escaped = False
        elif ch == "\\":
            out.append(ch)
            escaped = True
        elif ch == "'":
            out.append("\\'")
        else:
            out.append(ch)
    return "".join(out)


def _named_children(node: Node) -> list[Node]:
    return [c for c in node.named_children if c.type != "comment"]


class TypeExpressionBuilder:
    """Builds type-expression trees from tree-sitter nodes."""

    # Single-argument wrapper types that are transparent for generation
    READONLY_WRAPPER = "Readonly"

    def __init__(self, resolver, source_path: str = ""):
        """
        Initialize the builder.

        Args:
            resolver: ImportBindingResolver of the module being built
            source_path: Path of the module (for error messages)
        """
        self.resolver = resolver
        self.source_path = source_path

    def build_declaration(self, statement: Statement, directives: list[Directive]) -> TypeDeclaration:
        """
        Build the declaration view of an annotated statement.

        Only type aliases get a type expression; other kinds are kept so a
        generator can reject them with a precise error.

        Args:
            statement: The annotated top-level statement
            directives: Directives found above the statement

        Returns:
            TypeDeclaration
        """
        node = statement.declaration
        kind = DECLARATION_KINDS.get(node.type, DeclarationKind.OTHER)

        declaration = TypeDeclaration(
            name=self._declaration_name(node),
            kind=kind,
            syntax_kind=node.type,
            directives=list(directives),
            source_path=self.source_path,
            line=node_line(statement.node),
        )

        if kind == DeclarationKind.TYPE_ALIAS:
            if node.child_by_field_name("type_parameters") is not None:
                raise UnsupportedTypeConstruct("type_parameters", self.source_path, node_line(node))
            value = node.child_by_field_name("value")
            if value is None:
                raise IllegalState(f"Type alias without a value in {self.source_path}:{node_line(node)}")
            declaration.type_expression = self.build(value)

        return declaration

    def build(self, node: Node) -> TypeExpression:
        """
        Classify a type node.

        Args:
            node: tree-sitter node in type position

        Returns:
            The corresponding type expression

        Raises:
            UnsupportedTypeConstruct: For syntax outside the supported set
            MissingPropertyType: For object properties without a type
        """
        node_type = node.type
        line = node_line(node)

        if node_type in ("predefined_type", "type_identifier") and node_text(node) in PRIMITIVE_KEYWORDS:
            return Primitive(PRIMITIVE_KEYWORDS[node_text(node)], line=line)

        if node_type == "literal_type":
            return self._build_literal(node)

        if node_type == "object_type":
            return self._build_object(node)

        if node_type == "union_type":
            members = self._union_members(node)
            # A leading pipe with a single member, e.g. `type A = | "a"`
            if len(members) == 1:
                return self.build(members[0])
            return Union([self.build(member) for member in members], line=line)

        if node_type == "parenthesized_type":
            children = _named_children(node)
            if len(children) != 1:
                raise UnsupportedTypeConstruct(node_type, self.source_path, line)
            return self.build(children[0])

        if node_type == "generic_type":
            return self._build_generic(node)

        if node_type == "type_identifier":
            name = node_text(node)
            return Reference(name, self.resolver.find_binding(name), line=line)

        raise UnsupportedTypeConstruct(self._construct_name(node), self.source_path, line)

    def _build_literal(self, node: Node) -> TypeExpression:
        line = node_line(node)
        children = _named_children(node)
        child = children[0] if children else node
        text = node_text(child).strip()

        if child.type == "string":
            return LiteralConstant(LiteralKind.STRING, escape_single_quotes(text[1:-1]), line=line)
        if text == "undefined":
            return Primitive(PrimitiveKind.UNDEFINED, line=line)
        if text == "null":
            return LiteralConstant(LiteralKind.NULL, "null", line=line)
        if text in ("true", "false"):
            return LiteralConstant(LiteralKind.BOOLEAN, text, line=line)
        if child.type in ("number", "unary_expression") or _NUMBER_PATTERN.match(text):
            raw = "".join(text.split())
            kind = LiteralKind.BIGINT if raw.endswith("n") else LiteralKind.NUMBER
            return LiteralConstant(kind, raw, line=line)

        raise UnsupportedTypeConstruct(f"literal_type {child.type}", self.source_path, line)

    def _build_object(self, node: Node) -> ObjectShape:
        shape = ObjectShape(line=node_line(node))
        for member in _named_children(node):
            if member.type != "property_signature":
                raise UnsupportedTypeConstruct(member.type, self.source_path, node_line(member))
            shape.fields.append(self._build_property(member))
        return shape

    def _build_property(self, node: Node) -> PropertyDef:
        line = node_line(node)
        name_node = node.child_by_field_name("name")
        if name_node is None:
            raise IllegalState(f"Property signature without a name in {self.source_path}:{line}")

        if name_node.type == "string":
            name = escape_single_quotes(node_text(name_node)[1:-1])
            quoted = True
        elif name_node.type in ("property_identifier", "number"):
            name = node_text(name_node)
            quoted = False
        else:
            raise UnsupportedTypeConstruct(name_node.type, self.source_path, line)

        annotation = node.child_by_field_name("type")
        annotated = _named_children(annotation) if annotation is not None else []
        if not annotated:
            raise MissingPropertyType(name, self.source_path, line)

        return PropertyDef(
            name=name,
            type_expression=self.build(annotated[0]),
            optional=any(child.type == "?" for child in node.children),
            quoted=quoted,
        )

    def _build_generic(self, node: Node) -> TypeExpression:
        line = node_line(node)
        name_node = node.child_by_field_name("name")
        name = node_text(name_node) if name_node is not None else ""

        if name != self.READONLY_WRAPPER:
            raise UnsupportedTypeConstruct(f"generic_type {name}", self.source_path, line)

        arguments_node = node.child_by_field_name("type_arguments")
        arguments = _named_children(arguments_node) if arguments_node is not None else []
        if len(arguments) != 1:
            raise UnsupportedTypeConstruct(f"generic_type {name} with {len(arguments)} type arguments", self.source_path, line)

        return self.build(arguments[0])

    def _union_members(self, node: Node) -> list[Node]:
        """Flatten tree-sitter's binary union nodes, keeping source order."""
        members: list[Node] = []
        for child in _named_children(node):
            if child.type == "union_type":
                members.extend(self._union_members(child))
            else:
                members.append(child)
        return members

    def _construct_name(self, node: Node) -> str:
        if node.type == "predefined_type":
            return f"predefined_type {node_text(node)}"
        return node.type

    def _declaration_name(self, node: Node) -> str:
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            return node_text(name_node)
        for child in node.named_children:
            if child.type == "variable_declarator":
                declarator_name = child.child_by_field_name("name")
                if declarator_name is not None:
                    return node_text(declarator_name)
        return ""
