"""
TypeScript source parser.

Phase 1 of the pipeline: parse a source module with tree-sitter and expose
its top-level statements, its import statements and the comments that lead
each statement. No type classification happens here.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Any

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser

from ...logging import get_logger
from .nodes import SourceModule

logger = get_logger("parser")


def node_text(node: Node) -> str:
    """Get the source text for a node."""
    return node.text.decode("utf-8")


def node_line(node: Node) -> int:
    """Get the 1-based line a node starts on."""
    return node.start_point[0] + 1


@dataclass
class Statement:
    """A top-level statement.

    ``node`` is the statement as it appears in the program (possibly an
    ``export_statement``); ``declaration`` is the exported declaration when
    there is one, otherwise the statement itself.
    """

    node: Node
    declaration: Node


@dataclass
class ParsedModule:
    """A source module together with its tree-sitter tree."""

    module: SourceModule
    tree: Any
    source_bytes: bytes
    statements: list[Statement] = field(default_factory=list)
    import_statements: list[Node] = field(default_factory=list)
    comments: list[Node] = field(default_factory=list)

    def __post_init__(self):
        self._comment_ends = [c.end_byte for c in self.comments]

    @property
    def path(self) -> str:
        return self.module.path

    def leading_comments(self, statement: Statement) -> list[Node]:
        """Return the comments directly above a statement, in source order.

        A comment leads the statement when only whitespace and other leading
        comments separate them. Comments tree-sitter attached to the tail of
        the previous statement are found too, since all comments of the
        module are considered.
        """
        cursor = statement.node.start_byte
        index = bisect.bisect_right(self._comment_ends, cursor)

        leading: list[Node] = []
        for comment in reversed(self.comments[:index]):
            if self.source_bytes[comment.end_byte : cursor].strip():
                break
            leading.append(comment)
            cursor = comment.start_byte

        leading.reverse()
        return leading


class SourceParser:
    """Parses TypeScript modules using tree-sitter and tree-sitter-typescript."""

    def __init__(self):
        self._parsers: dict[str, Parser] = {}

    def parse(self, module: SourceModule) -> ParsedModule:
        """
        Parse a source module.

        Args:
            module: The module to parse

        Returns:
            ParsedModule with statements, imports and comments collected
        """
        source_bytes = module.text.encode("utf-8")
        tree = self._get_parser(module.is_tsx).parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            errors = self._find_nodes(root, "ERROR")
            line = node_line(errors[0]) if errors else node_line(root)
            logger.warning("Syntax errors in %s near line %d; unsupported constructs will be reported", module.path, line)

        parsed = ParsedModule(
            module=module,
            tree=tree,
            source_bytes=source_bytes,
            statements=[],
            import_statements=[],
            comments=sorted(self._find_nodes(root, "comment"), key=lambda c: c.start_byte),
        )

        for child in root.named_children:
            if child.type == "comment":
                continue
            if child.type == "import_statement":
                parsed.import_statements.append(child)
            parsed.statements.append(Statement(node=child, declaration=self._unwrap_export(child)))

        return parsed

    def _get_parser(self, tsx: bool) -> Parser:
        language_key = "tsx" if tsx else "typescript"
        parser = self._parsers.get(language_key)
        if parser is None:
            language = ts_typescript.language_tsx() if tsx else ts_typescript.language_typescript()
            parser = Parser(Language(language))
            self._parsers[language_key] = parser
        return parser

    def _unwrap_export(self, node: Node) -> Node:
        if node.type != "export_statement":
            return node
        declaration = node.child_by_field_name("declaration")
        return declaration if declaration is not None else node

    def _find_nodes(self, node: Node, node_type: str) -> list[Node]:
        """Find all nodes of a given type in the tree."""
        results = []
        if node.type == node_type:
            results.append(node)
        for child in node.children:
            results.extend(self._find_nodes(child, node_type))
        return results
