"""
Import-binding resolver.

Decides whether a referenced type name was imported from another module,
and if so from which module specifier.
"""

from __future__ import annotations

from collections.abc import Iterator

from tree_sitter import Node

from ..errors import IllegalState
from ..type_ast.nodes import ImportBinding
from ..type_ast.parser import ParsedModule, node_line, node_text


class ImportBindingResolver:
    """Resolves type names against the named imports of one module."""

    def __init__(self, parsed: ParsedModule):
        """
        Initialize the resolver.

        Args:
            parsed: The parsed module whose top-level imports are scanned
        """
        self.parsed = parsed
        self._binding_cache: dict[str, ImportBinding | None] = {}

    def resolve(self, name: str) -> str | None:
        """
        Resolve a reference name to the module it was imported from.

        Args:
            name: The locally visible type name

        Returns:
            The module specifier (without quotes) or None if the name is
            declared locally
        """
        binding = self.find_binding(name)
        return binding.module_path if binding else None

    def find_binding(self, name: str) -> ImportBinding | None:
        """
        Find the named import that binds a name.

        Args:
            name: The locally visible type name

        Returns:
            ImportBinding of the first import statement binding the name, or None

        Raises:
            IllegalState: If the matching import has no module specifier
        """
        if name not in self._binding_cache:
            self._binding_cache[name] = self._find_binding(name)
        return self._binding_cache[name]

    def _find_binding(self, name: str) -> ImportBinding | None:
        for statement in self.parsed.import_statements:
            for specifier in self._named_specifiers(statement):
                name_node = specifier.child_by_field_name("name")
                if name_node is None:
                    continue
                alias_node = specifier.child_by_field_name("alias")
                imported_name = node_text(name_node)
                local_name = node_text(alias_node) if alias_node is not None else imported_name
                if local_name == name:
                    return ImportBinding(
                        local_name=local_name,
                        imported_name=imported_name,
                        module_path=self._module_path(statement),
                    )
        return None

    def _named_specifiers(self, statement: Node) -> Iterator[Node]:
        for clause in statement.named_children:
            if clause.type != "import_clause":
                continue
            for child in clause.named_children:
                if child.type != "named_imports":
                    continue
                for specifier in child.named_children:
                    if specifier.type == "import_specifier":
                        yield specifier

    def _module_path(self, statement: Node) -> str:
        source = statement.child_by_field_name("source")
        if source is None or source.type != "string":
            raise IllegalState(f"Illegal state: Malformed import expression in {self.parsed.path}:{node_line(statement)}!")

        text = node_text(source)
        module_path = text[1:-1]
        if len(text) < 2 or text[0] != text[-1] or not module_path:
            raise IllegalState(f"Illegal state: Malformed import source {text!r} in {self.parsed.path}:{node_line(statement)}!")
        return module_path
