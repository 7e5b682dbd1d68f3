"""
fast-check generator plugin.

Generates, for every annotated type alias ``T``, an ``arbitraryT`` factory
producing random values of ``T`` for property-based tests.
"""

from __future__ import annotations

from ..type_ast.nodes import LiteralConstant, ObjectShape, Primitive, PrimitiveKind, Reference, Union
from .base import GeneratedCode, GenerationContext, GeneratorPlugin, literal_source


def arbitrary_name(type_name: str) -> str:
    """Name of the factory generated for a type, e.g. Fruit -> arbitraryFruit."""
    return f"arbitrary{type_name}"


class FastCheckGenerator(GeneratorPlugin):
    """fast-check arbitrary generator."""

    name = "fast-check"
    TEMPLATE_DIR = "fast_check"

    RUNTIME_IMPORTS = [
        "import fc from 'fast-check';",
        "import type { Arbitrary } from 'fast-check';",
    ]

    PRIMITIVE_MAP = {
        PrimitiveKind.STRING: "fc.string()",
        PrimitiveKind.NUMBER: "fc.double()",
        PrimitiveKind.BIGINT: "fc.bigInt()",
        PrimitiveKind.UNDEFINED: "fc.constant(undefined)",
    }

    def translate_primitive(self, primitive: Primitive) -> GeneratedCode:
        return GeneratedCode(self.PRIMITIVE_MAP[primitive.kind])

    def translate_literal(self, literal: LiteralConstant) -> GeneratedCode:
        return GeneratedCode(f"fc.constant({literal_source(literal)})")

    def translate_object(self, shape: ObjectShape, context: GenerationContext) -> GeneratedCode:
        return self._translate_fields(shape, context, "fc.record({", "})")

    def wrap_optional(self, code: str) -> str:
        return f"fc.option({code}, {{ nil: undefined }})"

    def translate_union(self, union: Union, context: GenerationContext) -> GeneratedCode:
        members = [self.translate(alternative, context) for alternative in union.alternatives]
        return GeneratedCode(
            f"fc.oneof({', '.join(m.code for m in members)})",
            [imp for m in members for imp in m.imports],
        )

    def translate_reference(self, reference: Reference, context: GenerationContext) -> GeneratedCode:
        code = f"{arbitrary_name(reference.name)}()"
        binding = self._binding(reference, context)
        if binding is None:
            return GeneratedCode(code)
        return GeneratedCode(
            code,
            [self._reference_import(binding, arbitrary_name(binding.imported_name), arbitrary_name(binding.local_name), context)],
        )
