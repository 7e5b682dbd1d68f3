"""
Zod generator plugin.

Generates, for every annotated type alias ``T``, a companion constant
exposing a runtime validator:

    export type T = $T;
    export const T = {
      schema: () => z.object({ ... }).transform((x): T => x),
    } as const;
"""

from __future__ import annotations

from ..type_ast.nodes import LiteralConstant, LiteralKind, ObjectShape, Primitive, PrimitiveKind, Reference, Union
from .base import GeneratedCode, GenerationContext, GeneratorPlugin, literal_source


class ZodGenerator(GeneratorPlugin):
    """Zod schema generator."""

    name = "zod"
    TEMPLATE_DIR = "zod"

    RUNTIME_IMPORTS = ["import { z } from 'zod';"]

    PRIMITIVE_MAP = {
        PrimitiveKind.STRING: "z.string()",
        PrimitiveKind.NUMBER: "z.number()",
        PrimitiveKind.BIGINT: "z.bigint()",
        PrimitiveKind.UNDEFINED: "z.undefined()",
    }

    def translate_primitive(self, primitive: Primitive) -> GeneratedCode:
        return GeneratedCode(self.PRIMITIVE_MAP[primitive.kind])

    def translate_literal(self, literal: LiteralConstant) -> GeneratedCode:
        if literal.kind == LiteralKind.NULL:
            return GeneratedCode("z.null()")
        return GeneratedCode(f"z.literal({literal_source(literal)})")

    def translate_object(self, shape: ObjectShape, context: GenerationContext) -> GeneratedCode:
        return self._translate_fields(shape, context, "z.object({", "})")

    def wrap_optional(self, code: str) -> str:
        return f"{code}.optional()"

    def translate_union(self, union: Union, context: GenerationContext) -> GeneratedCode:
        members = [self.translate(alternative, context) for alternative in union.alternatives]
        return GeneratedCode(
            f"z.union([{', '.join(m.code for m in members)}])",
            [imp for m in members for imp in m.imports],
        )

    def translate_reference(self, reference: Reference, context: GenerationContext) -> GeneratedCode:
        # The companion shares the name of the type, so referencing it is a call
        code = f"{reference.name}.schema()"
        binding = self._binding(reference, context)
        if binding is None:
            return GeneratedCode(code)
        return GeneratedCode(code, [self._reference_import(binding, binding.imported_name, binding.local_name, context)])
