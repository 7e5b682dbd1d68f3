"""
Tests for the fast-check generator plugin.
"""

from __future__ import annotations

import pytest

from ts_ppx.pipeline.backends import FastCheckGenerator, GenerationContext
from ts_ppx.pipeline.backends.fast_check_backend import arbitrary_name
from ts_ppx.pipeline.config import PathMapping
from ts_ppx.pipeline.errors import UnsupportedDeclarationKind
from ts_ppx.pipeline.type_ast import (
    DeclarationKind,
    ImportBinding,
    LiteralConstant,
    LiteralKind,
    ObjectShape,
    Primitive,
    PrimitiveKind,
    PropertyDef,
    Reference,
    TypeDeclaration,
    Union,
)

STRING = Primitive(PrimitiveKind.STRING)


@pytest.fixture
def generator():
    return FastCheckGenerator(target_path=PathMapping(subdirectory="testing"), target_import_path=PathMapping())


@pytest.fixture
def context(generator):
    return GenerationContext(
        source_path="src/fruit.ppx.ts",
        target_path=generator.target_path("src/fruit.ppx.ts"),
        target_path_for=generator.target_path,
        target_import_path_for=generator.target_import_path,
    )


def test_arbitrary_name():
    assert arbitrary_name("Fruit") == "arbitraryFruit"


class TestTranslate:
    """Expression translation"""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (PrimitiveKind.STRING, "fc.string()"),
            (PrimitiveKind.NUMBER, "fc.double()"),
            (PrimitiveKind.BIGINT, "fc.bigInt()"),
            (PrimitiveKind.UNDEFINED, "fc.constant(undefined)"),
        ],
    )
    def test_primitives(self, generator, context, kind, expected):
        assert generator.translate(Primitive(kind), context).code == expected

    @pytest.mark.parametrize(
        "literal,expected",
        [
            (LiteralConstant(LiteralKind.NUMBER, "-1.5"), "fc.constant(-1.5)"),
            (LiteralConstant(LiteralKind.BIGINT, "2n"), "fc.constant(2n)"),
            (LiteralConstant(LiteralKind.STRING, "x"), "fc.constant('x')"),
            (LiteralConstant(LiteralKind.BOOLEAN, "false"), "fc.constant(false)"),
            (LiteralConstant(LiteralKind.NULL, "null"), "fc.constant(null)"),
        ],
    )
    def test_literals(self, generator, context, literal, expected):
        assert generator.translate(literal, context).code == expected

    def test_record_with_optional_field(self, generator, context):
        shape = ObjectShape([PropertyDef("a", STRING), PropertyDef("b", STRING, optional=True)])
        assert generator.translate(shape, context).code == "fc.record({\n  a: fc.string(),\n  b: fc.option(fc.string(), { nil: undefined }),\n})"

    def test_empty_record(self, generator, context):
        assert generator.translate(ObjectShape([]), context).code == "fc.record({})"

    def test_union(self, generator, context):
        union = Union([STRING, LiteralConstant(LiteralKind.STRING, "a")])
        assert generator.translate(union, context).code == "fc.oneof(fc.string(), fc.constant('a'))"

    def test_local_reference(self, generator, context):
        code = generator.translate(Reference("Seed"), context)
        assert code.code == "arbitrarySeed()"
        assert code.imports == []

    def test_imported_reference(self, generator, context):
        code = generator.translate(Reference("Seed", ImportBinding("Seed", "Seed", "./seed.ppx")), context)
        assert code.code == "arbitrarySeed()"
        assert code.imports == ["import { arbitrarySeed } from './seed';"]

    def test_renamed_reference(self, generator, context):
        code = generator.translate(Reference("Pip", ImportBinding("Pip", "Seed", "./seed.ppx")), context)
        assert code.code == "arbitraryPip()"
        assert code.imports == ["import { arbitrarySeed as arbitraryPip } from './seed';"]

    def test_union_collects_imports_of_every_member(self, generator, context):
        union = Union([Reference("A", ImportBinding("A", "A", "./a")), Reference("B", ImportBinding("B", "B", "./b"))])
        assert generator.translate(union, context).imports == [
            "import { arbitraryA } from './a';",
            "import { arbitraryB } from './b';",
        ]


class TestGenerate:
    """Full fragments"""

    def test_fragment(self, generator, context):
        declaration = TypeDeclaration(name="Fruit", kind=DeclarationKind.TYPE_ALIAS, type_expression=STRING)
        fragment = generator.generate(declaration, context)
        assert fragment.imports == [
            "import fc from 'fast-check';",
            "import type { Arbitrary } from 'fast-check';",
            "import { type Fruit as $Fruit } from '../fruit.ppx';",
        ]
        assert fragment.statements == [
            "export type Fruit = $Fruit;",
            "export function arbitraryFruit(): Arbitrary<Fruit> {\n  return fc.string();\n}",
        ]

    def test_multiline_arbitrary_is_indented(self, generator, context):
        declaration = TypeDeclaration(name="Fruit", kind=DeclarationKind.TYPE_ALIAS, type_expression=ObjectShape([PropertyDef("a", STRING)]))
        statement = generator.generate(declaration, context).statements[1]
        assert statement == "export function arbitraryFruit(): Arbitrary<Fruit> {\n  return fc.record({\n    a: fc.string(),\n  });\n}"

    def test_non_alias_is_rejected(self, generator, context):
        declaration = TypeDeclaration(name="make", kind=DeclarationKind.FUNCTION, syntax_kind="function_declaration")
        with pytest.raises(UnsupportedDeclarationKind):
            generator.generate(declaration, context)

    def test_target_path_uses_subdirectory(self, generator):
        assert generator.target_path("src/fruit.ppx.ts") == "src/testing/fruit.ts"
