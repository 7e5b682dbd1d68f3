"""
Tests for the type-expression builder.

Source snippets are parsed with tree-sitter and every annotated
declaration is built into the type-expression model.
"""

from __future__ import annotations

import pytest

from ts_ppx.pipeline.analyzer import DirectiveScanner, ImportBindingResolver
from ts_ppx.pipeline.errors import MissingPropertyType, UnsupportedTypeConstruct
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
    SourceModule,
    SourceParser,
    TypeExpressionBuilder,
    Union,
)


def build_declarations(text: str, path: str = "src/types.ppx.ts"):
    """Parse a module and build all of its annotated declarations, by name."""
    parsed = SourceParser().parse(SourceModule(path=path, text=text))
    builder = TypeExpressionBuilder(ImportBindingResolver(parsed), path)
    declarations = {}
    for annotated in DirectiveScanner().scan(parsed):
        declaration = builder.build_declaration(annotated.statement, annotated.directives)
        declarations[declaration.name] = declaration
    return declarations


def build_type(type_text: str):
    """Build the type expression of a single annotated alias."""
    declarations = build_declarations(f"/** @ts-ppx(zod) */\nexport type T = {type_text};\n")
    return declarations["T"].type_expression


class TestPrimitives:
    """Primitive keyword types"""

    @pytest.mark.parametrize(
        "keyword,kind",
        [
            ("string", PrimitiveKind.STRING),
            ("number", PrimitiveKind.NUMBER),
            ("bigint", PrimitiveKind.BIGINT),
            ("undefined", PrimitiveKind.UNDEFINED),
        ],
    )
    def test_primitive_keywords(self, keyword, kind):
        assert build_type(keyword) == Primitive(kind)

    @pytest.mark.parametrize("keyword", ["boolean", "any", "unknown", "never", "object", "void", "symbol"])
    def test_other_keywords_are_unsupported(self, keyword):
        with pytest.raises(UnsupportedTypeConstruct):
            build_type(keyword)


class TestLiterals:
    """Literal constant types"""

    def test_single_quoted_string(self):
        assert build_type("'apple'") == LiteralConstant(LiteralKind.STRING, "apple")

    def test_double_quoted_string_is_stored_without_quotes(self):
        assert build_type('"pear"') == LiteralConstant(LiteralKind.STRING, "pear")

    def test_single_quote_inside_double_quotes_is_escaped(self):
        assert build_type("\"it's\"") == LiteralConstant(LiteralKind.STRING, "it\\'s")

    def test_number(self):
        assert build_type("42") == LiteralConstant(LiteralKind.NUMBER, "42")

    def test_negative_number(self):
        assert build_type("-1") == LiteralConstant(LiteralKind.NUMBER, "-1")

    def test_bigint(self):
        assert build_type("10n") == LiteralConstant(LiteralKind.BIGINT, "10n")

    @pytest.mark.parametrize("value", ["true", "false"])
    def test_booleans(self, value):
        assert build_type(value) == LiteralConstant(LiteralKind.BOOLEAN, value)

    def test_null(self):
        assert build_type("null") == LiteralConstant(LiteralKind.NULL, "null")


class TestObjects:
    """Object literal types"""

    def test_fields_keep_declaration_order(self):
        shape = build_type("{ b: string; a: number; c: bigint }")
        assert isinstance(shape, ObjectShape)
        assert [f.name for f in shape.fields] == ["b", "a", "c"]

    def test_optional_field(self):
        shape = build_type("{ name?: string }")
        assert shape.fields == [PropertyDef("name", Primitive(PrimitiveKind.STRING), optional=True)]

    def test_quoted_key(self):
        shape = build_type("{ 'display-name': string }")
        assert shape.fields[0].name == "display-name"
        assert shape.fields[0].quoted

    def test_empty_object(self):
        assert build_type("{}") == ObjectShape([])

    def test_nested_object(self):
        shape = build_type("{ outer: { inner: null } }")
        assert shape.fields[0].type_expression == ObjectShape([PropertyDef("inner", LiteralConstant(LiteralKind.NULL, "null"))])

    def test_property_without_type_raises(self):
        with pytest.raises(MissingPropertyType) as exc_info:
            build_type("{ name }")
        assert exc_info.value.property_name == "name"

    def test_method_signature_is_unsupported(self):
        with pytest.raises(UnsupportedTypeConstruct):
            build_type("{ run(): void }")

    def test_index_signature_is_unsupported(self):
        with pytest.raises(UnsupportedTypeConstruct):
            build_type("{ [key: string]: number }")


class TestUnions:
    """Union types"""

    def test_union_is_flattened_in_source_order(self):
        union = build_type("string | number | null")
        assert union == Union(
            [
                Primitive(PrimitiveKind.STRING),
                Primitive(PrimitiveKind.NUMBER),
                LiteralConstant(LiteralKind.NULL, "null"),
            ]
        )

    def test_duplicate_alternatives_are_kept(self):
        union = build_type("'a' | 'a'")
        assert len(union.alternatives) == 2

    def test_parenthesized_union_stays_nested(self):
        union = build_type("string | (number | null)")
        assert isinstance(union.alternatives[1], Union)

    def test_leading_pipe_with_one_member_is_the_member(self):
        assert build_type("| 'x'") == LiteralConstant(LiteralKind.STRING, "x")

    def test_multiline_union_with_leading_pipes(self):
        declarations = build_declarations("/** @ts-ppx(zod) */\nexport type T =\n  | 'a'\n  | 'b';\n")
        assert declarations["T"].type_expression == Union(
            [
                LiteralConstant(LiteralKind.STRING, "a"),
                LiteralConstant(LiteralKind.STRING, "b"),
            ]
        )


class TestTransparentWrappers:
    """Readonly<T> and parentheses do not appear in the model"""

    def test_readonly_is_transparent(self):
        assert build_type("Readonly<{ a: string }>") == build_type("{ a: string }")

    def test_parentheses_are_transparent(self):
        assert build_type("(string)") == Primitive(PrimitiveKind.STRING)

    def test_other_generics_are_unsupported(self):
        with pytest.raises(UnsupportedTypeConstruct) as exc_info:
            build_type("Partial<{ a: string }>")
        assert "Partial" in exc_info.value.construct


class TestUnsupportedConstructs:
    """Syntax outside of the supported set fails with the construct name"""

    @pytest.mark.parametrize(
        "type_text",
        [
            "string[]",
            "[string, number]",
            "{ a: string } & { b: string }",
            "() => void",
            "keyof Foo",
            "typeof value",
            "`prefix-${string}`",
        ],
    )
    def test_unsupported(self, type_text):
        with pytest.raises(UnsupportedTypeConstruct):
            build_type(type_text)

    def test_generic_alias_is_unsupported(self):
        with pytest.raises(UnsupportedTypeConstruct) as exc_info:
            build_declarations("/** @ts-ppx(zod) */\nexport type Box<T> = { value: string };\n")
        assert exc_info.value.construct == "type_parameters"

    def test_error_carries_location(self):
        with pytest.raises(UnsupportedTypeConstruct) as exc_info:
            build_declarations("\n\n/** @ts-ppx(zod) */\nexport type T = string[];\n", path="src/x.ppx.ts")
        assert exc_info.value.source_path == "src/x.ppx.ts"
        assert exc_info.value.line == 4
        assert "src/x.ppx.ts:4" in str(exc_info.value)


class TestReferences:
    """Type references"""

    def test_local_reference(self):
        declarations = build_declarations(
            "/** @ts-ppx(zod) */\nexport type A = string;\n/** @ts-ppx(zod) */\nexport type B = { a: A };\n"
        )
        field = declarations["B"].type_expression.fields[0]
        assert field.type_expression == Reference("A")
        assert not field.type_expression.is_imported

    def test_imported_reference(self):
        declarations = build_declarations(
            "import { Fruit } from './fruit.ppx';\n/** @ts-ppx(zod) */\nexport type Basket = { fruit: Fruit };\n"
        )
        reference = declarations["Basket"].type_expression.fields[0].type_expression
        assert reference == Reference("Fruit", ImportBinding("Fruit", "Fruit", "./fruit.ppx"))

    def test_renamed_import_reference(self):
        declarations = build_declarations(
            "import { Fruit as Food } from './fruit.ppx';\n/** @ts-ppx(zod) */\nexport type Basket = Food;\n"
        )
        reference = declarations["Basket"].type_expression
        assert reference.origin.is_renamed
        assert reference.origin.imported_name == "Fruit"
        assert reference.origin.local_name == "Food"


class TestDeclarations:
    """Declaration kinds"""

    def test_unexported_alias(self):
        declarations = build_declarations("/** @ts-ppx(zod) */\ntype Local = string;\n")
        assert declarations["Local"].is_type_alias

    def test_interface_is_kept_without_type(self):
        declarations = build_declarations("/** @ts-ppx(zod) */\nexport interface Fruit { name: string }\n")
        assert declarations["Fruit"].kind == DeclarationKind.INTERFACE
        assert declarations["Fruit"].type_expression is None

    def test_unannotated_aliases_are_not_built(self):
        # Would raise if it were built
        declarations = build_declarations("export type Ignored = string[];\n/** @ts-ppx(zod) */\nexport type Kept = string;\n")
        assert list(declarations) == ["Kept"]

    def test_tsx_module(self):
        declarations = build_declarations("/** @ts-ppx(zod) */\nexport type T = { a: string };\n", path="src/view.ppx.tsx")
        assert declarations["T"].type_expression.fields[0].name == "a"
