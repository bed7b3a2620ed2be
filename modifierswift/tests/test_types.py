"""Tests for the type expression model."""

import pytest

from modifierswift.core.analyzer import (
    FunctionType,
    GenericType,
    OptionalType,
    SimpleType,
    parse_type,
)


# =========================================================================
# Tests: Rendering
# =========================================================================

class TestRawType:
    def test_simple(self):
        assert SimpleType("Edge.Set").raw_type == "Edge.Set"

    def test_generic(self):
        t = GenericType("Dictionary", [SimpleType("String"), SimpleType("Int")])
        assert t.raw_type == "Dictionary<String, Int>"

    def test_optional_generic(self):
        t = OptionalType(GenericType("Array", [SimpleType("String")]))
        assert t.raw_type == "Array<String>?"

    def test_closure(self):
        t = FunctionType([SimpleType("String"), SimpleType("Int")], SimpleType("Bool"))
        assert t.raw_type == "(String, Int) -> Bool"

    def test_escaping_closure_with_attributes(self):
        t = FunctionType(
            [],
            SimpleType("Void"),
            is_escaping_closure=True,
            attributes=["@Sendable"],
            effects=["async", "throws"],
        )
        assert t.raw_type == "@escaping @Sendable () async throws -> Void"

    def test_optional_closure_is_parenthesized(self):
        t = OptionalType(FunctionType([], SimpleType("Void")))
        assert t.raw_type == "(() -> Void)?"

    def test_str_matches_raw_type(self):
        t = OptionalType(SimpleType("CGFloat"))
        assert str(t) == "CGFloat?"


# =========================================================================
# Tests: Accessors
# =========================================================================

class TestAccessors:
    def test_neutral_values_on_simple(self):
        t = SimpleType("String")
        assert t.generic_parameters == ()
        assert t.closure_parameters == ()
        assert t.closure_return_type is None
        assert t.is_optional is False
        assert t.is_closure is False
        assert t.is_escaping is False

    def test_optional_forwards_base_name_and_generics(self):
        inner = GenericType("Array", [SimpleType("Int")])
        t = OptionalType(inner)
        assert t.base_name == "Array"
        assert t.generic_parameters == (SimpleType("Int"),)

    def test_closure_base_name(self):
        assert FunctionType([], SimpleType("Void")).base_name == "Closure"

    def test_without_escaping(self):
        t = FunctionType([SimpleType("Int")], SimpleType("Void"), is_escaping_closure=True)
        plain = t.without_escaping()
        assert plain.is_escaping is False
        assert plain.parameters == t.parameters
        assert t.is_escaping is True

    def test_parameters_stored_as_tuples(self):
        t = GenericType("Array", [SimpleType("Int")])
        assert isinstance(t.parameters, tuple)
        assert hash(t) == hash(GenericType("Array", (SimpleType("Int"),)))

    def test_generic_requires_parameters(self):
        with pytest.raises(ValueError):
            GenericType("Array", [])


# =========================================================================
# Tests: Depth and traversal
# =========================================================================

class TestDepth:
    def test_simple_depth(self):
        assert SimpleType("Int").depth == 1

    def test_nested_depth(self):
        t = GenericType("Array", [GenericType("Dictionary", [SimpleType("String"), SimpleType("Int")])])
        assert t.depth == 3

    def test_closure_depth_counts_return_type(self):
        t = FunctionType([], OptionalType(SimpleType("Int")))
        assert t.depth == 3

    def test_walk_is_preorder(self):
        t = OptionalType(GenericType("Array", [SimpleType("Int")]))
        names = [type(node).__name__ for node in t.walk()]
        assert names == ["OptionalType", "GenericType", "SimpleType"]


# =========================================================================
# Tests: Round-trip
# =========================================================================

ROUND_TRIP_TYPES = [
    SimpleType("String"),
    OptionalType(GenericType("Array", [SimpleType("String")])),
    GenericType("Dictionary", [SimpleType("String"), GenericType("Array", [SimpleType("Int")])]),
    OptionalType(OptionalType(SimpleType("Int"))),
    FunctionType([SimpleType("String"), SimpleType("Int")], SimpleType("Bool")),
    FunctionType([], SimpleType("Void"), is_escaping_closure=True),
    OptionalType(FunctionType([SimpleType("Bool")], SimpleType("Void"))),
    FunctionType([], OptionalType(SimpleType("Int")), effects=["async"]),
    GenericType("Binding", [OptionalType(SimpleType("String"))]),
]


class TestRoundTrip:
    @pytest.mark.parametrize("expression", ROUND_TRIP_TYPES, ids=lambda t: t.raw_type)
    def test_parse_of_render_is_identity(self, expression):
        assert parse_type(expression.raw_type) == expression
