"""Tests for Swift enum generation."""

import pytest

from modifierswift.core.analyzer import FunctionType, OptionalType, SimpleType, parse_type
from modifierswift.core.ast_parser import ModifierInfo, ParameterInfo
from modifierswift.core.exceptions import (
    CodeGenerationFailed,
    GenerationError,
    InvalidModifierInfo,
    UnsupportedType,
)
from modifierswift.core.generator import (
    EnumGenerator,
    GeneratedCode,
    payload_type,
    swift_identifier,
    variant_tag,
)


def _make_modifier(name, parameters=None, **kwargs):
    return ModifierInfo(name=name, parameters=parameters or [], return_type="some View", **kwargs)


def _param(label, name, type_, default=None):
    return ParameterInfo(
        label=label,
        name=name,
        type=type_,
        has_default_value=default is not None,
        default_value=default,
    )


@pytest.fixture
def generator():
    return EnumGenerator()


# ── Tests: basic emission ────────────────────────────────────────────


class TestBasicEmission:
    def test_single_modifier(self, generator):
        result = generator.generate("LayoutModifier", [_make_modifier("padding")])
        assert result.is_successful is True
        assert result.modifier_count == 1
        assert "public enum LayoutModifier" in result.source_code
        assert "case padding" in result.source_code
        assert "self.padding()" in result.source_code

    def test_end_to_end_padding(self, generator):
        modifier = ModifierInfo(name="padding", parameters=[], return_type="View")
        result = generator.generate("LayoutModifier", [modifier])
        assert result.modifier_count == 1
        assert result.is_successful is True
        assert "    case padding\n" in result.source_code
        assert "case .padding:" in result.source_code
        assert "self.padding()" in result.source_code

    def test_variant_count_matches_input(self, generator):
        modifiers = [_make_modifier(n) for n in ("padding", "background", "foregroundColor")]
        result = generator.generate("AppearanceModifier", modifiers)
        assert result.modifier_count == 3
        for name in ("padding", "background", "foregroundColor"):
            assert f"case {name}" in result.source_code

    def test_file_name(self, generator):
        result = generator.generate("LayoutModifier", [_make_modifier("padding")])
        assert result.file_name == "LayoutModifier.swift"

    def test_file_extension_is_configurable(self):
        result = EnumGenerator(file_extension=".g.swift").generate("LayoutModifier", [_make_modifier("padding")])
        assert result.file_name == "LayoutModifier.g.swift"

    def test_cases_keep_input_order(self, generator):
        modifiers = [_make_modifier(n) for n in ("offset", "frame", "padding")]
        source = generator.generate("LayoutModifier", modifiers).source_code
        assert source.index("case offset") < source.index("case frame") < source.index("case padding")


# ── Tests: payloads and labels ───────────────────────────────────────


class TestPayloads:
    def test_unlabeled_parameters_are_positional(self, generator):
        modifier = _make_modifier("padding", [
            _param(None, "edges", "Edge.Set"),
            _param(None, "length", "CGFloat?"),
        ])
        source = generator.generate("LayoutModifier", [modifier]).source_code
        assert "case padding(Edge.Set, CGFloat?)" in source
        assert "case .padding(let edges, let length):" in source
        assert "self.padding(edges, length)" in source

    def test_labeled_parameter(self, generator):
        modifier = _make_modifier("background", [_param("alignment", "alignment", "Alignment")])
        source = generator.generate("AppearanceModifier", [modifier]).source_code
        assert "case background(alignment: Alignment)" in source
        assert "self.background(alignment: alignment)" in source

    def test_label_fidelity(self, generator):
        modifier = _make_modifier("frame", [
            _param("width", "w", "CGFloat?"),
            _param("height", "h", "CGFloat?"),
        ])
        source = generator.generate("LayoutModifier", [modifier]).source_code
        assert "case frame(width: CGFloat?, height: CGFloat?)" in source
        assert "case .frame(let w, let h):" in source
        assert "self.frame(width: w, height: h)" in source

    def test_default_values_emitted(self, generator):
        modifier = _make_modifier("padding", [
            _param(None, "edges", "Edge.Set", default=".all"),
            _param(None, "length", "CGFloat?", default="nil"),
        ])
        source = generator.generate("LayoutModifier", [modifier]).source_code
        assert "case padding(Edge.Set = .all, CGFloat? = nil)" in source

    def test_default_values_can_be_disabled(self):
        modifier = _make_modifier("padding", [_param(None, "edges", "Edge.Set", default=".all")])
        source = EnumGenerator(emit_default_values=False).generate("LayoutModifier", [modifier]).source_code
        assert "case padding(Edge.Set)" in source

    def test_escaping_dropped_from_payload(self, generator):
        modifier = _make_modifier("onTapGesture", [
            _param("count", "count", "Int"),
            _param("perform", "action", "@escaping () -> Void"),
        ])
        result = generator.generate("InteractionModifier", [modifier])
        assert "case onTapGesture(count: Int, perform: () -> Void)" in result.source_code
        assert "self.onTapGesture(count: count, perform: action)" in result.source_code
        assert any("closure" in w for w in result.warnings)

    def test_keyword_binding_is_escaped(self, generator):
        modifier = _make_modifier("tag", [_param(None, "default", "Int")])
        source = generator.generate("OtherModifier", [modifier]).source_code
        assert "case .tag(let `default`):" in source
        assert "self.tag(`default`)" in source

    def test_nested_generic_payload(self, generator):
        modifier = _make_modifier("items", [_param(None, "values", "Array<Dictionary<String, Int>>")])
        source = generator.generate("OtherModifier", [modifier]).source_code
        assert "case items(Array<Dictionary<String, Int>>)" in source


class TestPayloadType:
    def test_plain(self):
        assert payload_type(parse_type("CGFloat?")) == "CGFloat?"

    def test_escaping_closure(self):
        assert payload_type(parse_type("@escaping (Int) -> Void")) == "(Int) -> Void"

    def test_optional_escaping_closure(self):
        expression = OptionalType(FunctionType([], SimpleType("Void"), is_escaping_closure=True))
        assert payload_type(expression) == "(() -> Void)?"


# ── Tests: documentation and conformances ────────────────────────────


class TestDocumentation:
    def test_doc_header(self, generator):
        source = generator.generate("LayoutModifier", [_make_modifier("padding")]).source_code
        assert "/// Generated modifier enum" in source
        assert "/// This enum provides type-safe access" in source
        assert "// Variants: 1" in source
        assert "import SwiftUI" in source

    def test_conformances(self, generator):
        source = generator.generate("LayoutModifier", [_make_modifier("padding")]).source_code
        assert "Equatable" in source
        assert "Sendable" in source

    def test_view_extension(self, generator):
        source = generator.generate("LayoutModifier", [_make_modifier("padding")]).source_code
        assert "extension View {" in source
        assert "func modifier(_ modifier: LayoutModifier)" in source
        assert "switch modifier {" in source
        assert "case .padding:" in source
        assert "@inlinable" in source

    def test_case_documentation_and_availability(self, generator):
        modifier = _make_modifier(
            "padding",
            documentation="Adds padding.\nSecond line.",
            availability="@available(iOS 13.0, *)",
        )
        source = generator.generate("LayoutModifier", [modifier]).source_code
        assert "    /// Adds padding." in source
        assert "    /// Second line." in source
        assert "    /// - Availability: @available(iOS 13.0, *)" in source


# ── Tests: errors ────────────────────────────────────────────────────


class TestErrors:
    def test_empty_input(self, generator):
        with pytest.raises(InvalidModifierInfo) as exc_info:
            generator.generate("Empty", [])
        assert "no modifiers" in str(exc_info.value)

    def test_invalid_enum_name(self, generator):
        with pytest.raises(InvalidModifierInfo):
            generator.generate("Layout Modifier", [_make_modifier("padding")])

    def test_unparseable_parameter_type(self, generator):
        modifier = _make_modifier("frame", [_param("width", "width", "Array<CGFloat")])
        with pytest.raises(UnsupportedType) as exc_info:
            generator.generate("LayoutModifier", [modifier])
        assert exc_info.value.type_string == "Array<CGFloat"
        assert "Array<CGFloat" in str(exc_info.value)

    def test_unparseable_return_type(self, generator):
        modifier = ModifierInfo(name="padding", parameters=[], return_type="Foo<>")
        with pytest.raises(UnsupportedType):
            generator.generate("LayoutModifier", [modifier])

    def test_opaque_parameter(self, generator):
        modifier = _make_modifier("overlay", [_param(None, "content", "some View")])
        with pytest.raises(UnsupportedType):
            generator.generate("AppearanceModifier", [modifier])

    def test_inout_parameter(self, generator):
        modifier = _make_modifier("mutate", [_param(None, "value", "inout Int")])
        with pytest.raises(UnsupportedType):
            generator.generate("OtherModifier", [modifier])

    def test_generic_modifier(self, generator):
        modifier = _make_modifier("overlay", [_param(None, "content", "Content")],
                                  is_generic=True, generic_parameters=["Content"])
        with pytest.raises(UnsupportedType) as exc_info:
            generator.generate("AppearanceModifier", [modifier])
        assert "<Content>" in str(exc_info.value)

    def test_duplicate_case_names(self, generator):
        modifiers = [
            _make_modifier("padding"),
            _make_modifier("padding", [_param(None, "length", "CGFloat")]),
        ]
        with pytest.raises(CodeGenerationFailed) as exc_info:
            generator.generate("LayoutModifier", modifiers)
        assert "padding" in str(exc_info.value)

    def test_unsupported_payload_reasons(self, generator):
        opaque = _make_modifier("background", [_param(None, "content", "some View")])
        inout = _make_modifier("mutate", [_param(None, "value", "inout Int?")])
        assert "opaque" in generator.unsupported_payload(opaque)
        assert "'content'" in generator.unsupported_payload(opaque)
        assert "inout" in generator.unsupported_payload(inout)

    def test_supported_payloads_have_no_reason(self, generator):
        plain = _make_modifier("opacity", [_param(None, "opacity", "Double")])
        closure = _make_modifier("onTap", [_param("perform", "action", "(inout Int) -> Void")])
        broken = _make_modifier("frame", [_param("width", "width", "Array<CGFloat")])
        assert generator.unsupported_payload(plain) is None
        assert generator.unsupported_payload(closure) is None
        assert generator.unsupported_payload(broken) is None

    def test_all_errors_share_a_base(self):
        assert issubclass(InvalidModifierInfo, GenerationError)
        assert issubclass(UnsupportedType, GenerationError)
        assert issubclass(CodeGenerationFailed, GenerationError)


class TestWarnings:
    def test_deep_type_warns(self):
        modifier = _make_modifier("items", [_param(None, "values", "A<B<C<D>>>")])
        result = EnumGenerator(max_type_depth=3).generate("OtherModifier", [modifier])
        assert result.is_successful is True
        assert result.has_warnings is True
        assert "nested 4 levels deep" in result.warnings[0]

    def test_no_warnings_for_plain_types(self, generator):
        modifier = _make_modifier("opacity", [_param(None, "opacity", "Double")])
        assert generator.generate("AppearanceModifier", [modifier]).warnings == ()


# ── Tests: naming ────────────────────────────────────────────────────


class TestVariantTag:
    def test_plain_name_unchanged(self):
        assert variant_tag("padding") == "padding"
        assert variant_tag("foregroundColor") == "foregroundColor"

    def test_underscore_prefix(self):
        assert variant_tag("_makeView") == "underscoreMakeView"

    def test_double_underscore(self):
        assert variant_tag("__printChanges") == "underscoreUnderscorePrintChanges"

    def test_dollar_prefix(self):
        assert variant_tag("$binding") == "dollarBinding"

    def test_digit_prefix(self):
        assert variant_tag("3dEffect") == "digit3DEffect"

    def test_only_markers(self):
        assert variant_tag("_") == "underscore"

    def test_empty(self):
        assert variant_tag("") == "unnamed"

    def test_generated_case(self):
        source = EnumGenerator().generate("OtherModifier", [_make_modifier("_makeView")]).source_code
        assert "case underscore" in source
        assert "case .underscoreMakeView:" in source
        assert "self._makeView()" in source


class TestSwiftIdentifier:
    def test_keyword_escaped(self):
        assert swift_identifier("default") == "`default`"

    def test_plain(self):
        assert swift_identifier("padding") == "padding"


class TestGeneratedCode:
    def test_failed_unit_has_no_source(self):
        unit = GeneratedCode.failed("LayoutModifier.swift", "Layout: boom")
        assert unit.is_successful is False
        assert unit.source_code == ""
        assert unit.errors == ("Layout: boom",)
