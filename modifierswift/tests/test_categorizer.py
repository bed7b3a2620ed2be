"""Tests for modifier categorization."""

from modifierswift.core.analyzer import Category, TypeAnalyzer, categorize, classify
from modifierswift.core.ast_parser import ModifierInfo


def _make_modifier(name):
    return ModifierInfo(name=name, parameters=[], return_type="some View")


def _make_modifiers(*names):
    return [_make_modifier(name) for name in names]


# ── Tests: classify ──────────────────────────────────────────────────


class TestClassify:
    def test_exact_names(self):
        assert classify("frame") is Category.LAYOUT
        assert classify("background") is Category.APPEARANCE
        assert classify("font") is Category.TEXT
        assert classify("onTapGesture") is Category.INTERACTION
        assert classify("animation") is Category.ANIMATION

    def test_case_insensitive(self):
        assert classify("FRAME") is Category.LAYOUT
        assert classify("ForegroundColor") is Category.APPEARANCE

    def test_prefixes(self):
        assert classify("accessibilityLabel") is Category.ACCESSIBILITY
        assert classify("AccessibilityHidden") is Category.ACCESSIBILITY
        assert classify("environmentObject") is Category.ENVIRONMENT

    def test_exact_name_is_not_a_prefix(self):
        assert classify("frameRate") is Category.OTHER

    def test_unknown_falls_back(self):
        assert classify("unknownModifier") is Category.OTHER
        assert classify("") is Category.OTHER


# ── Tests: categorize ────────────────────────────────────────────────


class TestCategorize:
    def test_layout_group(self):
        groups = categorize(_make_modifiers("frame", "padding", "offset"))
        assert len(groups["Layout"]) == 3
        assert sorted(m.name for m in groups["Layout"]) == ["frame", "offset", "padding"]

    def test_appearance_group(self):
        groups = categorize(_make_modifiers("background", "foregroundColor", "opacity"))
        assert len(groups["Appearance"]) == 3

    def test_text_group(self):
        groups = categorize(_make_modifiers("font", "bold", "italic"))
        assert len(groups["Text"]) == 3

    def test_interaction_group(self):
        groups = categorize(_make_modifiers("onTapGesture", "disabled"))
        assert len(groups["Interaction"]) == 2

    def test_accessibility_group(self):
        groups = categorize(_make_modifiers("accessibilityLabel", "accessibilityHint"))
        assert len(groups["Accessibility"]) == 2

    def test_mixed_groups(self):
        groups = categorize(_make_modifiers("padding", "background", "font", "onTapGesture"))
        assert len(groups) == 4
        for label in ("Layout", "Appearance", "Text", "Interaction"):
            assert len(groups[label]) == 1

    def test_unknown_goes_to_other(self):
        groups = categorize(_make_modifiers("unknownModifier"))
        assert len(groups["Other"]) == 1

    def test_empty_input(self):
        assert categorize([]) == {}

    def test_totality(self):
        modifiers = _make_modifiers(
            "padding", "zzz", "font", "accessibilityLabel", "environmentObject",
            "padding", "opacity", "transition", "whatever", "bold",
        )
        groups = categorize(modifiers)
        assert sum(len(items) for items in groups.values()) == len(modifiers)
        grouped_ids = sorted(id(m) for items in groups.values() for m in items)
        assert grouped_ids == sorted(id(m) for m in modifiers)

    def test_stable_within_group(self):
        modifiers = _make_modifiers("padding", "font", "frame", "bold", "offset")
        groups = categorize(modifiers)
        assert [m.name for m in groups["Layout"]] == ["padding", "frame", "offset"]
        assert [m.name for m in groups["Text"]] == ["font", "bold"]

    def test_keys_follow_category_order(self):
        groups = categorize(_make_modifiers("zzz", "accessibilityLabel", "bold", "frame"))
        assert list(groups) == ["Layout", "Text", "Accessibility", "Other"]


# ── Tests: TypeAnalyzer facade ───────────────────────────────────────


class TestAnalyzerCategorize:
    def test_matches_module_function(self):
        modifiers = _make_modifiers("padding", "background", "unknown")
        assert TypeAnalyzer().categorize(modifiers) == categorize(modifiers)

    def test_classify_takes_modifier(self):
        assert TypeAnalyzer().classify(_make_modifier("opacity")) is Category.APPEARANCE

    def test_accepts_generator_input(self):
        groups = TypeAnalyzer().categorize(m for m in _make_modifiers("bold", "italic"))
        assert len(groups["Text"]) == 2
