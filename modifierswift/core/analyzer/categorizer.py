"""Modifier categorization by name.

Assigns every modifier to exactly one ``Category`` using fixed,
case-insensitive name sets and prefixes. Unknown names land in
``Category.OTHER``; classification never fails.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List

from ..ast_parser.models import ModifierInfo

logger = logging.getLogger(__name__)


class Category(Enum):
    """Closed set of modifier categories, in output order."""
    LAYOUT = "Layout"
    APPEARANCE = "Appearance"
    TEXT = "Text"
    INTERACTION = "Interaction"
    ANIMATION = "Animation"
    ACCESSIBILITY = "Accessibility"
    ENVIRONMENT = "Environment"
    OTHER = "Other"


# ---------------------------------------------------------------------------
# Name sets (lowercase; matched case-insensitively)
# ---------------------------------------------------------------------------

LAYOUT_MODIFIERS = frozenset({
    "frame", "padding", "offset", "position", "aspectratio", "fixedsize",
    "layoutpriority", "ignoressafearea", "edgesignoringsafearea",
    "safeareainset", "alignmentguide", "zindex", "containerrelativeframe",
    "scaledtofit", "scaledtofill",
})

APPEARANCE_MODIFIERS = frozenset({
    "background", "foregroundcolor", "foregroundstyle", "opacity", "tint",
    "overlay", "border", "cornerradius", "clipshape", "clipped", "shadow",
    "blur", "brightness", "contrast", "saturation", "grayscale", "hidden",
    "colorinvert", "colormultiply", "huerotation",
    "blendmode", "mask", "accentcolor", "preferredcolorscheme",
})

TEXT_MODIFIERS = frozenset({
    "font", "bold", "italic", "fontweight", "fontdesign", "fontwidth",
    "linelimit", "linespacing", "multilinetextalignment", "kerning",
    "tracking", "underline", "strikethrough", "textcase", "baselineoffset",
    "minimumscalefactor", "truncationmode", "allowstightening",
    "textselection", "monospaced", "monospaceddigit",
})

INTERACTION_MODIFIERS = frozenset({
    "ontapgesture", "onlongpressgesture", "gesture", "simultaneousgesture",
    "highprioritygesture", "disabled", "allowshittesting", "contentshape",
    "onhover", "onsubmit", "focused", "focusable", "ondrag", "ondrop",
    "onappear", "ondisappear", "onchange", "refreshable", "swipeactions",
    "contextmenu", "keyboardshortcut",
})

ANIMATION_MODIFIERS = frozenset({
    "animation", "transition", "transaction", "matchedgeometryeffect",
    "contenttransition", "phaseanimator", "keyframeanimator",
    "scaleeffect", "rotationeffect", "rotation3deffect",
})

ACCESSIBILITY_PREFIX = "accessibility"
ENVIRONMENT_PREFIX = "environment"

_EXACT_SETS = (
    (Category.LAYOUT, LAYOUT_MODIFIERS),
    (Category.APPEARANCE, APPEARANCE_MODIFIERS),
    (Category.TEXT, TEXT_MODIFIERS),
    (Category.INTERACTION, INTERACTION_MODIFIERS),
    (Category.ANIMATION, ANIMATION_MODIFIERS),
)

_PREFIXES = (
    (Category.ACCESSIBILITY, ACCESSIBILITY_PREFIX),
    (Category.ENVIRONMENT, ENVIRONMENT_PREFIX),
)


def classify(name: str) -> Category:
    """Return the category for a modifier name."""
    lowered = name.lower()
    for category, names in _EXACT_SETS:
        if lowered in names:
            return category
    for category, prefix in _PREFIXES:
        if lowered.startswith(prefix):
            return category
    return Category.OTHER


def categorize(modifiers: Iterable[ModifierInfo]) -> Dict[str, List[ModifierInfo]]:
    """Group modifiers by category label.

    Stable partition: within each group modifiers keep their input order.
    Only categories with at least one member appear, keyed by label
    ("Layout", "Other", ...) in ``Category`` declaration order.
    """
    buckets: Dict[Category, List[ModifierInfo]] = {}
    for modifier in modifiers:
        category = classify(modifier.name)
        logger.debug(f"{modifier.name} -> {category.value}")
        buckets.setdefault(category, []).append(modifier)

    return {
        category.value: buckets[category]
        for category in Category
        if category in buckets
    }
