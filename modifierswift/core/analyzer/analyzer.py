"""Type analysis facade.

Combines type string parsing and modifier categorization behind one
object, the entry point the pipeline and generator use.
"""

import logging
from typing import Dict, Iterable, List

from ..ast_parser.models import ModifierInfo
from .categorizer import Category, categorize, classify
from .type_parser import TypeParser
from .types import TypeExpression

logger = logging.getLogger(__name__)


class TypeAnalyzer:
    """Analyzes types in modifier signatures and groups modifiers by category."""

    def __init__(self, parser: TypeParser | None = None):
        self._parser = parser or TypeParser()

    def analyze(self, type_string: str) -> TypeExpression:
        """Parse a type string into a TypeExpression.

        Raises:
            UnresolvableType: If the text matches no known type shape
        """
        return self._parser.parse(type_string)

    def classify(self, modifier: ModifierInfo) -> Category:
        return classify(modifier.name)

    def categorize(self, modifiers: Iterable[ModifierInfo]) -> Dict[str, List[ModifierInfo]]:
        """Group modifiers by category label, preserving input order."""
        modifiers = list(modifiers)
        groups = categorize(modifiers)
        logger.debug(
            f"Categorized {len(modifiers)} modifiers into {len(groups)} categories: "
            + ", ".join(f"{label}={len(items)}" for label, items in groups.items())
        )
        return groups
