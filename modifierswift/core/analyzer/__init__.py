"""Type analysis: type expression model, parser and modifier categorization.

Public API:
    parse_type(type_string) → TypeExpression
    categorize(modifiers) → {label: [ModifierInfo]}
    TypeAnalyzer().analyze(type_string) / .categorize(modifiers)
"""

from .analyzer import TypeAnalyzer
from .categorizer import Category, categorize, classify
from .type_parser import TypeParser, parse_type
from .types import FunctionType, GenericType, OptionalType, SimpleType, TypeExpression

__all__ = [
    "TypeAnalyzer",
    "TypeParser",
    "parse_type",
    "Category",
    "categorize",
    "classify",
    "TypeExpression",
    "SimpleType",
    "GenericType",
    "OptionalType",
    "FunctionType",
]
