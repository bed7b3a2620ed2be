"""Utility modules for the modifierswift core package.

This package contains shared utility functions used across the codebase.
"""

from .scanning import (
    find_matching,
    find_top_level,
    is_balanced,
    split_top_level,
    strip_enclosing,
)

__all__ = [
    "find_matching",
    "find_top_level",
    "is_balanced",
    "split_top_level",
    "strip_enclosing",
]
