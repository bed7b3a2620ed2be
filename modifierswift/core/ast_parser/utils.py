"""AST Parser utilities.

Language detection, parser registry, and helper functions.
"""

import os
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .base import BaseLanguageParser

# Extension → language mapping
SUPPORTED_EXTENSIONS: Dict[str, str] = {
    ".swift": "swift",
    ".swiftinterface": "swift",
}

# Parser registry, filled on first use
_parser_registry: Dict[str, "BaseLanguageParser"] = {}


def detect_language(file_path: str) -> Optional[str]:
    """Detect the interface language from the file extension.

    Args:
        file_path: Path to the interface file

    Returns:
        Language identifier string or None if unsupported
    """
    _, ext = os.path.splitext(file_path)
    return SUPPORTED_EXTENSIONS.get(ext.lower())


def get_parser(language: str) -> "BaseLanguageParser":
    """Get a parser instance for the given language.

    Uses a lazy-initialized registry so the tree-sitter grammar is only
    loaded when first needed.

    Args:
        language: Language identifier (e.g., "swift")

    Returns:
        Parser instance

    Raises:
        ValueError: If language is not supported
    """
    if language not in _parser_registry:
        if language == "swift":
            from .swift_parser import SwiftInterfaceParser
            _parser_registry["swift"] = SwiftInterfaceParser()
        else:
            raise ValueError(
                f"Unsupported language: {language}. "
                f"Supported: {sorted(set(SUPPORTED_EXTENSIONS.values()))}"
            )

    return _parser_registry[language]


def is_supported_file(file_path: str) -> bool:
    """Check if a file has a supported interface extension."""
    return detect_language(file_path) is not None
