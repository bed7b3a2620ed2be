"""ModifierSwift AST Parser: tree-sitter based interface parsing.

Public API:
    parse_file(path, project_root) → ParseResult
    parse_source(source, file_path, language) → ParseResult
    InterfaceParser().parse(file_path=... | source=...) → [ModifierInfo]
    detect_language(file_path) → str | None
"""

from typing import List, Optional

from .models import ModifierInfo, ParameterInfo, ParseError, ParseResult
from .utils import detect_language, get_parser, is_supported_file

__all__ = [
    "parse_file",
    "parse_source",
    "detect_language",
    "is_supported_file",
    "InterfaceParser",
    "ModifierInfo",
    "ParameterInfo",
    "ParseError",
    "ParseResult",
]

DEFAULT_LANGUAGE = "swift"


def parse_file(file_path: str, project_root: str = "") -> ParseResult:
    """Parse an interface file into extracted modifier signatures.

    Detects the language from the file extension; files without a known
    extension are read as Swift.

    Args:
        file_path: Path to the interface file
        project_root: Root for computing relative paths

    Returns:
        ParseResult containing extracted modifiers

    Raises:
        InterfaceFileNotFound: If the file does not exist
    """
    language = detect_language(file_path) or DEFAULT_LANGUAGE
    return get_parser(language).parse_file(file_path, project_root)


def parse_source(source_text: str, file_path: str = "<source>", language: Optional[str] = None) -> ParseResult:
    """Parse interface source text into extracted modifier signatures.

    Args:
        source_text: Interface source as string
        file_path: Relative file path (for metadata)
        language: Language identifier. If None, detected from file_path.

    Returns:
        ParseResult containing extracted modifiers
    """
    if language is None:
        language = detect_language(file_path) or DEFAULT_LANGUAGE
    return get_parser(language).parse_source(source_text, file_path)


class InterfaceParser:
    """Extracts View modifiers from a file path or from source text."""

    def parse(self, file_path: Optional[str] = None, source: Optional[str] = None) -> List[ModifierInfo]:
        """Parse exactly one of ``file_path`` or ``source``.

        Raises:
            ValueError: If neither or both inputs are given
            InterfaceFileNotFound: If ``file_path`` does not exist
        """
        if (file_path is None) == (source is None):
            raise ValueError("Provide exactly one of file_path or source")
        if file_path is not None:
            return parse_file(file_path).modifiers
        return parse_source(source).modifiers
