"""Base interface for language-specific AST parsers.

Defines the Strategy pattern base class that language parsers implement.
Shared parsing logic lives here; language-specific extraction is delegated.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List

import tree_sitter

from ..exceptions import InterfaceFileNotFound, InvalidSyntax
from .models import ModifierInfo, ParseError, ParseResult

logger = logging.getLogger(__name__)


class BaseLanguageParser(ABC):
    """Abstract base for tree-sitter based interface parsers.

    Subclasses implement:
    - get_language(): returns language name string
    - get_tree_sitter_language(): returns tree-sitter Language object
    - extract_modifiers(): walks AST tree and extracts ModifierInfo objects
    """

    @abstractmethod
    def get_language(self) -> str:
        """Return the language identifier (e.g., 'swift')."""
        ...

    @abstractmethod
    def get_tree_sitter_language(self) -> tree_sitter.Language:
        """Return the tree-sitter Language object for this language."""
        ...

    @abstractmethod
    def extract_modifiers(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str, errors: List[ParseError]
    ) -> List[ModifierInfo]:
        """Extract modifier signatures from a parsed tree-sitter AST.

        Args:
            tree: Parsed tree-sitter tree
            source: Raw source bytes
            file_path: Relative file path (for diagnostics)
            errors: Collector for non-fatal problems found while extracting

        Returns:
            List of ModifierInfo objects in source order
        """
        ...

    def parse_file(self, file_path: str, project_root: str = "") -> ParseResult:
        """Parse an interface file into a ParseResult.

        Shared logic: reads file, creates tree-sitter parser,
        delegates to subclass extract methods.

        Args:
            file_path: Path to the interface file
            project_root: Root for computing relative paths in diagnostics

        Returns:
            ParseResult with extracted modifiers and metadata

        Raises:
            InterfaceFileNotFound: If the file does not exist
            InvalidSyntax: If the file is not UTF-8 text
        """
        if not os.path.isfile(file_path):
            raise InterfaceFileNotFound(file_path)

        # Compute relative path
        if project_root and file_path.startswith(project_root):
            rel_path = file_path[len(project_root):].lstrip("/")
        else:
            rel_path = file_path

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                source_text = f.read()
        except UnicodeDecodeError as e:
            raise InvalidSyntax(f"{file_path} is not UTF-8 text: {e}") from e
        except OSError as e:
            return ParseResult(
                file_path=rel_path,
                language=self.get_language(),
                modifiers=[],
                line_count=0,
                errors=[ParseError(file_path=rel_path, line=0, message=str(e), severity="error")],
            )

        return self.parse_source(source_text, rel_path)

    def parse_source(self, source_text: str, file_path: str = "<source>") -> ParseResult:
        """Parse interface source text into a ParseResult.

        Args:
            source_text: Interface source as string
            file_path: Relative file path (for metadata)

        Returns:
            ParseResult with extracted modifiers and metadata
        """
        errors: List[ParseError] = []
        source_bytes = source_text.encode("utf-8")
        line_count = source_text.count("\n") + (1 if source_text and not source_text.endswith("\n") else 0)

        # Create parser and parse
        parser = tree_sitter.Parser(self.get_tree_sitter_language())
        tree = parser.parse(source_bytes)

        # Check for parse errors
        if tree.root_node.has_error:
            line = _first_error_line(tree.root_node)
            logger.warning(f"{file_path}:{line}: tree-sitter reported syntax errors; extracting what it can")
            errors.append(
                ParseError(
                    file_path=file_path,
                    line=line,
                    message="Tree-sitter reported parse errors in file",
                    severity="warning",
                )
            )

        modifiers = self.extract_modifiers(tree, source_bytes, file_path, errors)
        logger.debug(f"Extracted {len(modifiers)} modifiers from {file_path}")

        return ParseResult(
            file_path=file_path,
            language=self.get_language(),
            modifiers=modifiers,
            line_count=line_count,
            errors=errors,
        )


def _first_error_line(root: tree_sitter.Node) -> int:
    """1-based line of the first ERROR or missing node below ``root``."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point.row + 1
        stack.extend(child for child in reversed(node.children) if child.has_error)
    return root.start_point.row + 1
