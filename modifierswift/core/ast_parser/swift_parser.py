"""Swift interface parser using tree-sitter.

Walks ``.swiftinterface`` (or plain Swift) source for ``extension View``
blocks and extracts their public functions as ModifierInfo records.

- extension View / extension SwiftUI.View -> candidate block
- public / open function_declaration     -> one ModifierInfo
- /// or /** */ comments before a function -> documentation
- @available(...) on the extension        -> availability of members without their own

Other receivers (``extension String``, ``extension ViewModifier``) and
non-exported functions are skipped.

Interface files declare most members without a body, which the grammar
does not accept inside an extension: such a ``class_body`` comes back with
ERROR nodes in place of the declarations. Those bodies are recovered from
their text with ``split_members``.
"""

import logging
import re
from typing import Iterator, List, Optional

import tree_sitter
import tree_sitter_swift

from .base import BaseLanguageParser
from .models import ModifierInfo, ParseError
from .signature import doc_comment_text, parse_function_header, split_attributes, split_members

logger = logging.getLogger(__name__)

_SWIFT_LANGUAGE = tree_sitter.Language(tree_sitter_swift.language())

# Receivers whose extensions hold View modifiers
RECEIVER_NAMES = frozenset({"View", "SwiftUI.View"})

_EXTENSION_HEADER_RE = re.compile(
    r"^(?:@\w+(?:\([^)]*\))?\s+|\w+\s+)*?extension\s+(?P<type>[\w.]+)"
)

_DOC_COMMENT_TYPES = ("comment", "multiline_comment")


class SwiftInterfaceParser(BaseLanguageParser):
    """tree-sitter based Swift interface parser.

    tree-sitter finds extension and function declarations; the header
    text of each function is handed to ``parse_function_header`` so type
    strings come back exactly as written.
    """

    def get_language(self) -> str:
        return "swift"

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _SWIFT_LANGUAGE

    def extract_modifiers(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str, errors: List[ParseError]
    ) -> List[ModifierInfo]:
        """Extract modifiers from every View extension, in source order."""
        modifiers: List[ModifierInfo] = []
        for extension in self._view_extensions(tree.root_node, source):
            body = self._body_of(extension, "class_body")
            if body is None:
                continue
            availability = self._extension_availability(extension, source)
            if body.has_error:
                found = self._extract_from_text(body, source, file_path, errors)
            else:
                found = self._extract_from_nodes(body, source, file_path, errors)
            for modifier in found:
                if modifier.availability is None:
                    modifier.availability = availability
                modifiers.append(modifier)
        return modifiers

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _view_extensions(self, root: tree_sitter.Node, source: bytes) -> Iterator[tree_sitter.Node]:
        """Yield ``extension View`` declarations anywhere in the tree."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "class_declaration":
                extended = self._extended_type(node, source)
                if extended in RECEIVER_NAMES:
                    yield node
                else:
                    logger.debug(f"Skipping declaration of {extended or node.type}")
                continue
            # Reverse so that source order is kept when popping
            stack.extend(reversed(node.children))

    def _extended_type(self, node: tree_sitter.Node, source: bytes) -> Optional[str]:
        """Return the extended type name when ``node`` is an extension."""
        header = self._header_text(node, source, "class_body")
        match = _EXTENSION_HEADER_RE.match(header.strip())
        return match.group("type") if match else None

    def _extension_availability(self, node: tree_sitter.Node, source: bytes) -> Optional[str]:
        """``@available(...)`` attributes written on the extension itself."""
        attributes, _ = split_attributes(self._header_text(node, source, "class_body"))
        available = [a for a in attributes if a.startswith("@available")]
        return " ".join(available) if available else None

    def _extract_from_nodes(
        self,
        body: tree_sitter.Node,
        source: bytes,
        file_path: str,
        errors: List[ParseError],
    ) -> List[ModifierInfo]:
        modifiers = []
        for child in body.named_children:
            if child.type != "function_declaration":
                continue
            header_text = self._header_text(child, source, "function_body")
            modifier = self._build_modifier(
                header_text,
                self._extract_doc_comment(child, source),
                file_path,
                child.start_point.row + 1,
                errors,
            )
            if modifier:
                modifiers.append(modifier)
        return modifiers

    def _extract_from_text(
        self,
        body: tree_sitter.Node,
        source: bytes,
        file_path: str,
        errors: List[ParseError],
    ) -> List[ModifierInfo]:
        """Recover functions from a body the grammar could not parse."""
        text = source[body.start_byte:body.end_byte].decode("utf-8", errors="replace")
        # Drop the braces of the body itself
        start = 1 if text.startswith("{") else 0
        end = len(text) - 1 if text.endswith("}") else len(text)
        inner = text[start:end]
        first_line = body.start_point.row + 1

        logger.debug(f"{file_path}:{first_line}: recovering extension members from text")
        modifiers = []
        for member in split_members(inner):
            if member.keyword != "func":
                continue
            line = first_line + inner.count("\n", 0, member.offset)
            modifier = self._build_modifier(
                member.header, doc_comment_text(member.comments), file_path, line, errors
            )
            if modifier:
                modifiers.append(modifier)
        return modifiers

    def _build_modifier(
        self,
        header_text: str,
        documentation: Optional[str],
        file_path: str,
        line: int,
        errors: List[ParseError],
    ) -> Optional[ModifierInfo]:
        """Build one ModifierInfo, or None when the function is not exported."""
        header = parse_function_header(header_text)

        if header is None:
            message = f"Could not read function signature: {' '.join(header_text.split())}"
            logger.warning(f"{file_path}:{line}: {message}")
            errors.append(ParseError(file_path=file_path, line=line, message=message))
            return None

        if not header.is_exported:
            logger.debug(f"Skipping non-public function {header.name} at {file_path}:{line}")
            return None

        return ModifierInfo(
            name=header.name,
            parameters=header.parameters,
            return_type=header.return_type,
            availability=header.availability,
            documentation=documentation,
            is_generic=bool(header.generic_parameters),
            generic_constraints=header.generic_constraints,
            generic_parameters=header.generic_parameters,
        )

    # ------------------------------------------------------------------
    # Node helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _body_of(node: tree_sitter.Node, body_type: str) -> Optional[tree_sitter.Node]:
        body = node.child_by_field_name("body")
        if body is not None:
            return body
        for child in node.named_children:
            if child.type == body_type:
                return child
        return None

    def _header_text(self, node: tree_sitter.Node, source: bytes, body_type: str) -> str:
        """Text of ``node`` up to (not including) its body."""
        body = self._body_of(node, body_type)
        end = body.start_byte if body is not None else node.end_byte
        return source[node.start_byte:end].decode("utf-8", errors="replace")

    @staticmethod
    def _extract_doc_comment(node: tree_sitter.Node, source: bytes) -> Optional[str]:
        """Collect ``///`` lines or a ``/** */`` block directly above ``node``."""
        comments: List[str] = []
        sibling = node.prev_sibling
        while sibling is not None and sibling.type in _DOC_COMMENT_TYPES:
            comments.insert(0, source[sibling.start_byte:sibling.end_byte].decode("utf-8", errors="replace"))
            sibling = sibling.prev_sibling
        return doc_comment_text(comments)
