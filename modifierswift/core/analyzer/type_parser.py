"""Type expression parser.

Hand-rolled recursive descent over depth counters. The grammar is small
enough (closure, optional, generic, simple) that a tokenizer would only add
weight: each step looks at the trimmed text, picks a shape by its leading or
trailing markers and recurses on the sub-spans.

Dispatch order:

1. Function arrow at depth zero  -> ``FunctionType``
2. Trailing ``?``                -> ``OptionalType`` (one layer per ``?``)
3. Fully parenthesized           -> parse the inner text
4. ``Name<...>``                 -> ``GenericType``
5. Anything else                 -> ``SimpleType``

The arrow is checked before the ``?`` so that ``() -> Int?`` is a closure
returning ``Int?``; an optional closure is spelled ``(() -> Int)?``.
"""

import logging
import re
from typing import List, Tuple

from ..exceptions import UnresolvableType
from ..utils.scanning import (
    ARROW,
    find_matching,
    find_top_level,
    is_balanced,
    split_top_level,
    strip_enclosing,
)
from .types import FunctionType, GenericType, OptionalType, SimpleType, TypeExpression

logger = logging.getLogger(__name__)

ESCAPING_ATTRIBUTE = "@escaping"

# Type attributes that take a parenthesized argument: @convention(c)
_ATTRIBUTES_WITH_ARGUMENTS = frozenset({"convention", "differentiable"})

_ATTRIBUTE_NAME_RE = re.compile(r"@(\w+)")
_TRAILING_EFFECT_RE = re.compile(r"\s*\b(async|throws|rethrows)\s*$")


class TypeParser:
    """Parses Swift type strings into ``TypeExpression`` trees.

    Stateless; one instance can be shared freely.
    """

    def parse(self, type_string: str) -> TypeExpression:
        """Parse a type string.

        Args:
            type_string: Raw type text, e.g. ``"Array<Dictionary<String, Int>>?"``

        Returns:
            The parsed TypeExpression

        Raises:
            UnresolvableType: empty text, unbalanced delimiters, a malformed
                arrow or an empty generic argument list
        """
        text = type_string.strip()
        if not text:
            raise UnresolvableType(type_string, "empty type")
        if not is_balanced(text):
            raise UnresolvableType(type_string, "unbalanced delimiters")

        arrow = find_top_level(text, ARROW)
        if arrow != -1:
            return self._parse_closure(text, arrow)

        if text.endswith("?"):
            return OptionalType(self.parse(text[:-1]))

        inner = strip_enclosing(text)
        if inner is not None and len(split_top_level(inner)) == 1:
            return self.parse(inner)

        if "<" in text:
            return self._parse_generic(text)

        return SimpleType(text)

    def parse_list(self, text: str) -> List[TypeExpression]:
        """Parse a comma separated list of types (generic or closure arguments).

        An all-whitespace list gives no types; an empty segment such as the
        trailing one in ``"Int,"`` is an error.
        """
        segments = split_top_level(text)
        if any(not segment for segment in segments):
            raise UnresolvableType(text, "empty type in list")
        return [self.parse(segment) for segment in segments]

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def _parse_generic(self, text: str) -> TypeExpression:
        open_index = text.index("<")
        close_index = find_matching(text, open_index)
        if close_index == -1:
            raise UnresolvableType(text, "unbalanced angle brackets")

        # [Binding<Bool>] and Foo<Int>.Bar are names, not applications
        if close_index != len(text) - 1:
            return SimpleType(text)

        name = text[:open_index].strip()
        if not name:
            raise UnresolvableType(text, "generic arguments without a base name")

        span = text[open_index + 1:close_index]
        if not span.strip():
            raise UnresolvableType(text, "generic type requires at least one parameter")

        return GenericType(name, tuple(self.parse_list(span)))

    def _parse_closure(self, text: str, arrow: int) -> FunctionType:
        head = text[:arrow].strip()
        tail = text[arrow + len(ARROW):].strip()
        if not tail:
            raise UnresolvableType(text, "closure without a return type")

        head, is_escaping, attributes = self._strip_attributes(head, text)
        head, effects = self._strip_effects(head)
        if not head:
            raise UnresolvableType(text, "closure without a parameter list")

        inner = strip_enclosing(head)
        params_span = inner if inner is not None else head

        return FunctionType(
            parameters=tuple(self.parse_list(params_span)),
            return_type=self.parse(tail),
            is_escaping_closure=is_escaping,
            attributes=attributes,
            effects=effects,
        )

    # ------------------------------------------------------------------
    # Closure helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _strip_attributes(head: str, text: str) -> Tuple[str, bool, Tuple[str, ...]]:
        """Consume leading ``@attr`` tokens; ``@escaping`` sets the flag."""
        is_escaping = False
        attributes: List[str] = []
        while head.startswith("@"):
            match = _ATTRIBUTE_NAME_RE.match(head)
            if not match:
                raise UnresolvableType(text, "malformed attribute")
            end = match.end()
            if match.group(1) in _ATTRIBUTES_WITH_ARGUMENTS and head[end:end + 1] == "(":
                close = find_matching(head, end)
                if close == -1:
                    raise UnresolvableType(text, "unterminated attribute argument")
                end = close + 1
            attribute = head[:end]
            if attribute == ESCAPING_ATTRIBUTE:
                is_escaping = True
            else:
                attributes.append(attribute)
            head = head[end:].lstrip()
        return head, is_escaping, tuple(attributes)

    @staticmethod
    def _strip_effects(head: str) -> Tuple[str, Tuple[str, ...]]:
        """Split trailing ``async`` / ``throws`` markers off a parameter span."""
        effects: List[str] = []
        match = _TRAILING_EFFECT_RE.search(head)
        while match:
            effects.insert(0, match.group(1))
            head = head[:match.start()].rstrip()
            match = _TRAILING_EFFECT_RE.search(head)
        return head, tuple(effects)


_default_parser = TypeParser()


def parse_type(type_string: str) -> TypeExpression:
    """Module-level shortcut for ``TypeParser().parse``."""
    return _default_parser.parse(type_string)
