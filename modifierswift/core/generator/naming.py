"""Identifier sanitization for generated Swift code.

``variant_tag`` turns a modifier name into an enum case name. It is total:
every input string, including the empty one, maps to a valid bare Swift
identifier.

    padding        -> padding
    _makeView      -> underscoreMakeView
    __printChanges -> underscoreUnderscorePrintChanges
    $binding       -> dollarBinding
    3dEffect       -> digit3DEffect
"""

import re

_MARKER_WORDS = {
    "_": "underscore",
    "$": "dollar",
}

_NON_IDENTIFIER_RE = re.compile(r"\W")

# Keywords that must be escaped with backticks when used as identifiers
SWIFT_KEYWORDS = frozenset({
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "precedencegroup", "protocol", "public", "rethrows", "static",
    "struct", "subscript", "typealias", "var", "break", "case", "catch",
    "continue", "default", "defer", "do", "else", "fallthrough", "for",
    "guard", "if", "in", "repeat", "return", "throw", "switch", "where",
    "while", "as", "false", "is", "nil", "self", "Self", "super", "throws",
    "true", "try", "Any",
})


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def variant_tag(name: str) -> str:
    """Derive an enum case name from a modifier name.

    Leading characters that cannot start an identifier are replaced by
    words (``_`` → "underscore", ``$`` → "dollar", a digit ``d`` →
    "digit<d>", anything else → "symbol"); the first word stays lowercase
    and the following words and the remaining name are capitalized.
    Remaining non-identifier characters become ``_``. An empty name gives
    "unnamed".
    """
    words = []
    index = 0
    while index < len(name) and not name[index].isalpha():
        ch = name[index]
        if ch.isdigit():
            words.append(f"digit{ch}")
        else:
            words.append(_MARKER_WORDS.get(ch, "symbol"))
        index += 1

    remainder = _NON_IDENTIFIER_RE.sub("_", name[index:])
    if not words:
        return remainder or "unnamed"

    return words[0] + "".join(_capitalize(w) for w in words[1:]) + _capitalize(remainder)


def swift_identifier(name: str) -> str:
    """Backtick-escape ``name`` when it is a reserved word."""
    if name in SWIFT_KEYWORDS:
        return f"`{name}`"
    return name


def is_valid_type_name(name: str) -> bool:
    """True when ``name`` can be used as a Swift type name as-is."""
    return bool(name) and (name[0].isalpha() or name[0] == "_") and not _NON_IDENTIFIER_RE.search(name)
