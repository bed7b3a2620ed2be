"""Swift function header scanning.

tree-sitter locates declarations; the header text of each function (every
character before its body) is then taken apart here with the same
depth-aware scanning used by the type parser. This keeps the extractor
independent of how the grammar nests parameter and type nodes, and
returns type text exactly as written in the interface.

    @available(iOS 13.0, *)
    public func frame(width w: CGFloat?, height h: CGFloat?) -> some View
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.scanning import ARROW, find_matching, find_top_level, split_top_level
from .models import ParameterInfo

VISIBILITY_KEYWORDS = frozenset({"public", "open", "package", "internal", "fileprivate", "private"})
EXPORTED_VISIBILITY = frozenset({"public", "open"})

# Words that start a member declaration
DECLARATION_KEYWORDS = frozenset({
    "func", "var", "let", "init", "deinit", "subscript", "typealias",
    "associatedtype", "struct", "enum", "protocol", "actor", "extension", "macro",
})

# Words that may precede a declaration keyword
MODIFIER_KEYWORDS = VISIBILITY_KEYWORDS | frozenset({
    "static", "class", "final", "override", "nonisolated", "mutating", "nonmutating",
    "dynamic", "optional", "required", "convenience", "lazy", "weak", "unowned",
    "indirect", "prefix", "postfix", "infix", "isolated", "consuming", "borrowing",
})

_NAME_RE = re.compile(r"`?(?P<name>[A-Za-z_$][\w$]*)`?")
_ATTRIBUTE_RE = re.compile(r"@(\w+)")
_WHERE_RE = re.compile(r"\bwhere\b")
_WORD_RE = re.compile(r"[^\s@]+")


@dataclass
class FunctionHeader:
    """Pieces of one function declaration header, as written."""

    name: str
    visibility: Optional[str]
    parameters: List[ParameterInfo]
    return_type: str
    attributes: List[str] = field(default_factory=list)  # ["@available(iOS 13.0, *)", "@inlinable"]
    generic_parameters: List[str] = field(default_factory=list)
    generic_constraints: List[str] = field(default_factory=list)

    @property
    def is_exported(self) -> bool:
        return self.visibility in EXPORTED_VISIBILITY

    @property
    def availability(self) -> Optional[str]:
        available = [a for a in self.attributes if a.startswith("@available")]
        return " ".join(available) if available else None


def split_attributes(text: str) -> tuple[List[str], str]:
    """Strip leading ``@attr`` / ``@attr(...)`` tokens from ``text``.

    Returns:
        (attributes, remaining text)
    """
    attributes: List[str] = []
    rest = text.lstrip()
    while rest.startswith("@"):
        match = _ATTRIBUTE_RE.match(rest)
        if not match:
            break
        end = match.end()
        if rest[end:end + 1] == "(":
            close = find_matching(rest, end)
            end = close + 1 if close != -1 else len(rest)
        attributes.append(rest[:end])
        rest = rest[end:].lstrip()
    return attributes, rest


def _split_prefix(header: str) -> Optional[tuple[List[str], List[str], str]]:
    """Split a header into attributes, modifier words and the text after ``func``.

    Attributes are consumed whole, so a deprecation message mentioning
    "func" is never mistaken for the keyword. Returns None without ``func``.
    """
    attributes: List[str] = []
    words: List[str] = []
    rest = header.strip()
    while rest:
        if rest.startswith("@"):
            found, rest = split_attributes(rest)
            if not found:
                # A lone "@" is not an attribute; drop it
                rest = rest[1:].lstrip()
            attributes.extend(found)
            continue
        word = _WORD_RE.match(rest).group(0)
        if word == "func":
            return attributes, words, rest[len(word):].lstrip()
        # nonisolated(unsafe) counts as nonisolated
        words.append(word.split("(")[0])
        rest = rest[len(word):].lstrip()
    return None


def parse_parameter(text: str) -> Optional[ParameterInfo]:
    """Parse one parameter clause.

    ``_ edges: Edge.Set = .all`` → label None, name "edges", type "Edge.Set",
    default ".all". A single name such as ``alignment: Alignment`` serves as
    both label and name. Returns None when the clause has no ``:``.
    """
    default_value = None
    equals = find_top_level(text, "=")
    if equals != -1:
        default_value = text[equals + 1:].strip()
        text = text[:equals]

    colon = find_top_level(text, ":")
    if colon == -1:
        return None

    _, names = split_attributes(text[:colon])
    tokens = [token.strip("`") for token in names.split()]
    type_text = text[colon + 1:].strip()
    if not tokens or not type_text:
        return None

    if len(tokens) == 1:
        label: Optional[str] = tokens[0]
        name = tokens[0]
    else:
        label = None if tokens[0] == "_" else tokens[0]
        name = tokens[1]

    return ParameterInfo(
        label=label,
        name=name,
        type=type_text,
        has_default_value=default_value is not None,
        default_value=default_value or None,
    )


def doc_comment_text(comments: List[str]) -> Optional[str]:
    """Join ``///`` lines and ``/** */`` blocks into documentation text.

    Plain ``//`` comments end the run: only the doc comments after the
    last plain one are kept.
    """
    lines: List[str] = []
    for comment in comments:
        text = comment.strip()
        if text.startswith("///"):
            lines.append(text[3:].strip())
        elif text.startswith("/**"):
            body = text[3:-2] if text.endswith("*/") else text[3:]
            block = [line.strip().lstrip("*").strip() for line in body.splitlines()]
            lines.extend(line for line in block if line)
        else:
            lines = []
    return "\n".join(lines) if lines else None


@dataclass
class MemberText:
    """One member declaration recovered from raw declaration-body text."""

    keyword: str  # "func", "var", "init", ...
    header: str  # Text up to the body, or the whole member when it has none
    offset: int  # Index of the member's first character in the scanned text
    comments: List[str] = field(default_factory=list)  # Comments written before it


def _skip_string(text: str, i: int) -> int:
    """Return the index just past the string literal starting at ``text[i]``."""
    quote = '"""' if text.startswith('"""', i) else '"'
    i += len(quote)
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text.startswith(quote, i):
            return i + len(quote)
        i += 1
    return len(text)


def split_members(text: str) -> List[MemberText]:
    """Split the inside of a ``{ ... }`` declaration body into members.

    Interface files declare most members without a body
    (``public func blur(radius: CGFloat) -> some View``), so a member ends
    either where its ``{ ... }`` body closes or where the next
    declaration keyword starts. Leading attributes and modifier words
    belong to the declaration that follows them. ``#if`` style directive
    lines end the current member and are otherwise ignored.
    """
    members: List[MemberText] = []
    comments: List[str] = []
    current: Optional[MemberText] = None
    body_start: Optional[int] = None
    prefix_start: Optional[int] = None
    depth = 0
    i = 0

    def close(end: int) -> None:
        nonlocal current, body_start
        if current is not None:
            stop = body_start if body_start is not None else end
            current.header = text[current.offset:stop].strip()
            members.append(current)
        current = None
        body_start = None

    while i < len(text):
        ch = text[i]
        if text.startswith("//", i):
            end = text.find("\n", i)
            end = len(text) if end == -1 else end
            if depth == 0:
                comments.append(text[i:end])
            i = end
            continue
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = len(text) if end == -1 else end + 2
            if depth == 0:
                comments.append(text[i:end])
            i = end
            continue
        if ch == '"':
            i = _skip_string(text, i)
            continue
        if ch == "#" and depth == 0 and not text[text.rfind("\n", 0, i) + 1:i].strip():
            if current is not None:
                close(i)
            prefix_start = None
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
            continue
        if ch in "([{":
            if ch == "{" and depth == 0 and current is not None and body_start is None:
                body_start = i
            depth += 1
        elif ch in ")]}":
            depth = max(depth - 1, 0)
            if ch == "}" and depth == 0 and body_start is not None:
                close(i + 1)
        elif depth == 0 and ch == "@":
            if prefix_start is None:
                prefix_start = i
            match = _ATTRIBUTE_RE.match(text, i)
            i = match.end() if match else i + 1
            continue
        elif depth == 0 and (ch.isalpha() or ch == "_"):
            match = _NAME_RE.match(text, i)
            word = match.group("name") if match else ch
            if word in DECLARATION_KEYWORDS:
                start = prefix_start if prefix_start is not None else i
                if current is not None:
                    close(start)
                current = MemberText(keyword=word, header="", offset=start, comments=comments)
                comments = []
                prefix_start = None
            elif word in MODIFIER_KEYWORDS:
                if prefix_start is None:
                    prefix_start = i
            else:
                prefix_start = None
            i = match.end() if match else i + 1
            continue
        i += 1

    close(len(text))
    return members


def parse_function_header(header: str) -> Optional[FunctionHeader]:
    """Parse the text of a function declaration up to its body.

    Returns:
        FunctionHeader, or None when the text is not a named function
        with a parenthesized parameter list
    """
    split = _split_prefix(header)
    if split is None:
        return None

    attributes, words, rest = split
    visibility = next((w for w in words if w in VISIBILITY_KEYWORDS), None)

    name_match = _NAME_RE.match(rest)
    if not name_match:
        return None
    name = name_match.group("name")
    rest = rest[name_match.end():].lstrip()

    generic_parameters: List[str] = []
    generic_constraints: List[str] = []
    if rest.startswith("<"):
        close = find_matching(rest, 0)
        if close == -1:
            return None
        for clause in split_top_level(rest[1:close]):
            generic_name, colon, _ = clause.partition(":")
            generic_parameters.append(generic_name.strip())
            if colon:
                generic_constraints.append(clause)
        rest = rest[close + 1:].lstrip()

    if not rest.startswith("("):
        return None
    close = find_matching(rest, 0)
    if close == -1:
        return None

    parameters = []
    for clause in split_top_level(rest[1:close]):
        parameter = parse_parameter(clause)
        if parameter is None:
            return None
        parameters.append(parameter)

    tail = rest[close + 1:]
    where_match = _WHERE_RE.search(tail)
    if where_match:
        generic_constraints.extend(split_top_level(tail[where_match.end():]))
        tail = tail[:where_match.start()]

    arrow = find_top_level(tail, ARROW)
    return_type = tail[arrow + len(ARROW):].strip() if arrow != -1 else "Void"

    return FunctionHeader(
        name=name,
        visibility=visibility,
        parameters=parameters,
        return_type=return_type,
        attributes=attributes,
        generic_parameters=generic_parameters,
        generic_constraints=[c for c in generic_constraints if c],
    )
