"""Depth-aware text scanning helpers.

Shared by the type expression parser and the interface extractor. Both work
on raw Swift text and need to find separators that sit outside of any
``<...>``, ``(...)``, ``[...]`` or ``{...}`` nesting.

The ``>`` of a function arrow (``->``) is never treated as a closing angle
bracket.
"""

from typing import List, Optional

# Opening delimiter -> closing delimiter
DELIMITERS = {"<": ">", "(": ")", "[": "]", "{": "}"}
_CLOSERS = {close: open_ for open_, close in DELIMITERS.items()}

ARROW = "->"


def _is_arrow_head(text: str, index: int) -> bool:
    """True when ``text[index]`` is the ``>`` of an ``->`` token."""
    return text[index] == ">" and index > 0 and text[index - 1] == "-"


def is_balanced(text: str) -> bool:
    """Check that every delimiter kind opens and closes in a valid order.

    Each kind keeps its own counter, so ``(<)>`` is considered balanced;
    only a closer without an open partner, or a leftover opener, fails.
    """
    depth = {open_: 0 for open_ in DELIMITERS}
    for i, ch in enumerate(text):
        if ch in DELIMITERS:
            depth[ch] += 1
        elif ch in _CLOSERS:
            if _is_arrow_head(text, i):
                continue
            opener = _CLOSERS[ch]
            if depth[opener] == 0:
                return False
            depth[opener] -= 1
    return all(count == 0 for count in depth.values())


def find_top_level(text: str, token: str, start: int = 0) -> int:
    """Return the index of the first ``token`` found at nesting depth zero.

    Args:
        text: Text to scan
        token: Literal token (e.g. ``","``, ``"->"``, ``":"``)
        start: Index to start scanning from

    Returns:
        Index of the token, or -1 if it never appears at depth zero
    """
    depth = 0
    i = start
    while i < len(text):
        if depth == 0 and text.startswith(token, i):
            # ``=`` must not match inside ``==`` or ``->`` style operators
            if token == "=" and text.startswith("==", i):
                i += 2
                continue
            if token == "=" and i > 0 and text[i - 1] in "!<>":
                i += 1
                continue
            return i
        ch = text[i]
        if ch in DELIMITERS:
            depth += 1
        elif ch in _CLOSERS and not _is_arrow_head(text, i):
            depth = max(depth - 1, 0)
        i += 1
    return -1


def find_matching(text: str, open_index: int) -> int:
    """Return the index of the delimiter closing the one at ``open_index``.

    Only delimiters of the same kind are counted, so nested generics such as
    ``Array<Dictionary<String, Int>>`` resolve to the outermost ``>``.

    Returns:
        Index of the matching closer, or -1 if it is never closed
    """
    opener = text[open_index]
    closer = DELIMITERS[opener]
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == opener:
            depth += 1
        elif ch == closer:
            if _is_arrow_head(text, i):
                continue
            depth -= 1
            if depth == 0:
                return i
    return -1


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """Split ``text`` on separators found at nesting depth zero.

    Segments are stripped of surrounding whitespace. ``"Map<String, List<Int>>"``
    split on its generic span gives two segments, not three.

    Args:
        text: Text to split
        separator: Single-character separator

    Returns:
        List of segments. An all-whitespace input gives an empty list.
    """
    if not text.strip():
        return []

    segments: List[str] = []
    angle = paren = bracket = brace = 0
    current_start = 0
    for i, ch in enumerate(text):
        if ch == "<":
            angle += 1
        elif ch == ">" and not _is_arrow_head(text, i):
            angle -= 1
        elif ch == "(":
            paren += 1
        elif ch == ")":
            paren -= 1
        elif ch == "[":
            bracket += 1
        elif ch == "]":
            bracket -= 1
        elif ch == "{":
            brace += 1
        elif ch == "}":
            brace -= 1
        elif ch == separator and angle == paren == bracket == brace == 0:
            segments.append(text[current_start:i].strip())
            current_start = i + 1
    segments.append(text[current_start:].strip())
    return segments


def strip_enclosing(text: str, opener: str = "(") -> Optional[str]:
    """Return the inner text if ``text`` is wholly wrapped by one delimiter pair.

    ``"(Int, String)"`` gives ``"Int, String"``; ``"(Int) -> (Int)"`` gives
    None because the first parenthesis closes before the end.
    """
    text = text.strip()
    if not text.startswith(opener):
        return None
    close = find_matching(text, 0)
    if close != len(text) - 1:
        return None
    return text[1:close]
