"""AST Parser data models.

Defines the core data structures for extracted modifier signatures.
These are pure data containers with no parsing logic.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ParameterInfo:
    """One parameter of a modifier signature.

    ``label`` is the external argument label used at the call site
    (None for ``_``); ``name`` is the internal binding name. For
    ``frame(width w: CGFloat?)`` the label is "width" and the name is "w".
    """

    label: Optional[str]
    name: str
    type: str  # Raw type text, e.g. "CGFloat?"
    has_default_value: bool = False
    default_value: Optional[str] = None  # ".all", "nil"

    @property
    def is_labeled(self) -> bool:
        return self.label is not None


@dataclass
class ModifierInfo:
    """A single extracted View modifier signature.

    Produced by the interface parser, consumed read-only by the analyzer
    and generator.
    """

    name: str  # "padding"
    parameters: List[ParameterInfo]
    return_type: str  # "some View"
    availability: Optional[str] = None  # "@available(iOS 13.0, *)"
    documentation: Optional[str] = None
    is_generic: bool = False
    generic_constraints: List[str] = field(default_factory=list)  # ["T: Equatable"]
    generic_parameters: List[str] = field(default_factory=list)  # ["T"]

    @property
    def call_signature(self) -> str:
        """Selector-style name, e.g. ``frame(width:height:)``."""
        labels = "".join(f"{p.label or '_'}:" for p in self.parameters)
        return f"{self.name}({labels})"


@dataclass
class ParseError:
    """An error encountered during parsing."""

    file_path: str
    line: int
    message: str
    severity: str = "warning"  # "warning" | "error"


@dataclass
class ParseResult:
    """Complete parse output for a single interface file."""

    file_path: str
    language: str
    modifiers: List[ModifierInfo]
    line_count: int = 0
    errors: List[ParseError] = field(default_factory=list)
