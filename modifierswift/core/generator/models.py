"""Generator data models."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class GeneratedCode:
    """Generated Swift source for one modifier category.

    Holds the source text along with what was generated and any warnings
    or errors encountered. A unit with errors carries no source code.
    """

    source_code: str
    file_name: str  # "LayoutModifier.swift"
    modifier_count: int = 0
    warnings: Tuple[str, ...] = field(default=())
    errors: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_successful(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @classmethod
    def failed(cls, file_name: str, error: str) -> "GeneratedCode":
        """A unit recording a failed generation; never carries partial source."""
        return cls(source_code="", file_name=file_name, errors=(error,))
