"""Exception hierarchy for modifierswift.

Every error raised by the parser, analyzer and generator derives from
``ModifierSwiftError`` so the pipeline can catch one base type per category.
"""


class ModifierSwiftError(Exception):
    """Base class for all modifierswift errors."""


# ---------------------------------------------------------------------------
# Type analysis
# ---------------------------------------------------------------------------


class AnalysisError(ModifierSwiftError):
    """Raised while analyzing type strings."""


class UnresolvableType(AnalysisError):
    """The type text matches none of the recognized shapes."""

    def __init__(self, type_string: str, reason: str = ""):
        self.type_string = type_string
        self.reason = reason
        message = f"Unresolvable type {type_string!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Code generation
# ---------------------------------------------------------------------------


class GenerationError(ModifierSwiftError):
    """Raised while generating enum source code."""


class InvalidModifierInfo(GenerationError):
    """The generator input is unusable (e.g. an empty modifier list)."""


class UnsupportedType(GenerationError):
    """A parameter or return type has no valid enum payload rendering."""

    def __init__(self, modifier_name: str, type_string: str, reason: str = ""):
        self.modifier_name = modifier_name
        self.type_string = type_string
        message = f"Unsupported type {type_string!r} in modifier {modifier_name!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class CodeGenerationFailed(GenerationError):
    """Text assembly hit an inconsistency, such as duplicate variant tags."""


# ---------------------------------------------------------------------------
# Interface parsing
# ---------------------------------------------------------------------------


class ParsingError(ModifierSwiftError):
    """Raised while reading or parsing an interface file."""


class InterfaceFileNotFound(ParsingError):
    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Interface file not found: {file_path}")


class InvalidSyntax(ParsingError):
    """The interface text could not be decoded or parsed at all."""
