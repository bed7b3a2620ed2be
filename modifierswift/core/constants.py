"""Shared constants for modifierswift.

This module contains constants that are used across multiple modules
to avoid duplication and ensure consistency.
"""

# =============================================================================
# Tool identity
# =============================================================================

TOOL_NAME = "modifier-swift"
TOOL_VERSION = "0.1.0"

# =============================================================================
# Generated output
# =============================================================================

# Extension of generated source files
SWIFT_FILE_EXTENSION = ".swift"

# Default directory for generated files
DEFAULT_OUTPUT_DIR = "./Generated"

# Appended to a category label to name its enum: Layout -> LayoutModifier
DEFAULT_UNION_SUFFIX = "Modifier"

# Framework imported by every generated file
TARGET_FRAMEWORK = "SwiftUI"

# Receiver type whose extensions hold modifiers
RECEIVER_TYPE = "View"

# Conformances declared on every generated enum
ENUM_CONFORMANCES = ("Equatable", "Sendable")

# Payload types nested deeper than this produce a warning
DEFAULT_MAX_TYPE_DEPTH = 4

# Indentation unit for generated code
INDENT = "    "
