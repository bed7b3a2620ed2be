"""Swift enum code generation.

Public API:
    EnumGenerator().generate(enum_name, modifiers) → GeneratedCode
    GeneratedCodeWriter(output_dir).write(units) → [Path]
    variant_tag(name) → str
"""

from .enum_generator import EnumGenerator, payload_type
from .models import GeneratedCode
from .naming import swift_identifier, variant_tag
from .writer import GeneratedCodeWriter

__all__ = [
    "EnumGenerator",
    "GeneratedCode",
    "GeneratedCodeWriter",
    "payload_type",
    "swift_identifier",
    "variant_tag",
]
