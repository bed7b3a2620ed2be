"""Swift enum generator for modifier categories.

Turns one category's modifier signatures into a single Swift source unit:

- a ``public enum`` with one case per modifier (payload-free when the
  modifier takes no parameters)
- an ``extension View`` with ``modifier(_:)`` switching over the enum and
  calling the original modifier on ``self``

Labels matter in two places. The case declaration and the call site use
the external label (``width:``), while the switch pattern binds the
payload under the internal parameter name (``let w``). For
``frame(width w: CGFloat?, height h: CGFloat?)`` the output is::

    case frame(width: CGFloat?, height: CGFloat?)
    ...
    case .frame(let w, let h):
        self.frame(width: w, height: h)

No partial output: any error raises before text is assembled.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..analyzer.analyzer import TypeAnalyzer
from ..analyzer.types import FunctionType, OptionalType, TypeExpression
from ..ast_parser.models import ModifierInfo, ParameterInfo
from ..constants import (
    DEFAULT_MAX_TYPE_DEPTH,
    ENUM_CONFORMANCES,
    INDENT,
    RECEIVER_TYPE,
    SWIFT_FILE_EXTENSION,
    TARGET_FRAMEWORK,
    TOOL_NAME,
)
from ..exceptions import (
    CodeGenerationFailed,
    InvalidModifierInfo,
    UnresolvableType,
    UnsupportedType,
)
from .models import GeneratedCode
from .naming import is_valid_type_name, swift_identifier, variant_tag

logger = logging.getLogger(__name__)

# Prefixes that make a parameter type unusable as a stored payload
_UNSUPPORTED_TYPE_PREFIXES = {
    "some ": "opaque parameter types cannot be stored in an enum",
    "inout ": "inout parameters cannot be stored in an enum",
}


@dataclass
class _Field:
    parameter: ParameterInfo
    payload_type: str

    @property
    def binding(self) -> str:
        return swift_identifier(self.parameter.name)

    def declaration(self, with_default: bool) -> str:
        text = self.payload_type
        if self.parameter.is_labeled:
            text = f"{self.parameter.label}: {text}"
        if with_default and self.parameter.has_default_value and self.parameter.default_value:
            text += f" = {self.parameter.default_value}"
        return text

    def argument(self) -> str:
        if self.parameter.is_labeled:
            return f"{self.parameter.label}: {self.binding}"
        return self.binding


def _payload_issue(expression: TypeExpression) -> Optional[str]:
    # Only the payload's own head matters; nested closure signatures may mention inout
    head = expression.wrapped if isinstance(expression, OptionalType) else expression
    for prefix, reason in _UNSUPPORTED_TYPE_PREFIXES.items():
        if head.base_name.startswith(prefix):
            return reason
    return None


@dataclass
class _Variant:
    modifier: ModifierInfo
    tag: str
    fields: List[_Field]

    @property
    def case_name(self) -> str:
        return swift_identifier(self.tag)


def payload_type(expression: TypeExpression) -> str:
    """Render a parameter type for use as an enum associated value.

    Enum payloads are implicitly escaping and reject an explicit
    ``@escaping``, so the flag is dropped from a top-level closure (also
    when it is wrapped in an optional).
    """
    if isinstance(expression, FunctionType):
        return expression.without_escaping().raw_type
    if isinstance(expression, OptionalType) and isinstance(expression.wrapped, FunctionType):
        return OptionalType(expression.wrapped.without_escaping()).raw_type
    return expression.raw_type


class EnumGenerator:
    """Generates type-safe Swift enum code for modifiers.

    Args:
        analyzer: Type analyzer used to parse parameter and return types
        emit_default_values: Carry parameter defaults onto enum payloads
        max_type_depth: Payload types nested deeper than this produce a warning
        file_extension: Extension of the generated file name
    """

    def __init__(
        self,
        analyzer: Optional[TypeAnalyzer] = None,
        emit_default_values: bool = True,
        max_type_depth: int = DEFAULT_MAX_TYPE_DEPTH,
        file_extension: str = SWIFT_FILE_EXTENSION,
    ):
        self._analyzer = analyzer or TypeAnalyzer()
        self._emit_default_values = emit_default_values
        self._max_type_depth = max_type_depth
        self._file_extension = file_extension

    def generate(self, enum_name: str, modifiers: Sequence[ModifierInfo]) -> GeneratedCode:
        """Generate an enum definition for a group of related modifiers.

        Args:
            enum_name: Name of the enum to generate, e.g. "LayoutModifier"
            modifiers: Modifiers to include, in output order

        Returns:
            GeneratedCode with the source text and one variant per modifier

        Raises:
            InvalidModifierInfo: No modifiers, or an unusable enum name
            UnsupportedType: A parameter or return type cannot be rendered
            CodeGenerationFailed: Two modifiers map to the same case name
        """
        if not modifiers:
            raise InvalidModifierInfo(f"Cannot generate {enum_name!r}: no modifiers provided")
        if not is_valid_type_name(enum_name):
            raise InvalidModifierInfo(f"Invalid enum name: {enum_name!r}")

        warnings: List[str] = []
        variants = [self._build_variant(modifier, warnings) for modifier in modifiers]
        self._check_unique_tags(enum_name, variants)

        source = "\n".join(
            self._render_header(enum_name, len(variants))
            + self._render_enum(enum_name, variants)
            + [""]
            + self._render_extension(enum_name, variants)
        ) + "\n"

        for warning in warnings:
            logger.warning(f"{enum_name}: {warning}")
        logger.info(f"Generated {enum_name} with {len(variants)} cases")

        return GeneratedCode(
            source_code=source,
            file_name=f"{enum_name}{self._file_extension}",
            modifier_count=len(variants),
            warnings=tuple(warnings),
        )

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def _build_variant(self, modifier: ModifierInfo, warnings: List[str]) -> _Variant:
        if modifier.is_generic:
            generics = ", ".join(modifier.generic_parameters) or "..."
            raise UnsupportedType(
                modifier.name,
                f"<{generics}>",
                "generic modifiers cannot be captured by a non-generic enum",
            )

        self._resolve(modifier, modifier.return_type)

        fields = []
        for parameter in modifier.parameters:
            expression = self._resolve(modifier, parameter.type)
            self._check_payload(modifier, parameter, expression)

            if expression.depth > self._max_type_depth:
                warnings.append(
                    f"{modifier.name}: parameter '{parameter.name}' type "
                    f"{parameter.type!r} is nested {expression.depth} levels deep"
                )
            if any(node.is_closure for node in expression.walk()):
                warnings.append(
                    f"{modifier.name}: parameter '{parameter.name}' carries a closure; "
                    "synthesized Equatable conformance does not cover it"
                )
            fields.append(_Field(parameter=parameter, payload_type=payload_type(expression)))

        return _Variant(modifier=modifier, tag=variant_tag(modifier.name), fields=fields)

    def _resolve(self, modifier: ModifierInfo, type_string: str) -> TypeExpression:
        try:
            return self._analyzer.analyze(type_string)
        except UnresolvableType as e:
            raise UnsupportedType(modifier.name, type_string, e.reason) from e

    @staticmethod
    def _check_payload(modifier: ModifierInfo, parameter: ParameterInfo, expression: TypeExpression):
        reason = _payload_issue(expression)
        if reason:
            raise UnsupportedType(modifier.name, parameter.type, reason)

    def unsupported_payload(self, modifier: ModifierInfo) -> Optional[str]:
        """Why ``modifier`` has no enum-payload rendering, or None.

        Only opaque and inout parameters are reported. Types that do not
        parse are left for ``generate`` to raise on.
        """
        for parameter in modifier.parameters:
            try:
                expression = self._analyzer.analyze(parameter.type)
            except UnresolvableType:
                continue
            reason = _payload_issue(expression)
            if reason:
                return f"parameter '{parameter.name}' ({parameter.type}): {reason}"
        return None

    @staticmethod
    def _check_unique_tags(enum_name: str, variants: List[_Variant]):
        seen: Dict[str, _Variant] = {}
        for variant in variants:
            previous = seen.get(variant.tag)
            if previous is not None:
                raise CodeGenerationFailed(
                    f"Duplicate case '{variant.tag}' in {enum_name}: "
                    f"{previous.modifier.call_signature} and {variant.modifier.call_signature}"
                )
            seen[variant.tag] = variant

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def _render_header(enum_name: str, count: int) -> List[str]:
        return [
            f"// {enum_name}{SWIFT_FILE_EXTENSION}",
            f"// Generated by {TOOL_NAME}. Do not edit by hand.",
            f"// Variants: {count}",
            "",
            f"import {TARGET_FRAMEWORK}",
            "",
        ]

    def _render_enum(self, enum_name: str, variants: List[_Variant]) -> List[str]:
        count = len(variants)
        noun = "modifier" if count == 1 else "modifiers"
        lines = [
            f"/// Generated modifier enum `{enum_name}`.",
            "///",
            f"/// This enum provides type-safe access to {count} {TARGET_FRAMEWORK} {noun}.",
            "/// It is machine-generated; regenerate it instead of editing.",
            f"public enum {enum_name}: {', '.join(ENUM_CONFORMANCES)} {{",
        ]
        for variant in variants:
            lines.extend(self._render_case_docs(variant.modifier))
            if variant.fields:
                payload = ", ".join(f.declaration(self._emit_default_values) for f in variant.fields)
                lines.append(f"{INDENT}case {variant.case_name}({payload})")
            else:
                lines.append(f"{INDENT}case {variant.case_name}")
        lines.append("}")
        return lines

    @staticmethod
    def _render_case_docs(modifier: ModifierInfo) -> List[str]:
        lines = []
        if modifier.documentation:
            for doc_line in modifier.documentation.strip().splitlines():
                lines.append(f"{INDENT}/// {doc_line.strip()}".rstrip())
        if modifier.availability:
            if lines:
                lines.append(f"{INDENT}///")
            lines.append(f"{INDENT}/// - Availability: {modifier.availability}")
        return lines

    @staticmethod
    def _render_extension(enum_name: str, variants: List[_Variant]) -> List[str]:
        lines = [
            f"extension {RECEIVER_TYPE} {{",
            f"{INDENT}/// Applies a `{enum_name}` value to this view.",
            f"{INDENT}@inlinable",
            f"{INDENT}@ViewBuilder",
            f"{INDENT}public func modifier(_ modifier: {enum_name}) -> some {RECEIVER_TYPE} {{",
            f"{INDENT * 2}switch modifier {{",
        ]
        for variant in variants:
            function = swift_identifier(variant.modifier.name)
            if variant.fields:
                bindings = ", ".join(f"let {f.binding}" for f in variant.fields)
                arguments = ", ".join(f.argument() for f in variant.fields)
                lines.append(f"{INDENT * 2}case .{variant.case_name}({bindings}):")
                lines.append(f"{INDENT * 3}self.{function}({arguments})")
            else:
                lines.append(f"{INDENT * 2}case .{variant.case_name}:")
                lines.append(f"{INDENT * 3}self.{function}()")
        lines.extend([
            f"{INDENT * 2}}}",
            f"{INDENT}}}",
            "}",
        ])
        return lines
