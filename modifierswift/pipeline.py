"""Generation pipeline.

Orchestrates one run: extract modifiers from an interface file, drop the
ones a non-generic enum cannot hold (explicit generics, opaque ``some``
and ``inout`` parameters), group the rest by category and
generate one Swift enum per category.

A failing category never stops the run. It is recorded as a failed
GeneratedCode whose error names the category and the offending text.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .core.analyzer import TypeAnalyzer
from .core.ast_parser import ModifierInfo, ParseError, parse_file
from .core.exceptions import ModifierSwiftError
from .core.generator import EnumGenerator, GeneratedCode, variant_tag
from .setting import Settings

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""

    source_path: str
    units: List[GeneratedCode]
    extracted_count: int = 0
    skipped: List[str] = field(default_factory=list)  # Human-readable reasons
    parse_errors: List[ParseError] = field(default_factory=list)

    @property
    def failed_units(self) -> List[GeneratedCode]:
        return [unit for unit in self.units if not unit.is_successful]

    @property
    def is_successful(self) -> bool:
        return not self.failed_units

    @property
    def modifier_count(self) -> int:
        return sum(unit.modifier_count for unit in self.units)


class ModifierPipeline:
    """Interface file in, one GeneratedCode per category out."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        analyzer: Optional[TypeAnalyzer] = None,
        generator: Optional[EnumGenerator] = None,
    ):
        self._settings = settings or Settings()
        self._analyzer = analyzer or TypeAnalyzer()
        self._generator = generator or EnumGenerator(
            analyzer=self._analyzer,
            emit_default_values=self._settings.emit_default_values,
            max_type_depth=self._settings.max_type_depth,
            file_extension=self._settings.file_extension,
        )

    def run(self, input_path: str) -> PipelineResult:
        """Parse ``input_path`` and generate every category.

        Raises:
            InterfaceFileNotFound: If the input file does not exist
        """
        logger.info(f"Parsing {input_path}")
        parsed = parse_file(input_path)
        logger.info(f"Extracted {len(parsed.modifiers)} modifiers from {input_path}")

        result = self.run_modifiers(parsed.modifiers, source_path=input_path)
        result.parse_errors = parsed.errors
        return result

    def run_modifiers(self, modifiers: Iterable[ModifierInfo], source_path: str = "<memory>") -> PipelineResult:
        """Generate every category for already extracted modifiers."""
        modifiers = list(modifiers)
        skipped: List[str] = []

        candidates = self._filter_generic(modifiers, skipped)
        groups = self._analyzer.categorize(candidates)

        units = []
        for label, group in groups.items():
            if self._settings.deduplicate_overloads:
                group = self._deduplicate(label, group, skipped)
            units.append(self.generate_category(label, group))

        result = PipelineResult(
            source_path=source_path,
            units=units,
            extracted_count=len(modifiers),
            skipped=skipped,
        )
        logger.info(
            f"Generated {len(units) - len(result.failed_units)}/{len(units)} categories "
            f"({result.modifier_count} cases, {len(skipped)} modifiers skipped)"
        )
        return result

    def generate_category(self, label: str, modifiers: List[ModifierInfo]) -> GeneratedCode:
        """Generate one category; errors become a failed GeneratedCode."""
        enum_name = self._settings.union_name(label)
        try:
            return self._generator.generate(enum_name, modifiers)
        except ModifierSwiftError as e:
            logger.error(f"Category {label} ({enum_name}) failed: {e}")
            return GeneratedCode.failed(
                file_name=f"{enum_name}{self._settings.file_extension}",
                error=f"{label}: {e}",
            )

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def _filter_generic(self, modifiers: List[ModifierInfo], skipped: List[str]) -> List[ModifierInfo]:
        """Drop explicit generics and modifiers with opaque or inout parameters."""
        if not self._settings.skip_generic_modifiers:
            return modifiers
        kept = []
        for modifier in modifiers:
            if modifier.is_generic:
                issue = "generic modifier"
            else:
                issue = self._generator.unsupported_payload(modifier)
            if issue:
                reason = f"{modifier.call_signature}: {issue}"
                logger.warning(f"Skipping {reason}")
                skipped.append(reason)
            else:
                kept.append(modifier)
        return kept

    @staticmethod
    def _deduplicate(label: str, modifiers: List[ModifierInfo], skipped: List[str]) -> List[ModifierInfo]:
        """Keep the first modifier for each case name; later overloads are skipped."""
        first_by_tag: Dict[str, ModifierInfo] = {}
        kept = []
        for modifier in modifiers:
            tag = variant_tag(modifier.name)
            first = first_by_tag.get(tag)
            if first is not None:
                reason = f"{modifier.call_signature}: overload of {first.call_signature} in {label}"
                logger.warning(f"Skipping {reason}")
                skipped.append(reason)
                continue
            first_by_tag[tag] = modifier
            kept.append(modifier)
        return kept
