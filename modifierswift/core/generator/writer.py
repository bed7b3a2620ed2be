"""Writes generated units to disk."""

import logging
from pathlib import Path
from typing import Iterable, List

from ..constants import SWIFT_FILE_EXTENSION
from .models import GeneratedCode

logger = logging.getLogger(__name__)


class GeneratedCodeWriter:
    """Places generated source files into an output directory.

    Args:
        output_dir: Target directory, created if missing
        clean: Remove previously generated files before writing
        file_extension: Extension of files considered generated by ``clean``
    """

    def __init__(self, output_dir: str | Path, clean: bool = False, file_extension: str = SWIFT_FILE_EXTENSION):
        self._output_dir = Path(output_dir)
        self._clean = clean
        self._file_extension = file_extension

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def write(self, units: Iterable[GeneratedCode]) -> List[Path]:
        """Write every successful unit; failed units are skipped.

        Returns:
            Paths of the files written, in input order
        """
        self._output_dir.mkdir(parents=True, exist_ok=True)
        if self._clean:
            self._remove_previous()

        written: List[Path] = []
        for unit in units:
            if not unit.is_successful:
                logger.warning(f"Skipping {unit.file_name}: generation failed")
                continue
            path = self._output_dir / unit.file_name
            path.write_text(unit.source_code, encoding="utf-8")
            logger.info(f"Wrote {path} ({unit.modifier_count} cases)")
            written.append(path)
        return written

    def _remove_previous(self):
        removed = 0
        for path in self._output_dir.glob(f"*{self._file_extension}"):
            if path.is_file():
                path.unlink()
                removed += 1
        if removed:
            logger.info(f"Cleaned {removed} previously generated files from {self._output_dir}")
