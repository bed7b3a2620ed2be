import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .core.constants import TOOL_NAME, TOOL_VERSION
from .core.exceptions import ParsingError
from .core.generator import GeneratedCodeWriter
from .pipeline import ModifierPipeline
from .setting import get_settings

# Exit codes
EXIT_OK = 0
EXIT_GENERATION_FAILED = 1
EXIT_BAD_INPUT = 2


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )


logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Generate type-safe Swift enums from SwiftUI View modifiers",
    )
    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Path to a .swiftinterface or .swift file"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output directory for generated files (overrides settings)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML settings file"
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove previously generated files from the output directory"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{TOOL_NAME} {TOOL_VERSION}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for modifier-swift."""
    args = build_arg_parser().parse_args(argv)

    try:
        settings = get_settings(args.config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        setup_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return EXIT_BAD_INPUT

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    logger.info(f"Starting {TOOL_NAME} {TOOL_VERSION} - Input: {args.input}")

    pipeline = ModifierPipeline(settings)
    try:
        result = pipeline.run(args.input)
    except ParsingError as e:
        logger.error(f"Cannot read input: {e}")
        return EXIT_BAD_INPUT

    read_errors = [err for err in result.parse_errors if err.severity == "error"]
    if read_errors:
        for err in read_errors:
            logger.error(f"Cannot read input {err.file_path}: {err.message}")
        return EXIT_BAD_INPUT

    writer = GeneratedCodeWriter(
        args.output or settings.output_dir,
        clean=args.clean or settings.clean_output,
        file_extension=settings.file_extension,
    )
    written = writer.write(result.units)

    for unit in result.units:
        for warning in unit.warnings:
            print(f"warning: {unit.file_name}: {warning}")
        for error in unit.errors:
            print(f"error: {unit.file_name}: {error}", file=sys.stderr)

    print(f"\n  Generated {len(written)} file(s) in {writer.output_dir}")
    print(f"  Modifiers: {result.extracted_count} extracted, {len(result.skipped)} skipped\n")

    if not result.is_successful:
        logger.error(f"{len(result.failed_units)} categories failed")
        return EXIT_GENERATION_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
