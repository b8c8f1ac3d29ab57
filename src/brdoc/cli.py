"""
Command-line document validation.

Validates one or more numbers against a document kind, or lists the kinds a
number satisfies.

Usage:
    brdoc cpf 085.668.830-47 712.926.512-45
    brdoc --identify 60837951546
    brdoc gs1_barcode --file barcodes.txt

Exit status is 0 when every number passes, 1 when any is rejected and 2 on
configuration or usage errors.

Note:
    This module uses both logging and print statements:
    - logging: For debugging and programmatic error tracking
    - print: For user-facing CLI output (one line per number)
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .config_loader import Config, get_default_config, load_config
from .processor import DocumentProcessor
from .types import DocumentKind

logger = logging.getLogger(__name__)


def read_numbers(path: Path) -> List[str]:
    """Read one candidate number per line, skipping blanks and # comments."""
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="brdoc",
        description="Validate Brazilian document numbers by their check digits",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "kind",
        nargs="?",
        choices=[kind.value for kind in DocumentKind],
        help="Document kind to validate against",
    )
    parser.add_argument("numbers", nargs="*", help="Candidate numbers")
    parser.add_argument(
        "--identify",
        metavar="NUMBER",
        help="List every enabled kind whose check digits NUMBER satisfies",
    )
    parser.add_argument(
        "--file", type=Path, help="Read candidate numbers from a file, one per line"
    )
    parser.add_argument(
        "--config", type=Path, help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return get_default_config()
    return load_config(config_path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load(args.config)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        print(f"Invalid configuration: {e}")
        return 2

    logging_config = config.validation.logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging_config.level,
        format=logging_config.format,
    )

    processor = DocumentProcessor(config=config)

    if args.identify is not None:
        kinds = processor.identify(args.identify)
        if not kinds:
            print(f"{args.identify}: no matching document kind")
            return 1
        print(f"{args.identify}: {', '.join(kind.value for kind in kinds)}")
        return 0

    if args.kind is None:
        parser.print_usage()
        print("brdoc: error: a document kind is required unless --identify is given")
        return 2

    numbers = list(args.numbers)
    if args.file is not None:
        try:
            numbers.extend(read_numbers(args.file))
        except FileNotFoundError as e:
            logger.error(f"Cannot read input: {e}")
            print(f"Cannot read input: {e}")
            return 2

    if not numbers:
        print("brdoc: error: no numbers to validate")
        return 2

    results = processor.process_batch((args.kind, number) for number in numbers)
    for result in results:
        if result.is_pass():
            print(f"VALID    {result.kind.value}  {result.number}")
        else:
            print(
                f"INVALID  {result.kind.value}  {result.number}  "
                f"[{result.rejection_reason.code}] {result.rejection_reason.message}"
            )

    return 0 if all(result.is_pass() for result in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
