#!/usr/bin/env python3
# run_extractor.py
# This file is part of Fiberprops - Component prop extraction
#
# Command-line interface for prop extraction with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Dict, Optional, TextIO

from core.extractor import PropExtractor, render_leaves, render_value
from model.prop_rule import PropRule
from utils.config_reader import read_config, ConfigFormatError
from utils.fiber_reader import read_fibers, validate_fiber_file, FiberFormatError
from utils.logger import configure_logging, get_logger


def process_extraction_session(
    config: Dict[str, PropRule], fibers_path: str, decode: bool, out: TextIO
) -> int:
    """Extract props for every sample of a fiber dump.

    Args:
        config: Extraction rules by component type
        fibers_path: Path to the fiber dump
        decode: Print one ``path = value`` line per leaf instead of the
            compact prop string
        out: Stream receiving the results

    Returns:
        Number of samples processed
    """
    extractor = PropExtractor(config)
    sample_count = 0

    for sample in read_fibers(fibers_path):
        sample_count += 1
        leaves = extractor.leaves(sample.type_label, sample.node)

        if not decode:
            print(f"{sample.type_label}: {render_leaves(leaves)}", file=out)
            continue

        print(f"{sample.type_label}:", file=out)
        for leaf in leaves:
            print(f"  {leaf.path} = {render_value(leaf.value)}", file=out)

    return sample_count


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Fiberprops component prop extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_extractor.py -c props.json -f fibers.json
  python run_extractor.py -c props.json -f fibers.json --decode
  python run_extractor.py -c props.json -f fibers.json --debug
  python run_extractor.py -c props.json -f fibers.json --validate-only

Config file format:
  {"Element": {"include": ["a", "c"], "exclude": []}}

Fiber dump format:
  [{"type": "Element", "fiber": {"stateNode": {"props": {"a": "foo"}}}}]
        """,
    )

    parser.add_argument(
        "-c", "--config", required=True, type=Path, help="Path to JSON config file"
    )

    parser.add_argument(
        "-f", "--fibers", required=True, type=Path, help="Path to JSON fiber dump"
    )

    parser.add_argument(
        "--decode",
        action="store_true",
        help="Print one line per extracted prop instead of the prop string",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only validate the config and fiber dump",
    )

    return parser


def main(argv=None, out: Optional[TextIO] = None) -> int:
    """Main entry point for the prop extractor.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        config = read_config(str(args.config))
        logger.info(f"📋 Config loaded: {len(config)} component types")

        logger.info(f"🔍 Validating fiber dump: {args.fibers}")
        sample_total = validate_fiber_file(str(args.fibers))

        if args.validate_only:
            logger.info(f"✅ {sample_total} samples validated. Exiting.")
            return 0

        sample_count = process_extraction_session(
            config, str(args.fibers), args.decode, out or sys.stdout
        )
        logger.info(f"📊 Samples processed: {sample_count}")
        return 0

    except FiberFormatError as e:
        logger.error(f"Fiber dump error: {e}")
        return 1

    except ConfigFormatError as e:
        logger.error(f"Config file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Extraction interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
