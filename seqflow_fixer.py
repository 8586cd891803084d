#!/usr/bin/env python3
"""
BPMN SequenceFlow Fixer

Checks that every element referenced by a sequenceFlow (sourceRef/targetRef)
cross references the flow with an outgoing resp. incoming sub element, and
writes a corrected copy (fixed_<name>) next to every file that does not.

Usage:
    # Single file
    python3 seqflow_fixer.py process.bpmn

    # All .bpmn, .bpmn2 and .bpmn20.xml files below a directory
    python3 seqflow_fixer.py models/ --jobs 4

    # Report only
    python3 seqflow_fixer.py models/ --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from seqflow_fix.batch import BatchProcessor
from seqflow_fix.config import ConfigError, load_config
from seqflow_fix.utils import PACKAGE_LOGGER, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Add missing incoming/outgoing sequenceFlow references to BPMN files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s process.bpmn
  %(prog)s models/ --jobs 4
  %(prog)s models/ --dry-run --log-level DEBUG
        """
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to a single BPMN file or to a directory"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--jobs",
        type=int,
        help="Number of files processed in parallel (overrides config)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report missing references without writing fixed files"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level from config"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log output to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        parser.error(f"invalid configuration: {e}")

    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = str(args.log_file)
    if args.jobs is not None:
        if args.jobs < 1:
            parser.error("--jobs must be at least 1")
        config.processing.max_concurrent_jobs = args.jobs

    log_level = getattr(logging, config.log_level.upper())
    log_file = Path(config.log_file) if config.log_file else None
    logger = setup_logger(PACKAGE_LOGGER, log_file=log_file, level=log_level)

    processor = BatchProcessor(config, dry_run=args.dry_run)
    results = processor.process_path(args.path)

    counts = results.counts()
    logger.info(
        f"Fixed: {counts['fixed']}, correct: {counts['unchanged']}, failed: {counts['failed']}"
    )
    for path, error in results.failed:
        logger.error(f"  {path}: {error}")

    return 0 if not results.failed else 1


if __name__ == "__main__":
    sys.exit(main())
