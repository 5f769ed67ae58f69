"""
Command-line interface for ccscan.

Reads C source from stdin (or a file), writes one
``<line> <function> <complexity>`` record per function to the report log.
"""

import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from ccscan import __version__
from ccscan.core.config import REPORT_FORMATS, Config
from ccscan.core.engine import ComplexityEngine
from ccscan.core.errors import CcscanError
from ccscan.logging_config import get_logger, setup_logging
from ccscan.reporting.writer import ReportWriter


logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ccscan",
        description="Per-function cyclomatic complexity for C and C++ source.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ccscan < main.c                       # Write output.cy for main.c
  ccscan main.c -o main.cy              # Read a file, choose the log
  ccscan --filename unit.cpp < a.cpp    # Parse stdin as C++
  ccscan -f json < main.c               # One JSON object per function
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Source file to analyze (default: read stdin)",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to YAML/JSON configuration file",
    )
    parser.add_argument(
        "-o", "--output",
        help="Report log path (default: output.cy)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=list(REPORT_FORMATS),
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--filename",
        help=(
            "Name given to the frontend for the source text; takes priority over "
            "the path of a source file (default: unsaved.c for stdin)"
        ),
    )
    parser.add_argument(
        "--std",
        help="Language standard passed to clang, e.g. c11 or c++17",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )
    parser.add_argument(
        "--log-file",
        help="Also append log messages to this file",
    )

    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply command-line overrides."""
    config = Config.load(args.config)
    overrides: Dict[str, Any] = {}

    if args.output:
        overrides.setdefault("report", {})["path"] = args.output
    if args.format:
        overrides.setdefault("report", {})["format"] = args.format
    if args.filename:
        overrides.setdefault("source", {})["filename"] = args.filename
    if args.std:
        overrides.setdefault("source", {})["clang_args"] = config.clang_args() + [f"-std={args.std}"]

    if overrides:
        config = config.with_overrides(overrides)
    return config


def read_source(source: str) -> str:
    """Read the whole source text from stdin or a file."""
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")
    with open(source, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    try:
        config = build_config(args)
        engine = ComplexityEngine(config)
        name = args.filename or (None if args.source == "-" else args.source)
        with ReportWriter(config.report_path(), config.report_format()) as report:
            content = read_source(args.source)
            engine.run(content, report, name=name)
        return 0

    except KeyboardInterrupt:
        logger.error("Interrupted.")
        return 130
    except (CcscanError, OSError) as e:
        logger.error("Error: %s", e)
        if os.environ.get("CCSCAN_DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
