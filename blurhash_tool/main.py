#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the Blurhash Tool.
"""

import argparse
import contextlib
import logging
import sys
from pathlib import Path

from tqdm.contrib.logging import logging_redirect_tqdm

from .commands.generate import GenerateCommand
from .config import DEFAULT_CHUNK_SIZE
from .jsonio import enable_json_logging, success, error

COMMAND = "generate"


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("expected a number greater than 0")
    return number


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="blurhash-tool",
        description="Compute a blurhash for every image in a folder and save them as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Hash every image in a folder
  %(prog)s ./photos hashes.json

  # Try the first 50 entries, 10 at a time
  %(prog)s ./photos hashes.json --sample 50 --chunk 10

Note: entries without a jpg/jpeg/png extension are renamed to .jpg in place.
        """
    )
    parser.add_argument("folder_path", help="Directory containing the images")
    parser.add_argument("output_path", help="JSON file to write (overwritten)")
    parser.add_argument("--sample", type=_non_negative_int, metavar="N",
                        help="Only process the first N directory entries")
    parser.add_argument("--chunk", type=_positive_int, default=DEFAULT_CHUNK_SIZE, metavar="N",
                        help=f"Images processed per batch (default: {DEFAULT_CHUNK_SIZE})")
    parser.add_argument("--progress-bar", action="store_true",
                        help="Show a progress bar while hashing")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")
    parser.add_argument("--json", action="store_true",
                        help="Print a JSON run summary to stdout; logs go to stderr")
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.json:
        enable_json_logging()
    else:
        setup_logging(args.verbose)

    logging.info("Starting blurhash generator")
    logging.debug("Parsed arguments: %s", args)

    redirect = logging_redirect_tqdm() if args.progress_bar else contextlib.nullcontext()
    try:
        with redirect:
            summary = GenerateCommand().execute(
                folder=Path(args.folder_path),
                output=Path(args.output_path),
                sample=args.sample,
                chunk_size=args.chunk,
                show_progress=args.progress_bar,
            )
    except KeyboardInterrupt:
        if args.json:
            return error(COMMAND, "Operation interrupted by user", code=130)
        logging.warning("Operation interrupted by user.")
        return 130
    except NotADirectoryError as e:
        if args.json:
            return error(COMMAND, str(e), exception_type=type(e).__name__)
        logging.error("Error: %s", e)
        return 1
    except OSError as e:
        if args.json:
            return error(COMMAND, str(e), exception_type=type(e).__name__)
        logging.error("Error occurred: %s", e, exc_info=args.verbose)
        return 1

    if args.json:
        return success(COMMAND, summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
