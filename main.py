#!/usr/bin/env python3
"""
CBZ Packer

A command-line tool that packs a folder of numbered page images into a single
store-only CBZ archive. Pages must be named after the folder
(``<Title>-<number>.<jpg|jpeg|png>``) and numbered 1..N without gaps.

Usage:
    uv run main.py <folder> [-o OUTPUT]
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from cbzpack import __version__
from cbzpack.config import PackSettings
from cbzpack.errors import IncompletePageSequenceError, PagePackError
from cbzpack.processors.page_packer import PagePacker
from cbzpack.progress.reporter import Reporter

# Load environment variables from .env file
_ = load_dotenv()

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_MISSING_PAGES = 3


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. If None, uses sys.argv.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Pack numbered page images from a folder into a CBZ archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run main.py "My Comic"                  # Writes "My Comic.cbz" next to the folder
  uv run main.py "My Comic" -o out/comic.cbz # Writes to an explicit path
  uv run main.py "My Comic" --dry-run        # Shows the page order only

Exit codes:
  0  success
  1  any other failure
  3  page numbers are missing from the sequence
        """,
    )

    _ = parser.add_argument(
        "folder",
        type=Path,
        help="Folder containing <folder name>-<number>.<jpg|jpeg|png> pages",
    )

    _ = parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output archive path (default: the folder path with a .cbz extension)",
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and show the page order without writing an archive",
    )

    _ = parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not draw a progress bar while writing",
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging",
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def validate_folder(folder: Path, reporter: Reporter) -> bool:
    """
    Check that the source folder exists and is a directory.

    Args:
        folder: Path to the source folder
        reporter: Reporter for error output

    Returns:
        bool: True if the folder can be scanned
    """
    if not folder.exists():
        reporter.display_error(f"Folder does not exist: {folder}")
        return False
    if not folder.is_dir():
        reporter.display_error(f"Path is not a directory: {folder}")
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CBZ packer.

    Args:
        argv: Command-line arguments. If None, uses sys.argv.

    Returns:
        Process exit status
    """
    args = parse_arguments(argv)
    verbose_mode: bool = args.verbose

    err_console = Console(stderr=True, soft_wrap=True)

    try:
        settings = PackSettings.from_env()
    except PagePackError as e:
        err_console.print(f"Error: {e}", style="red", markup=False)
        return EXIT_FAILURE

    show_progress = settings.show_progress and not args.no_progress
    reporter = Reporter(
        err_console=err_console,
        show_progress=show_progress,
        verbose=verbose_mode,
    )

    folder: Path = args.folder
    if not validate_folder(folder, reporter):
        return EXIT_FAILURE

    packer = PagePacker(settings=settings, reporter=reporter)

    try:
        _ = packer.pack(folder, output=args.output, dry_run=args.dry_run)
    except IncompletePageSequenceError as e:
        reporter.display_missing_pages(e.missing_ranges)
        return EXIT_MISSING_PAGES
    except PagePackError as e:
        reporter.display_error(str(e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        reporter.display_warning("Packing interrupted by user.")
        return EXIT_FAILURE
    except Exception as e:
        reporter.display_error(f"Critical error during packing: {e}")
        if verbose_mode:
            err_console.print(traceback.format_exc(), style="dim", markup=False)
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
