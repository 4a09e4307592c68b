#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the camera card sync tool.
"""

import argparse
import logging
import os
import sys
import traceback
from typing import List, Optional

from .commands.sync import SyncCommand
from .config import CAMERA_PRESETS, resolve_config
from .errors import SyncError


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(filename)s:%(lineno)d %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="card-sync",
        description="Copy a camera card into a folder named after its capture dates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Explicit source and archive root
  %(prog)s --src /media/me/EOS_DIGITAL --dst /tank/photos/R6

  # Camera preset
  %(prog)s --camera gh5

  # Preset destination, card mounted somewhere else
  %(prog)s --camera gm1 --src /media/me/LUMIX
        """
    )
    parser.add_argument("--src", help="Source directory (card mount point)")
    parser.add_argument("--dst", help="Destination root; a YYYYMMDD_YYYYMMDD folder is created inside")
    parser.add_argument("--camera",
                        help=f"Camera preset overriding --src/--dst ({', '.join(CAMERA_PRESETS)})")
    parser.add_argument("--dry-run", action="store_true",
                        help="Scan and print the copy command without running it")
    parser.add_argument("--yes", "-y", action="store_true",
                        help="Copy without asking for confirmation")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")
    return parser


def _origin(exc: BaseException) -> str:
    """file:line of the frame that raised exc."""
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "?"
    frame = frames[-1]
    return f"{os.path.basename(frame.filename)}:{frame.lineno}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    logging.debug("Parsed arguments: %s", args)

    try:
        config = resolve_config(args.src, args.dst, args.camera)
        logging.debug("Resolved config: %s", config)
        return SyncCommand(config).execute(dry_run=args.dry_run, assume_yes=args.yes)

    except KeyboardInterrupt:
        logging.warning("Operation interrupted by user.")
        return 130
    except SyncError as e:
        logging.error("%s: %s", _origin(e), e, exc_info=args.verbose)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
