"""
Command-line interface for tabby.

This module handles logging configuration, wiring of the argument resolver,
reader and renderer, and the process exit status.
"""

import logging
import sys
from typing import Optional, Sequence

from tabby.config_models import TabbyConfig
from tabby.orchestrator import read_files
from tabby.renderer import render
from tabby.resolver import DirectoryListingError, parse_args, resolve_paths

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so stdout carries only file contents."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )
    logging.getLogger().setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point.

    Returns:
        Exit code: 0 = success, 1 = a file could not be read or a fatal error
        occurred. Usage errors exit with 2 from the argument parser.
    """
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = TabbyConfig.from_json_file(args.config) if args.config else TabbyConfig()
    except OSError as e:
        logger.error(f"Cannot read config: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        paths = resolve_paths(args, config)
    except DirectoryListingError as e:
        logger.error(f"Directory listing failed: {e}")
        return 1

    entries = read_files(paths, config)
    had_err = render(entries)
    return 1 if had_err else 0


if __name__ == "__main__":
    sys.exit(main())
