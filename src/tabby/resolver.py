"""
Command-line argument resolution.

Turns process arguments into the ordered list of paths to display, either
taken literally from the command line or listed from the current directory.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from tabby import __version__
from tabby.config_models import TabbyConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class DirectoryListingError(Exception):
    """Exception raised when the directory for --all cannot be listed."""
    pass


class UnrepresentableFileNameError(DirectoryListingError):
    """Exception raised when a directory entry name is not valid text."""
    pass


class TabbyArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with the full help text."""

    def error(self, message: str):
        self.exit(2, f"Error: {message}\n{self.format_help()}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = TabbyArgumentParser(
        prog="tabby",
        allow_abbrev=False,
        description="Display the contents of multiple one-line files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show a few status files
  tabby /sys/class/power_supply/BAT0/status /sys/class/power_supply/BAT0/capacity

  # Show every regular file in the current directory
  tabby --all
        """
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="File(s) to dump")
    parser.add_argument("-a", "--all", action="store_true",
                        help="Dump all regular files in the current directory")
    parser.add_argument("--config", type=Path, help="Config JSON file")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None,
               parser: Optional[argparse.ArgumentParser] = None) -> argparse.Namespace:
    """Parse and check arguments.

    Exactly one of explicit files or --all must be given. Usage errors exit
    with status 2; --help exits with status 0. Neither touches any file.
    """
    parser = parser or create_parser()
    args = parser.parse_args(argv)

    if args.all and args.files:
        parser.error("argument -a/--all: not allowed with argument FILE")
    if not args.all and not args.files:
        parser.error("missing argument")
    for path in args.files:
        if path.startswith("-"):
            parser.error(f"invalid argument: '{path}'")

    return args


def list_directory_files(directory: Union[str, Path] = ".",
                         config: Optional[TabbyConfig] = None) -> List[str]:
    """List the regular files of a directory.

    Names come back in directory order unless config.sort_all_files is set.

    Raises:
        DirectoryListingError: If the directory cannot be read
        UnrepresentableFileNameError: If an entry name is not valid text
    """
    config = config or TabbyConfig()
    directory = Path(directory)
    files: List[str] = []

    try:
        for entry in directory.iterdir():
            if not config.include_hidden and entry.name.startswith("."):
                continue
            if not entry.is_file():
                continue
            try:
                entry.name.encode("utf-8")
            except UnicodeEncodeError as e:
                raise UnrepresentableFileNameError(
                    f"File name is not valid text: {entry.name!r}"
                ) from e
            files.append(str(entry))
    except OSError as e:
        raise DirectoryListingError(f"Cannot list directory {directory}: {e}") from e

    if config.sort_all_files:
        files.sort()

    logger.info(f"Found {len(files)} file(s) in {directory}")
    return files


def resolve_paths(args: argparse.Namespace, config: Optional[TabbyConfig] = None) -> List[str]:
    """Resolve parsed arguments to the ordered list of paths to display.

    Raises:
        DirectoryListingError: If --all finds no regular files or cannot list them
    """
    if args.all:
        files = list_directory_files(".", config)
        if not files:
            raise DirectoryListingError("No regular files found in current directory")
        return files
    return list(args.files)
