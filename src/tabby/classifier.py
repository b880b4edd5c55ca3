"""
Classification of file contents into one-line, multi-line or error results.
"""

import errno
import logging
from pathlib import Path
from typing import Optional, Union

from tabby.config_models import TabbyConfig
from tabby.models import ClassifiedText, MultiLine, OneLine, ReadError

logger = logging.getLogger(__name__)


class FileTooLargeError(OSError):
    """Raised when a file exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        size_mb = size / (1024 * 1024)
        limit_mb = limit / (1024 * 1024)
        super().__init__(
            errno.EFBIG,
            f"File size {size_mb:.2f} MB exceeds maximum allowed size {limit_mb:.2f} MB"
        )
        self.size = size
        self.limit = limit


def classify_text(text: str) -> ClassifiedText:
    """Classify decoded file contents.

    Only newlines in a trailing run are ignored when deciding the layout:
    "x\\n\\n" is one line, "a\\nb" is multi-line and gets a trailing
    newline appended.
    """
    trimmed = text.rstrip("\n")

    if text.count("\n") == 0:
        return OneLine(text)
    if trimmed.count("\n") == 0:
        return OneLine(trimmed)
    if not text.endswith("\n"):
        text += "\n"
    return MultiLine(text)


def read_text(path: Union[str, Path], config: Optional[TabbyConfig] = None) -> ClassifiedText:
    """Read a file and classify its contents.

    Any failure to read or decode the file is captured as ReadError.
    """
    config = config or TabbyConfig()
    file_path = Path(path)

    try:
        if config.max_file_size is not None:
            size = file_path.stat().st_size
            if size > config.max_file_size:
                raise FileTooLargeError(size, config.max_file_size)
        data = file_path.read_bytes()
        text = data.decode(config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {path}: {type(e).__name__}: {e}")
        return ReadError(e)

    return classify_text(text)
