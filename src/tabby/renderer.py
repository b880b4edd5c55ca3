"""
Two-pass rendering of classified files.

Pass 1 prints one aligned row per one-line or unreadable file. Pass 2 prints
a headed block per multi-line file. Both passes keep input order.
"""

import sys
from typing import Optional, Sequence, TextIO

from tabby.models import FileEntry, MultiLine, OneLine, ReadError


def format_one_line(entry: FileEntry, width: int) -> str:
    """Format a single aligned row, without the line terminator."""
    text = entry.text
    if isinstance(text, OneLine):
        value = text.content
    elif isinstance(text, ReadError):
        value = str(text)
    else:
        raise TypeError(f"Not a one-line entry: {entry.path}")
    return f"{entry.path:>{width}}: {value}"


def format_multi_line(entry: FileEntry) -> str:
    """Format a headed block. The content already ends with a newline."""
    text = entry.text
    if not isinstance(text, MultiLine):
        raise TypeError(f"Not a multi-line entry: {entry.path}")
    return f"\n{entry.path}:\n{text.content}"


def render(entries: Sequence[FileEntry], out: Optional[TextIO] = None) -> bool:
    """Write both passes to out (default stdout).

    Returns:
        True if any entry failed to read
    """
    out = out or sys.stdout
    if not entries:
        return False

    # Width covers every path, including the multi-line ones not shown here
    width = max(len(entry.path) for entry in entries)
    had_err = False

    for entry in entries:
        if entry.is_multiline:
            continue
        out.write(format_one_line(entry, width) + "\n")
        had_err = had_err or entry.is_error

    for entry in entries:
        if entry.is_multiline:
            out.write(format_multi_line(entry))

    out.flush()
    return had_err
