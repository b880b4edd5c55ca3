"""
Orchestration logic for reading files in batch.

Every path is read in order and recorded, successful or not; a failure on
one file never stops the run.
"""

import logging
import time
from typing import Iterable, List, Optional

from tabby.classifier import read_text
from tabby.config_models import TabbyConfig
from tabby.models import FileEntry, ReadError, RunSummary

logger = logging.getLogger(__name__)


def read_files(paths: Iterable[str], config: Optional[TabbyConfig] = None) -> List[FileEntry]:
    """Read and classify files in input order.

    Args:
        paths: Paths exactly as given by the user
        config: Optional runtime configuration

    Returns:
        One FileEntry per path, in the same order
    """
    config = config or TabbyConfig()
    paths = list(paths)
    entries: List[FileEntry] = []
    start_time = time.time()

    for file_idx, path in enumerate(paths, 1):
        logger.info(f"[{file_idx}/{len(paths)}] Reading: {path}")
        text = read_text(path, config)
        if isinstance(text, ReadError):
            logger.warning(f"[{file_idx}/{len(paths)}] Failed {path}: {text.message}")
        entries.append(FileEntry(path, text))

    summary = summarize(entries)
    logger.info(f"Total processing time: {time.time() - start_time:.2f}s")
    logger.info(f"Files: {summary.succeeded} succeeded, {summary.failed} failed")
    return entries


def summarize(entries: Iterable[FileEntry]) -> RunSummary:
    """Count successful and failed entries."""
    summary = RunSummary()
    for entry in entries:
        summary.processed += 1
        if entry.is_error:
            summary.failed += 1
            summary.failed_paths.append(entry.path)
        else:
            summary.succeeded += 1
    return summary
