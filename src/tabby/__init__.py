"""
Tabby: display the contents of many small text files at once.
"""

__version__ = "1.0.0"

from tabby.classifier import classify_text, read_text
from tabby.config_models import TabbyConfig
from tabby.models import ClassifiedText, FileEntry, MultiLine, OneLine, ReadError, RunSummary
from tabby.orchestrator import read_files, summarize
from tabby.renderer import render

__all__ = [
    "ClassifiedText",
    "FileEntry",
    "MultiLine",
    "OneLine",
    "ReadError",
    "RunSummary",
    "TabbyConfig",
    "classify_text",
    "read_text",
    "read_files",
    "summarize",
    "render",
]
