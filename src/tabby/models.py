"""
Data models for classified file contents.
"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class OneLine:
    """Content without any line break. Never holds a newline."""
    content: str


@dataclass(frozen=True)
class MultiLine:
    """Content with at least one inner line break.

    Always ends with exactly one trailing newline.
    """
    content: str


@dataclass(frozen=True)
class ReadError:
    """A file that could not be read or decoded."""
    error: Exception

    @property
    def message(self) -> str:
        """Human-readable description of the underlying error."""
        if isinstance(self.error, OSError) and self.error.strerror:
            return self.error.strerror
        return str(self.error)

    def __str__(self) -> str:
        return f"[Error: {self.message}]"


ClassifiedText = Union[OneLine, MultiLine, ReadError]


@dataclass(frozen=True)
class FileEntry:
    """An input path, exactly as given, paired with its classified content."""
    path: str
    text: ClassifiedText

    @property
    def is_multiline(self) -> bool:
        return isinstance(self.text, MultiLine)

    @property
    def is_error(self) -> bool:
        return isinstance(self.text, ReadError)


@dataclass
class RunSummary:
    """Per-run file statistics."""
    processed: int = 0
    succeeded: int = 0
    failed: int = 0
    failed_paths: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return self.failed > 0
