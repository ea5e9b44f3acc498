"""Typed exception hierarchy for wiki-md.

All exceptions inherit from WikiMdError so callers can catch the whole family.
Task-scoped errors (input read, output write) are turned into failed
ConversionResult values by the converter; CollectionError is fatal for the
whole run.
"""

from pathlib import Path
from typing import Optional


class WikiMdError(Exception):
    """Base exception for all wiki-md errors."""
    pass


class CollectionError(WikiMdError):
    """Raised when the input path cannot be walked."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        message = f"Could not collect input files from {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class InputReadError(WikiMdError):
    """Raised when an input HTML file cannot be read or decoded."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        message = f"Could not read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class OutputWriteError(WikiMdError):
    """Raised when a Markdown file cannot be created or written."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        message = f"Could not write {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class QuotingError(WikiMdError):
    """Raised when a title cannot be turned into a quoted string."""

    def __init__(self, title: str, reason: str):
        super().__init__(f"Could not quote title {title!r}: {reason}")
        self.title = title
        self.reason = reason
