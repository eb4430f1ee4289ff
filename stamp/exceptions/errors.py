"""Stamp feature exceptions."""
from __future__ import annotations


class StampError(Exception):
    """Base exception for the stamp feature. Every subclass aborts the run."""


class StampFileNotFoundError(StampError, FileNotFoundError):
    """Raised when the stamp image does not exist."""


class UnreadableSourceError(StampError):
    """Raised when the source PDF cannot be opened or parsed."""


class PageReadError(StampError):
    """Raised when a single page of the source cannot be retrieved."""


class MalformedImageError(StampError):
    """Raised when the stamp image cannot be decoded or has zero size."""


class WriteFailureError(StampError):
    """Raised when the output PDF cannot be written."""


class InvalidStampSpecError(StampError, ValueError):
    """Raised for out-of-range stamp settings (negative sizes, opacity > 1 ...)."""
