"""Errors raised when an import attempt cannot produce a bookmark tree."""

from __future__ import annotations


class BookmarkImportError(ValueError):
    """Base class for import failures; the message is shown to the user as-is."""


class EmptyInputError(BookmarkImportError):
    """Raised when the document has no parseable content."""


class MissingColumnsError(BookmarkImportError):
    """Raised when a CSV header lacks the name/title or url/link column."""


class InvalidFormatError(BookmarkImportError):
    """Raised when an HTML export has no bookmark list root."""


class UnsupportedFormatError(BookmarkImportError):
    """Raised when a file is neither a CSV nor an HTML export."""
