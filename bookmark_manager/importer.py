"""Pick the right importer for an exported bookmark file."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .csv_importer import parse_bookmark_csv, parse_mobile_bookmark_csv
from .errors import UnsupportedFormatError
from .parser import parse_bookmark_html

if TYPE_CHECKING:  # pragma: no cover
    from .models import BookmarkFolder

LOGGER = logging.getLogger(__name__)


class SourceFormat(str, Enum):
    """Format of an exported bookmark file."""

    CSV = "csv"
    MOBILE_CSV = "mobile-csv"
    HTML = "html"


_SUFFIX_FORMATS: dict[str, SourceFormat] = {
    ".csv": SourceFormat.CSV,
    ".html": SourceFormat.HTML,
    ".htm": SourceFormat.HTML,
}


def detect_format(filename: str | Path) -> SourceFormat:
    """Infer the export format from a file name's suffix."""
    suffix = Path(filename).suffix.lower()
    source_format = _SUFFIX_FORMATS.get(suffix)
    if source_format is None:
        msg = f"Invalid file type {suffix or '(none)'}: please upload a CSV or HTML bookmark export"
        raise UnsupportedFormatError(msg)
    return source_format


def import_bookmarks(text: str, source_format: SourceFormat) -> BookmarkFolder:
    """Parse already-read export text into a normalised bookmark tree."""
    if source_format is SourceFormat.CSV:
        return parse_bookmark_csv(text)
    if source_format is SourceFormat.MOBILE_CSV:
        return parse_mobile_bookmark_csv(text)
    return parse_bookmark_html(text)


def load_bookmarks(path: Path, source_format: SourceFormat | None = None) -> BookmarkFolder:
    """Read an export file and parse it, detecting the format from its name if needed."""
    resolved = source_format or detect_format(path)
    LOGGER.debug("Importing %s as %s", path, resolved.value)
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    return import_bookmarks(text, resolved)


def import_summary(tree: BookmarkFolder) -> str:
    """Describe an imported tree the way the upload confirmation does."""
    return f"Imported {tree.total_bookmarks} bookmarks from {tree.total_folders} folders."
