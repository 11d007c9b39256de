"""Build a bookmark tree from a CSV bookmark export."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .config import (
    CSV_FOLDER_DENYLIST,
    CSV_ROOT_NAME,
    FOLDER_COLUMN_HINTS,
    MOBILE_CSV_FOLDER_DENYLIST,
    NAME_COLUMNS,
    URL_COLUMNS,
)
from .errors import EmptyInputError, MissingColumnsError
from .models import Bookmark, BookmarkFolder
from .normalizer import normalize
from .tokenizer import split_csv_line

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Collection, Sequence

LOGGER = logging.getLogger(__name__)

_FOLDER_SEPARATOR_RE = re.compile(r"[/\\]+")
_BOM = "\ufeff"


def parse_bookmark_csv(
    csv_text: str,
    logger: logging.Logger | None = None,
) -> BookmarkFolder:
    """Parse a desktop browser CSV export into a normalised folder tree."""
    return _parse_csv(csv_text, CSV_FOLDER_DENYLIST, logger or LOGGER)


def parse_mobile_bookmark_csv(
    csv_text: str,
    logger: logging.Logger | None = None,
) -> BookmarkFolder:
    """Parse a mobile browser CSV export; only the top container is dropped from paths."""
    return _parse_csv(csv_text, MOBILE_CSV_FOLDER_DENYLIST, logger or LOGGER)


def split_folder_path(folder_path: str, denylist: Collection[str]) -> list[str]:
    """Split a ``/`` or ``\\`` separated path into meaningful folder names.

    Blank segments and browser container names in ``denylist`` are dropped.
    """
    segments = (segment.strip() for segment in _FOLDER_SEPARATOR_RE.split(folder_path))
    return [s for s in segments if s and s.lower() not in denylist]


def _parse_csv(
    csv_text: str,
    denylist: Collection[str],
    logger: logging.Logger,
) -> BookmarkFolder:
    text = csv_text.replace("\r\n", "\n").replace("\r", "\n").removeprefix(_BOM).strip()
    if not text:
        msg = "CSV file is empty"
        raise EmptyInputError(msg)

    lines = text.split("\n")
    headers = split_csv_line(lines[0])
    name_index, url_index, folder_index = _resolve_columns(headers)
    logger.debug(
        "CSV columns resolved - name: %d, url: %d, folder: %s",
        name_index,
        url_index,
        folder_index,
    )

    root = BookmarkFolder(name=CSV_ROOT_NAME)
    processed = 0
    for line_number, raw_line in enumerate(lines[1:], start=2):
        line = raw_line.strip()
        if not line:
            continue
        values = split_csv_line(line)
        name = _field(values, name_index)
        url = _field(values, url_index)
        if not name or not url:
            logger.debug("Skipping CSV line %d: missing name or URL", line_number)
            continue

        bookmark = Bookmark.from_link(name, url)
        folder_path = _field(values, folder_index) if folder_index is not None else ""
        segments = split_folder_path(folder_path, denylist) if folder_path else []
        root.add_bookmark_at(segments, bookmark)
        processed += 1

    normalize(root)
    logger.info(
        "Imported %d CSV rows into %d bookmarks across %d folders",
        processed,
        root.total_bookmarks,
        root.total_folders,
    )
    return root


def _resolve_columns(headers: Sequence[str]) -> tuple[int, int, int | None]:
    lowered = [header.lower() for header in headers]
    name_index = _first_index(lowered, lambda h: h in NAME_COLUMNS)
    url_index = _first_index(lowered, lambda h: h in URL_COLUMNS)
    folder_index = _first_index(
        lowered, lambda h: any(hint in h for hint in FOLDER_COLUMN_HINTS),
    )
    if name_index is None or url_index is None:
        msg = 'CSV must contain "name" or "title" and "url" or "link" columns'
        raise MissingColumnsError(msg)
    return name_index, url_index, folder_index


def _first_index(values: Sequence[str], predicate: Callable[[str], bool]) -> int | None:
    for idx, value in enumerate(values):
        if predicate(value):
            return idx
    return None


def _field(values: Sequence[str], index: int | None) -> str:
    if index is None or index >= len(values):
        return ""
    return values[index].strip()
