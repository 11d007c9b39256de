"""Check that a written export reads back to the same bookmarks."""

from __future__ import annotations

import collections
import logging
from typing import TYPE_CHECKING

from .parser import parse_bookmark_html

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from .models import BookmarkFolder

LOGGER = logging.getLogger(__name__)


def validate_export(original: BookmarkFolder, exported_path: Path) -> None:
    """Re-import ``exported_path`` and compare its bookmarks with ``original``."""
    exported = parse_bookmark_html(exported_path.read_text(encoding="utf-8"))
    original_urls = [bookmark.url for bookmark in original.iter_bookmarks()]
    exported_urls = [bookmark.url for bookmark in exported.iter_bookmarks()]
    _assert_counts(original_urls, exported_urls)
    _assert_url_multiset(original_urls, exported_urls)
    LOGGER.info("Validation successful: all %d bookmarks accounted for", len(original_urls))


def _assert_counts(original: list[str], exported: list[str]) -> None:
    if len(original) != len(exported):
        msg = (
            "Mismatch between in-memory and exported bookmark counts: "
            f"{len(original)} vs {len(exported)}"
        )
        raise ValueError(msg)


def _assert_url_multiset(original: list[str], exported: list[str]) -> None:
    original_urls = collections.Counter(original)
    exported_urls = collections.Counter(exported)
    if original_urls != exported_urls:
        missing = original_urls - exported_urls
        extras = exported_urls - original_urls
        msg = "URL mismatch detected after export"
        raise ValueError(msg, {"missing": dict(missing), "extra": dict(extras)})
