"""Shared pytest fixtures for bookmark manager tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bookmark_manager.models import Bookmark, BookmarkFolder
from bookmark_manager.normalizer import normalize

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_CSV = (
    "name,url,folder\r\n"
    "Python,https://www.python.org/,Bookmarks Bar/Dev\r\n"
    '"Docs, official",https://docs.python.org/3/,Bookmarks Bar/Dev/Reference\r\n'
    "News,https://news.example.com/,\r\n"
)

# Unclosed <DT> and <p> tags, as browsers write them.
SAMPLE_EXPORT_HTML = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><A HREF="https://example.com/" ADD_DATE="1700000000">Example</A>
    <DT><H3 ADD_DATE="1700000000">Work</H3>
    <DL><p>
        <DT><A HREF="https://work.example/">Work Site</A>
        <DT><H3>Docs</H3>
        <DL><p>
            <DT><A HREF="https://docs.example/">Docs &amp; Guides</A>
        </DL><p>
    </DL><p>
    <DT><H3>Synced Bookmarks</H3>
    <DL><p>
        <DT><A HREF="https://synced.example/">Synced</A>
    </DL><p>
    <DT><H3>Empty</H3>
    <DL><p>
    </DL><p>
    <DT><H3>Play</H3>
    <DL><p>
        <DT><A HREF="https://play.example/">Play</A>
    </DL><p>
</DL><p>
"""


@pytest.fixture
def sample_export_html(tmp_path: Path) -> Path:
    """Create a synthetic Netscape bookmark export HTML file."""
    p = tmp_path / "bookmarks.html"
    p.write_text(SAMPLE_EXPORT_HTML, encoding="utf-8")
    return p


@pytest.fixture
def sample_export_csv(tmp_path: Path) -> Path:
    """Create a synthetic CSV bookmark export file."""
    p = tmp_path / "bookmarks.csv"
    p.write_text(SAMPLE_CSV, encoding="utf-8")
    return p


@pytest.fixture
def sample_tree() -> BookmarkFolder:
    """A normalised tree: root -> Work -> Docs, plus a Play folder."""
    root = BookmarkFolder(name="Your Bookmarks")
    root.add_bookmark(Bookmark.from_link("Example", "https://example.com/"))
    root.add_bookmark_at(["Work"], Bookmark.from_link("Work Site", "https://work.example/"))
    root.add_bookmark_at(["Work", "Docs"], Bookmark.from_link("Docs", "https://docs.example/"))
    root.add_bookmark_at(["Work", "Docs"], Bookmark.from_link("API", "https://api.example/"))
    root.add_bookmark_at(["Play"], Bookmark.from_link("Play", "https://play.example/"))
    return normalize(root)
