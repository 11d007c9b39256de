"""Tests for parsing HTML bookmark exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bookmark_manager import parser
from bookmark_manager.config import HTML_ROOT_NAME
from bookmark_manager.errors import InvalidFormatError

if TYPE_CHECKING:
    from pathlib import Path

EXPECTED_URLS = {
    "https://example.com/",
    "https://work.example/",
    "https://docs.example/",
    "https://play.example/",
}


def test_parse_basic(sample_export_html: Path) -> None:
    """Ensure parser rebuilds folders and bookmarks from an unclosed-tag export."""
    root = parser.parse_bookmark_html(sample_export_html.read_text(encoding="utf-8"))
    if root.name != HTML_ROOT_NAME:
        msg = f"Unexpected root name {root.name!r}"
        raise AssertionError(msg)
    urls = {b.url for b in root.iter_bookmarks()}
    if urls != EXPECTED_URLS:
        msg = f"Unexpected URLs: {urls ^ EXPECTED_URLS}"
        raise AssertionError(msg)
    if [b.name for b in root.bookmarks] != ["Example"]:
        raise AssertionError("Top-level bookmark not kept in the root")

    work = root.subfolders[0]
    if work.name != "Work" or [b.name for b in work.bookmarks] != ["Work Site"]:
        raise AssertionError("Work folder not parsed")
    docs = work.subfolders[0]
    if docs.name != "Docs" or docs.bookmarks[0].name != "Docs & Guides":
        raise AssertionError("Nested Docs folder or entity decoding broken")


def test_synced_folder_skipped_and_siblings_kept(sample_export_html: Path) -> None:
    root = parser.parse_bookmark_html(sample_export_html.read_text(encoding="utf-8"))
    names = [f.name for f in root.subfolders]
    # "Empty" is pruned, "Synced Bookmarks" is skipped with its contents.
    if names != ["Work", "Play"]:
        msg = f"Unexpected top-level folders: {names}"
        raise AssertionError(msg)
    if (root.total_bookmarks, root.total_folders) != (4, 3):
        msg = f"Unexpected totals {(root.total_bookmarks, root.total_folders)}"
        raise AssertionError(msg)


def test_parse_closed_tags_with_sibling_lists() -> None:
    html = (
        "<!DOCTYPE NETSCAPE-Bookmark-file-1><HTML><H3>Bookmarks</H3><DL>"
        '<DT><A HREF="https://example.com">Example</A></DT>'
        "<DT><H3>Folder</H3></DT>"
        '<DL><DT><A HREF="https://example.org">Example Org</A></DT></DL>'
        '<DT><A HREF="https://after.example">After</A></DT>'
        "</DL></HTML>"
    )
    root = parser.parse_bookmark_html(html)
    if [b.url for b in root.bookmarks] != ["https://example.com", "https://after.example"]:
        raise AssertionError("Sibling list leaked into the root or order changed")
    folder = root.subfolders[0]
    if folder.name != "Folder" or [b.url for b in folder.bookmarks] != ["https://example.org"]:
        raise AssertionError("Sibling <DL> not used as the folder's contents")


def test_defaults_and_empty_href() -> None:
    html = """<DL><p>
    <DT><A HREF="">No target</A>
    <DT><A HREF="https://untitled.example/"></A>
    <DT><H3></H3>
    <DL><p>
        <DT><A HREF="https://inner.example/">Inner</A>
    </DL><p>
    <DT><A>Missing href</A>
</DL><p>
"""
    root = parser.parse_bookmark_html(html)
    if [b.name for b in root.bookmarks] != ["Untitled"]:
        msg = f"Unexpected root bookmarks {[b.name for b in root.bookmarks]}"
        raise AssertionError(msg)
    if [f.name for f in root.subfolders] != ["Untitled Folder"]:
        raise AssertionError("Blank folder heading should get the default name")


def test_synced_folder_match_is_case_insensitive() -> None:
    html = """<DL><p>
    <DT><H3>SYNCED bookmarks</H3>
    <DL><p>
        <DT><A HREF="https://hidden.example/">Hidden</A>
    </DL><p>
    <DT><H3>Kept</H3>
    <DL><p>
        <DT><A HREF="https://kept.example/">Kept</A>
    </DL><p>
</DL><p>
"""
    root = parser.parse_bookmark_html(html)
    if [f.name for f in root.subfolders] != ["Kept"]:
        msg = f"Unexpected folders {[f.name for f in root.subfolders]}"
        raise AssertionError(msg)
    if root.total_bookmarks != 1:
        raise AssertionError("Synced folder contents should be dropped")


def test_favicon_set_on_import(sample_export_html: Path) -> None:
    root = parser.parse_bookmark_html(sample_export_html.read_text(encoding="utf-8"))
    if root.bookmarks[0].favicon != "https://example.com/favicon.ico":
        raise AssertionError("Favicon not derived from the link")


@pytest.mark.parametrize("text", ["", "<html><body><p>No bookmarks here</p></body></html>"])
def test_missing_list_root_is_invalid(text: str) -> None:
    with pytest.raises(InvalidFormatError):
        parser.parse_bookmark_html(text)


def test_long_flat_list_of_unclosed_items() -> None:
    count = 3000
    items = "\n".join(
        f'    <DT><A HREF="https://site{idx}.example/">Site {idx}</A>' for idx in range(count)
    )
    html = f"<DL><p>\n    <DT><H3>Many</H3>\n    <DL><p>\n{items}\n    </DL><p>\n</DL><p>\n"
    root = parser.parse_bookmark_html(html)
    if [f.name for f in root.subfolders] != ["Many"]:
        raise AssertionError("Folder lost in a long export")
    bookmarks = root.subfolders[0].bookmarks
    if len(bookmarks) != count:
        msg = f"Expected {count} bookmarks, got {len(bookmarks)}"
        raise AssertionError(msg)
    if bookmarks[-1].url != f"https://site{count - 1}.example/":
        raise AssertionError("Bookmark order not preserved")
