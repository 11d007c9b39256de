"""Functions for rendering a bookmark tree as Netscape bookmark HTML."""

from __future__ import annotations

import html
import logging
from typing import TYPE_CHECKING

from .config import EXPORT_INDENT

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from .models import BookmarkFolder

LOGGER = logging.getLogger(__name__)

HTML_HEADER = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
"""


def render_html(root: BookmarkFolder) -> str:
    """Render the bookmark tree as HTML.

    The root folder's own name is not written; its contents form the top list.
    """
    lines: list[str] = [HTML_HEADER.strip(), "<DL><p>"]
    _render_folder(root, lines)
    lines.append("</DL><p>")
    return "\n".join(lines) + "\n"


def _render_folder(root: BookmarkFolder, output: list[str]) -> None:
    # Entries are either a folder to expand at a depth or a finished line.
    pending: list[tuple[BookmarkFolder, int] | str] = [(root, 1)]
    while pending:
        entry = pending.pop()
        if isinstance(entry, str):
            output.append(entry)
            continue
        folder, depth = entry
        indent = EXPORT_INDENT * depth
        for bookmark in folder.bookmarks:
            href = html.escape(bookmark.url, quote=True)
            output.append(f'{indent}<DT><A HREF="{href}">{html.escape(bookmark.name)}</A>')

        for subfolder in reversed(folder.subfolders):
            pending.append(f"{indent}</DL><p>")
            pending.append((subfolder, depth + 1))
            pending.append(f"{indent}<DL><p>")
            pending.append(f"{indent}<DT><H3>{html.escape(subfolder.name)}</H3>")


def write_bookmark_html(root: BookmarkFolder, output_path: Path) -> None:
    """Write the bookmark tree to an HTML file."""
    output_path.write_text(render_html(root), encoding="utf-8")
    LOGGER.info(
        "Wrote %d bookmarks in %d folders to %s",
        root.total_bookmarks,
        root.total_folders,
        output_path,
    )
