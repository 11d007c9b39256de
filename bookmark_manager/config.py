"""Global configuration constants for bookmark manager."""

from __future__ import annotations

# Root folder names given to freshly imported trees.
CSV_ROOT_NAME: str = "Your Bookmarks"
HTML_ROOT_NAME: str = "All Bookmarks"

UNTITLED_BOOKMARK: str = "Untitled"
UNTITLED_FOLDER: str = "Untitled Folder"

# Header aliases, compared case-insensitively. Name and url need an exact
# match, the folder column only needs to contain one of the hints.
NAME_COLUMNS: tuple[str, ...] = ("name", "title")
URL_COLUMNS: tuple[str, ...] = ("url", "link")
FOLDER_COLUMN_HINTS: tuple[str, ...] = ("folder", "path")

# Browser-generated containers dropped from CSV folder paths (lowercase).
CSV_FOLDER_DENYLIST: frozenset[str] = frozenset(
    {
        "bookmarks",
        "bokmärken",
        "bookmark bar",
        "bokmärkesfältet",
        "bookmarks bar",
        "mobile bookmarks",
        "mobila bokmärken",
        "other bookmarks",
        "andra bokmärken",
    },
)

# Mobile exports only wrap everything in the top-level container.
MOBILE_CSV_FOLDER_DENYLIST: frozenset[str] = frozenset({"bookmarks", "bokmärken"})

# Folder headings skipped (with their contents) by the HTML importer.
HTML_FOLDER_DENYLIST: frozenset[str] = frozenset(
    {"synced bookmarks", "synkroniserade bokmärken"},
)

# One indentation step per folder depth in exported HTML.
EXPORT_INDENT: str = "    "
