"""Path-addressed edits applied to an imported bookmark tree.

A path is the sequence of folder names leading from the root to a folder; each
name selects the first subfolder with that exact name. Every operation leaves
the caller's tree untouched: when an edit applies, a modified clone is
returned, otherwise the input tree itself is returned, so ``result is tree``
tells the caller that nothing changed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from .normalizer import recompute_totals

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from .models import BookmarkFolder

LOGGER = logging.getLogger(__name__)


def resolve_folder(root: BookmarkFolder, path: Sequence[str]) -> BookmarkFolder | None:
    """Follow ``path`` from ``root``; None when any segment is missing."""
    current = root
    for name in path:
        found = current.find_subfolder(name)
        if found is None:
            return None
        current = found
    return current


def delete_folder(tree: BookmarkFolder, path: Sequence[str]) -> BookmarkFolder:
    """Remove the folder named by the last path segment from its parent.

    Siblings sharing that name are removed along with it.
    """
    if not path or _resolve_parent_child(tree, path) is None:
        LOGGER.debug("delete_folder: no folder at %s", _display(path))
        return tree

    updated = tree.clone()
    parent = cast("BookmarkFolder", resolve_folder(updated, path[:-1]))
    parent.subfolders = [folder for folder in parent.subfolders if folder.name != path[-1]]
    recompute_totals(updated)
    return updated


def delete_bookmark(tree: BookmarkFolder, path: Sequence[str], url: str) -> BookmarkFolder:
    """Remove bookmarks with ``url`` from the folder at ``path``.

    The folder is kept even if this leaves it empty.
    """
    folder = resolve_folder(tree, path)
    if folder is None or _find_bookmark_index(folder, url) is None:
        LOGGER.debug("delete_bookmark: no bookmark %s in %s", url, _display(path))
        return tree

    updated = tree.clone()
    folder = cast("BookmarkFolder", resolve_folder(updated, path))
    folder.bookmarks = [bookmark for bookmark in folder.bookmarks if bookmark.url != url]
    recompute_totals(updated)
    return updated


def rename_folder(tree: BookmarkFolder, path: Sequence[str], new_name: str) -> BookmarkFolder:
    """Rename the folder at ``path``; blank or unchanged names are ignored."""
    new_name = new_name.strip()
    if not path or not new_name or new_name == path[-1]:
        return tree
    if _resolve_parent_child(tree, path) is None:
        LOGGER.debug("rename_folder: no folder at %s", _display(path))
        return tree

    updated = tree.clone()
    cast("BookmarkFolder", resolve_folder(updated, path)).name = new_name
    return updated


def edit_bookmark(
    tree: BookmarkFolder,
    path: Sequence[str],
    old_url: str,
    new_name: str,
    new_url: str,
) -> BookmarkFolder:
    """Replace name and url of the first bookmark at ``old_url`` in the folder at ``path``.

    The favicon is left as it was.
    """
    new_name = new_name.strip()
    new_url = new_url.strip()
    if not new_name or not new_url:
        return tree
    folder = resolve_folder(tree, path)
    index = _find_bookmark_index(folder, old_url) if folder is not None else None
    if index is None:
        LOGGER.debug("edit_bookmark: no bookmark %s in %s", old_url, _display(path))
        return tree

    updated = tree.clone()
    bookmark = cast("BookmarkFolder", resolve_folder(updated, path)).bookmarks[index]
    bookmark.name = new_name
    bookmark.url = new_url
    return updated


def _resolve_parent_child(
    tree: BookmarkFolder,
    path: Sequence[str],
) -> BookmarkFolder | None:
    parent = resolve_folder(tree, path[:-1])
    if parent is None:
        return None
    return parent.find_subfolder(path[-1])


def _find_bookmark_index(folder: BookmarkFolder, url: str) -> int | None:
    for idx, bookmark in enumerate(folder.bookmarks):
        if bookmark.url == url:
            return idx
    return None


def _display(path: Sequence[str]) -> str:
    return "/".join(path) or "<root>"
