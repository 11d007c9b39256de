"""Keep a folder tree's derived counts exact and drop empty branches."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import BookmarkFolder


def _post_order(root: BookmarkFolder) -> list[BookmarkFolder]:
    """Return every folder below and including ``root``, children before parents."""
    pre_order: list[BookmarkFolder] = []
    stack = [root]
    while stack:
        folder = stack.pop()
        pre_order.append(folder)
        stack.extend(folder.subfolders)
    pre_order.reverse()
    return pre_order


def recompute_totals(folder: BookmarkFolder) -> int:
    """Recompute ``total_bookmarks`` and ``total_folders`` for the whole subtree.

    Returns the folder's own bookmark total.
    """
    for node in _post_order(folder):
        node.total_bookmarks = len(node.bookmarks) + sum(
            sub.total_bookmarks for sub in node.subfolders
        )
        node.total_folders = len(node.subfolders) + sum(
            sub.total_folders for sub in node.subfolders
        )
    return folder.total_bookmarks


def prune_empty(folder: BookmarkFolder) -> None:
    """Remove descendant folders left without bookmarks and subfolders.

    Deeper folders are pruned first so a parent emptied by pruning goes too.
    ``folder`` itself is kept even when empty.
    """
    for node in _post_order(folder):
        node.subfolders = [sub for sub in node.subfolders if not sub.is_empty()]


def normalize(folder: BookmarkFolder) -> BookmarkFolder:
    """Apply the totals, prune, totals pass used after every import."""
    recompute_totals(folder)
    prune_empty(folder)
    recompute_totals(folder)
    return folder
