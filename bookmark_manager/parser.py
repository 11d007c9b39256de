"""Parse a Netscape-format HTML bookmark export into a folder tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .config import HTML_FOLDER_DENYLIST, HTML_ROOT_NAME, UNTITLED_BOOKMARK, UNTITLED_FOLDER
from .errors import InvalidFormatError
from .models import Bookmark, BookmarkFolder
from .normalizer import normalize

LOGGER = logging.getLogger(__name__)

_ITEM = "dt"
_LIST = "dl"
_HEADING = "h3"
_LINK = "a"


@dataclass(slots=True)
class _Frame:
    """Element children still to visit, and the folder they belong to."""

    children: list[Tag]
    folder: BookmarkFolder
    index: int = 0


def parse_bookmark_html(html_text: str, logger: logging.Logger | None = None) -> BookmarkFolder:
    """Parse an exported bookmark HTML document into a normalised folder tree.

    The walk follows the ``<DL>``/``<DT>`` structure. Exports rarely close their
    ``<DT>`` and ``<p>`` tags, so with ``html.parser`` every item ends up nested
    inside its previous sibling. Whatever an item holds besides its own heading,
    link and nested list is therefore walked as part of the current folder, and
    the walk keeps an explicit stack instead of recursing once per item.
    """
    log = logger or LOGGER
    soup = BeautifulSoup(html_text, "html.parser")

    root_dl = soup.find(_LIST)
    if not isinstance(root_dl, Tag):
        msg = "Invalid HTML bookmark file format"
        raise InvalidFormatError(msg)

    root = BookmarkFolder(name=HTML_ROOT_NAME)
    _walk(root_dl, root, log)

    normalize(root)
    log.info(
        "Extracted %d bookmark entries across %d folders",
        root.total_bookmarks,
        root.total_folders,
    )
    return root


def _walk(root_dl: Tag, root: BookmarkFolder, log: logging.Logger) -> None:
    frames = [_Frame(_element_children(root_dl), root)]
    while frames:
        frame = frames[-1]
        if frame.index >= len(frame.children):
            frames.pop()
            continue
        child = frame.children[frame.index]
        frame.index += 1

        if child.name == _ITEM:
            following = frame.children[frame.index] if frame.index < len(frame.children) else None
            nested, subfolder = _read_item(child, following, frame.folder, log)
            if nested is not None and nested is following:
                frame.index += 1
            # Items swallowed by an unclosed <DT> belong to the current folder.
            frames.append(_Frame(_element_children(child, skip=nested), frame.folder))
            if nested is not None and subfolder is not None:
                frames.append(_Frame(_element_children(nested), subfolder))
        elif child.name not in {_HEADING, _LINK}:
            frames.append(_Frame(_element_children(child), frame.folder))


def _element_children(container: Tag, skip: Tag | None = None) -> list[Tag]:
    return [child for child in container.children if isinstance(child, Tag) and child is not skip]


def _read_item(
    item: Tag,
    following: Tag | None,
    folder: BookmarkFolder,
    log: logging.Logger,
) -> tuple[Tag | None, BookmarkFolder | None]:
    """Add the folder or bookmark described by a ``<DT>`` to ``folder``.

    Returns the item's nested list, which may be ``following``, and the folder
    created for it; the folder is None for links and skipped folders.
    """
    heading = item.find(_HEADING, recursive=False)
    if isinstance(heading, Tag):
        nested = item.find(_LIST, recursive=False)
        if not isinstance(nested, Tag):
            nested = following if following is not None and following.name == _LIST else None

        name = heading.get_text().strip() or UNTITLED_FOLDER
        if name.lower() in HTML_FOLDER_DENYLIST:
            log.debug("Skipping browser folder %r", name)
            return nested, None
        subfolder = BookmarkFolder(name=name)
        folder.subfolders.append(subfolder)
        return nested, subfolder

    link = item.find(_LINK, recursive=False)
    if isinstance(link, Tag):
        _read_link(link, folder, log)
    return None, None


def _read_link(link: Tag, folder: BookmarkFolder, log: logging.Logger) -> None:
    href_value = link.get("href")
    href = href_value.strip() if isinstance(href_value, str) else ""
    if not href:
        log.debug("Skipping anchor with empty href")
        return
    name = link.get_text().strip() or UNTITLED_BOOKMARK
    folder.add_bookmark(Bookmark.from_link(name, href))
