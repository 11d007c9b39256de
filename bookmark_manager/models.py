"""Data models for the in-memory bookmark tree."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from attrs import Factory, define
from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator, Sequence


def favicon_url(url: str) -> str | None:
    """Return the conventional ``/favicon.ico`` location for the url's host."""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not hostname:
        return None
    return f"{parsed.scheme}://{hostname}/favicon.ico"


@dataclass(slots=True)
class Bookmark:
    """Leaf entry of the tree; ``url`` identifies it within its folder."""

    name: str
    url: str
    favicon: str | None = None

    @classmethod
    def from_link(cls, name: str, url: str) -> Bookmark:
        """Create a bookmark with its favicon derived from the url."""
        return cls(name=name, url=url, favicon=favicon_url(url))

    def to_model(self) -> BookmarkModel:
        """Convert the bookmark into a serialisable pydantic model."""
        return BookmarkModel(name=self.name, url=self.url, favicon=self.favicon)

    @classmethod
    def from_model(cls, model: BookmarkModel) -> Bookmark:
        """Create a bookmark from a validated pydantic model."""
        return cls(name=model.name, url=model.url, favicon=model.favicon)


@define(slots=True)
class BookmarkFolder:
    """Folder node holding subfolders and bookmarks in insertion order.

    ``total_bookmarks`` and ``total_folders`` are derived values; they are only
    correct after :func:`bookmark_manager.normalizer.recompute_totals` ran.
    """

    name: str
    subfolders: list[BookmarkFolder] = Factory(list)
    bookmarks: list[Bookmark] = Factory(list)
    total_bookmarks: int = 0
    total_folders: int = 0

    def find_subfolder(self, name: str) -> BookmarkFolder | None:
        """Return the first direct subfolder called ``name``."""
        for folder in self.subfolders:
            if folder.name == name:
                return folder
        return None

    def get_or_create_subfolder(self, name: str) -> BookmarkFolder:
        """Get or create a direct subfolder with the given name."""
        folder = self.find_subfolder(name)
        if folder is None:
            folder = BookmarkFolder(name=name)
            self.subfolders.append(folder)
        return folder

    def add_bookmark(self, bookmark: Bookmark) -> None:
        """Add a bookmark to this folder."""
        self.bookmarks.append(bookmark)

    def add_bookmark_at(self, path: Sequence[str], bookmark: Bookmark) -> BookmarkFolder:
        """Descend ``path`` from this folder, creating folders as needed, and add the bookmark.

        Returns the folder that received the bookmark.
        """
        node = self
        for segment in path:
            node = node.get_or_create_subfolder(segment)
        node.add_bookmark(bookmark)
        return node

    def is_empty(self) -> bool:
        """Return True when the folder holds neither bookmarks nor subfolders."""
        return not self.bookmarks and not self.subfolders

    def iter_bookmarks(self) -> Iterator[Bookmark]:
        """Yield every bookmark depth-first, a folder's own bookmarks first."""
        stack = [self]
        while stack:
            folder = stack.pop()
            yield from folder.bookmarks
            stack.extend(reversed(folder.subfolders))

    def clone(self) -> BookmarkFolder:
        """Return a deep copy of the folder and everything below it."""
        root = self._copy_node()
        stack = [(self, root)]
        while stack:
            source, target = stack.pop()
            for folder in source.subfolders:
                copied = folder._copy_node()
                target.subfolders.append(copied)
                stack.append((folder, copied))
        return root

    def _copy_node(self) -> BookmarkFolder:
        return BookmarkFolder(
            name=self.name,
            bookmarks=[replace(bookmark) for bookmark in self.bookmarks],
            total_bookmarks=self.total_bookmarks,
            total_folders=self.total_folders,
        )

    def to_model(self) -> BookmarkFolderModel:
        """Convert the folder and its descendants into pydantic models."""
        return BookmarkFolderModel(
            name=self.name,
            subfolders=[folder.to_model() for folder in self.subfolders],
            bookmarks=[bookmark.to_model() for bookmark in self.bookmarks],
            total_bookmarks=self.total_bookmarks,
            total_folders=self.total_folders,
        )

    @classmethod
    def from_model(cls, model: BookmarkFolderModel) -> BookmarkFolder:
        """Rebuild a folder tree from validated pydantic models."""
        return cls(
            name=model.name,
            subfolders=[cls.from_model(sub) for sub in model.subfolders],
            bookmarks=[Bookmark.from_model(item) for item in model.bookmarks],
            total_bookmarks=model.total_bookmarks,
            total_folders=model.total_folders,
        )


class BookmarkModel(BaseModel):
    """Pydantic model for a bookmark."""

    name: str
    url: str
    favicon: str | None = None

    @field_validator("name", "url", mode="before")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip() if isinstance(value, str) else value


class BookmarkFolderModel(BaseModel):
    """Pydantic model for a folder and everything below it."""

    name: str
    subfolders: list[BookmarkFolderModel] = Field(default_factory=list)
    bookmarks: list[BookmarkModel] = Field(default_factory=list)
    total_bookmarks: int = 0
    total_folders: int = 0

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip() if isinstance(value, str) else value
