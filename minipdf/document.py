from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Generic, Iterator, TypeVar

from .page import Page
from .writer import PDFSerializer


log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FontResource:
    """A base-font name, or an external font file registered under ``name``."""

    name: str
    base_font: str | None = None
    path: str | None = None


@dataclass(frozen=True)
class ImageResource:
    name: str
    path: str


class ResourceRegistry(Generic[T]):
    """Name -> resource mapping; names are unique and re-adding replaces."""

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def add(self, name: str, resource: T) -> None:
        if name in self._items:
            log.debug("Replacing resource %r", name)
        self._items[name] = resource

    def get(self, name: str) -> T | None:
        return self._items.get(name)

    def remove(self, name: str) -> bool:
        return self._items.pop(name, None) is not None

    def names(self) -> list[str]:
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)


class Document:
    """
    Ordered collection of pages plus document-level metadata and resources.

    Nothing is written until :meth:`save`, :meth:`write_to` or
    :meth:`to_bytes` is called; each call serializes the current state
    from scratch, so repeated calls on an unchanged document produce
    identical bytes.
    """

    def __init__(self) -> None:
        self.pages: list[Page] = []
        self.title: str | None = None
        self.author: str | None = None
        self.subject: str | None = None
        self.keywords: list[str] | None = None
        self.fonts: ResourceRegistry[FontResource] = ResourceRegistry()
        self.images: ResourceRegistry[ImageResource] = ResourceRegistry()

    # ── Pages ─────────────────────────────────────────────────────────
    def add_page(self, page: Page | None = None) -> Page:
        """Append ``page`` (or a new default page) and return it."""
        if page is None:
            page = Page()
        self.pages.append(page)
        return page

    def remove_page(self, page: Page) -> bool:
        for i, existing in enumerate(self.pages):
            if existing is page:
                del self.pages[i]
                return True
        return False

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    # ── Metadata ──────────────────────────────────────────────────────
    def set_title(self, title: str | None) -> None:
        self.title = title

    def set_author(self, author: str | None) -> None:
        self.author = author

    def set_subject(self, subject: str | None) -> None:
        self.subject = subject

    def set_keywords(self, keywords: list[str] | None) -> None:
        self.keywords = list(keywords) if keywords is not None else None

    def metadata(self) -> dict[str, str]:
        """Info-dictionary entries for whatever metadata is set."""
        info: dict[str, str] = {}
        if self.title is not None:
            info["Title"] = self.title
        if self.author is not None:
            info["Author"] = self.author
        if self.subject is not None:
            info["Subject"] = self.subject
        if self.keywords is not None:
            info["Keywords"] = ", ".join(self.keywords)
        return info

    # ── Resources ─────────────────────────────────────────────────────
    def add_font(self, name: str, font: FontResource) -> None:
        self.fonts.add(name, font)

    def get_font(self, name: str) -> FontResource | None:
        return self.fonts.get(name)

    def add_image(self, name: str, image: ImageResource) -> None:
        self.images.add(name, image)

    def get_image(self, name: str) -> ImageResource | None:
        return self.images.get(name)

    # ── Output ────────────────────────────────────────────────────────
    def write_to(self, sink: BinaryIO) -> int:
        """Serialize into an open binary sink; returns bytes written."""
        return PDFSerializer(self).write(sink)

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.write_to(buf)
        return buf.getvalue()

    def save(self, path: str | Path) -> Path:
        return PDFSerializer(self).save(Path(path))
