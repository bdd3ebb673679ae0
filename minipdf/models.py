from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reportlab.lib.pagesizes import landscape, portrait

from .constants import A4_SIZE, DEFAULT_MARGIN, LEGAL_SIZE, LETTER_SIZE


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class PageSize:
    """Page width and height in points. Values are not validated."""

    width: float
    height: float

    def landscape(self) -> PageSize:
        return PageSize(*landscape((self.width, self.height)))

    def portrait(self) -> PageSize:
        return PageSize(*portrait((self.width, self.height)))


@dataclass(frozen=True)
class Margins:
    left: float = DEFAULT_MARGIN
    right: float = DEFAULT_MARGIN
    top: float = DEFAULT_MARGIN
    bottom: float = DEFAULT_MARGIN

    @classmethod
    def uniform(cls, value: float) -> Margins:
        return cls(value, value, value, value)


A4 = PageSize(*A4_SIZE)
LETTER = PageSize(*LETTER_SIZE)
LEGAL = PageSize(*LEGAL_SIZE)

PAGE_SIZES = {
    "a4": A4,
    "letter": LETTER,
    "legal": LEGAL,
}
