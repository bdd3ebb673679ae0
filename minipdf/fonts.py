from __future__ import annotations

import logging

from reportlab.pdfbase import pdfmetrics


log = logging.getLogger(__name__)


# The 14 standard PDF base fonts and the short resource tags they are known by.
BUILTIN_FONTS: dict[str, str] = {
    "Helvetica": "/Helv",
    "Helvetica-Bold": "/Helv-Bold",
    "Helvetica-Oblique": "/Helv-Oblique",
    "Helvetica-BoldOblique": "/Helv-BoldOblique",
    "Times-Roman": "/TiRo",
    "Times-Bold": "/TiBo",
    "Times-Italic": "/TiIt",
    "Times-BoldItalic": "/TiBI",
    "Courier": "/Cour",
    "Courier-Bold": "/Cour-Bold",
    "Courier-Oblique": "/Cour-Oblique",
    "Courier-BoldOblique": "/Cour-BoldOblique",
    "Symbol": "/Symb",
    "ZapfDingbats": "/ZaDb",
}


class FontRegistry:
    """
    Flat mapping of logical font names to resource tags or font file paths.

    Paths are stored as given; nothing here touches the filesystem.
    """

    def __init__(self) -> None:
        self._fonts: dict[str, str] = {}

    def register_standard_fonts(self) -> None:
        for name, tag in BUILTIN_FONTS.items():
            # First registration wins for the standard set.
            self._fonts.setdefault(name, tag)

    def register_font(self, name: str | None, path: str | None) -> None:
        if not name or not name.strip() or not path or not path.strip():
            log.debug("Ignoring font registration with blank name or path: %r -> %r", name, path)
            return
        self._fonts[name] = path

    @staticmethod
    def lookup_builtin(name: str) -> str | None:
        return BUILTIN_FONTS.get(name)

    def lookup_registered(self, name: str) -> str | None:
        return self._fonts.get(name)

    def registered_names(self) -> list[str]:
        return list(self._fonts)

    def __contains__(self, name: object) -> bool:
        return name in self._fonts

    def __len__(self) -> int:
        return len(self._fonts)


def string_width(text: str, font_name: str, font_size: float) -> float:
    """
    Advance width of ``text`` in points for one of the standard fonts.

    Unknown font names fall back to Helvetica metrics.
    """
    if font_name not in BUILTIN_FONTS:
        font_name = "Helvetica"
    return pdfmetrics.stringWidth(text, font_name, font_size)
