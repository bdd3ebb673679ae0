from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from .constants import CONTENT_ENCODING, DEFAULT_BASE_FONT, DEFAULT_FONT_KEY
from .fonts import string_width
from .layout import PageLayout


log = logging.getLogger(__name__)

_BYTE_ESCAPES = {
    ord("\\"): "\\\\",
    ord("("): "\\(",
    ord(")"): "\\)",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
}
_NEEDS_ESCAPE_RE = re.compile(r"[^\x20-\x7e]|[()\\]")

_ALIGNMENTS = ("left", "center", "right")


def pdf_escape_literal(s: str) -> str:
    """
    Escape ``s`` for use inside a PDF literal string ``( ... )``.

    The result is pure ASCII: text is encoded as cp1252 (unencodable
    characters become ``?``) and bytes outside printable ASCII are written
    as three-digit octal escapes.
    """
    if not _NEEDS_ESCAPE_RE.search(s):
        return s
    parts: list[str] = []
    for b in s.encode(CONTENT_ENCODING, errors="replace"):
        escaped = _BYTE_ESCAPES.get(b)
        if escaped is not None:
            parts.append(escaped)
        elif 0x20 <= b <= 0x7E:
            parts.append(chr(b))
        else:
            parts.append(f"\\{b:03o}")
    return "".join(parts)


def format_number(value: float, precision: int = 2) -> str:
    if not math.isfinite(value):
        log.warning("Non-finite number %r written as 0", value)
        return "0"
    # Fixed precision with trailing zeros trimmed: 100.0 -> "100", 12.5 -> "12.5".
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def _font_resource(name: str | None) -> str:
    name = (name or "").strip().lstrip("/")
    return name or DEFAULT_FONT_KEY


class ContentStream:
    """Append-only buffer of content-stream operators for one page."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def append_command(self, text: str | None) -> None:
        if text is None:
            return
        self._buf += (text + "\n").encode(CONTENT_ENCODING, errors="replace")

    def append_text(
        self,
        content: str | None,
        x: float,
        y: float,
        font_resource_name: str | None,
        font_size: float,
        page_height: float,
        layout: PageLayout | None = None,
    ) -> None:
        if content is None:
            return
        layout = layout or PageLayout()
        px, py = layout.to_device_coordinates(x, y, page_height)
        self._show_text(content, px, py, font_resource_name, font_size)

    def append_aligned_text(
        self,
        content: str | None,
        x: float,
        y: float,
        font_resource_name: str | None,
        font_size: float,
        page_height: float,
        align: str = "left",
        layout: PageLayout | None = None,
        metrics_font: str = DEFAULT_BASE_FONT,
    ) -> None:
        """
        Like :meth:`append_text`, with ``x`` as the left edge, centre or right
        edge of the text depending on ``align``.

        Widths come from the AFM metrics of ``metrics_font``, which should be
        the base font behind ``font_resource_name``.
        """
        if align not in _ALIGNMENTS:
            raise ValueError(f"align must be one of {_ALIGNMENTS}, got {align!r}")
        if content is None:
            return
        layout = layout or PageLayout()
        px, py = layout.to_device_coordinates(x, y, page_height)
        if align != "left":
            width = string_width(content, metrics_font, font_size)
            px -= width / 2 if align == "center" else width
        self._show_text(content, px, py, font_resource_name, font_size)

    def concat_matrix(self, matrix: Sequence[float]) -> None:
        if len(matrix) != 6:
            raise ValueError(f"transform matrix needs 6 values, got {len(matrix)}")
        self.append_command(" ".join(format_number(v, precision=5) for v in matrix) + " cm")

    def save_state(self) -> None:
        self.append_command("q")

    def restore_state(self) -> None:
        self.append_command("Q")

    def _show_text(
        self, content: str, x: float, y: float, font_resource_name: str | None, font_size: float
    ) -> None:
        command = (
            f"BT /{_font_resource(font_resource_name)} {format_number(font_size)} Tf "
            f"{format_number(x)} {format_number(y)} Td "
            f"({pdf_escape_literal(content)}) Tj ET"
        )
        self.append_command(command)

    def clear(self) -> None:
        self._buf.clear()

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def to_debug_string(self) -> str:
        return self._buf.decode(CONTENT_ENCODING, errors="replace")

    def __len__(self) -> int:
        return len(self._buf)
