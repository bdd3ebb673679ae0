from __future__ import annotations

from .constants import DEFAULT_FONT_KEY, DEFAULT_FONT_SIZE
from .content import ContentStream
from .layout import PageLayout
from .models import A4, Margins, Orientation, PageSize


class Page:
    """
    One page: geometry plus the content stream drawn on it.

    Orientation is recorded for callers only; the MediaBox always uses
    ``size`` as given, so pass ``size.landscape()`` to get a wide page.
    """

    def __init__(
        self,
        size: PageSize = A4,
        orientation: Orientation = Orientation.PORTRAIT,
        margins: Margins | None = None,
    ) -> None:
        self.size = size
        self.orientation = orientation
        self.margins = margins or Margins()
        self.content = ContentStream()

    def set_page_size(self, size: PageSize) -> None:
        self.size = size

    def set_orientation(self, orientation: Orientation) -> None:
        self.orientation = orientation

    def set_margins(self, margins: Margins) -> None:
        self.margins = margins

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def content_box(self) -> tuple[float, float, float, float]:
        """(x0, y0, x1, y1) of the area inside the margins, bottom-left origin."""
        m = self.margins
        return (m.left, m.bottom, self.size.width - m.right, self.size.height - m.top)

    def add_command(self, command: str | None) -> None:
        self.content.append_command(command)

    def add_text(
        self,
        text: str | None,
        x: float,
        y: float,
        font_name: str = DEFAULT_FONT_KEY,
        font_size: float = DEFAULT_FONT_SIZE,
        layout: PageLayout | None = None,
        align: str = "left",
    ) -> None:
        if align == "left":
            self.content.append_text(text, x, y, font_name, font_size, self.size.height, layout)
        else:
            self.content.append_aligned_text(
                text, x, y, font_name, font_size, self.size.height, align=align, layout=layout
            )

    def clear_content_stream(self) -> None:
        self.content.clear()

    def content_stream_bytes(self) -> bytes:
        return self.content.to_bytes()

    def content_stream_text(self) -> str:
        return self.content.to_debug_string()

    def __repr__(self) -> str:
        return (
            f"Page(size={self.size.width}x{self.size.height}, "
            f"orientation={self.orientation.value}, content={len(self.content)} bytes)"
        )
