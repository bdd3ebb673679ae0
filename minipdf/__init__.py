"""Minimal single-pass PDF 1.4 writer for text pages."""

from .content import ContentStream, format_number, pdf_escape_literal
from .document import Document, FontResource, ImageResource, ResourceRegistry
from .fonts import BUILTIN_FONTS, FontRegistry, string_width
from .layout import (
    PageLayout,
    Unit,
    from_points,
    multiply_matrices,
    rotation_matrix,
    scale_matrix,
    to_device_coordinates,
    to_points,
    translation_matrix,
)
from .models import A4, LEGAL, LETTER, Margins, Orientation, PageSize
from .page import Page
from .version import __version__
from .writer import PDFObjectWriter, PDFSerializer

__all__ = [
    "A4",
    "BUILTIN_FONTS",
    "ContentStream",
    "Document",
    "FontRegistry",
    "FontResource",
    "ImageResource",
    "LEGAL",
    "LETTER",
    "Margins",
    "Orientation",
    "PDFObjectWriter",
    "PDFSerializer",
    "Page",
    "PageLayout",
    "PageSize",
    "ResourceRegistry",
    "Unit",
    "__version__",
    "format_number",
    "from_points",
    "multiply_matrices",
    "pdf_escape_literal",
    "rotation_matrix",
    "scale_matrix",
    "string_width",
    "to_device_coordinates",
    "to_points",
    "translation_matrix",
]
