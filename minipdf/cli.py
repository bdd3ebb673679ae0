import argparse
import logging
import sys
from pathlib import Path

from .constants import DEFAULT_BASE_FONT, DEFAULT_FONT_KEY, DEFAULT_FONT_SIZE
from .document import Document
from .fonts import FontRegistry
from .layout import PageLayout, Unit, from_points
from .models import PAGE_SIZES, Orientation
from .page import Page
from .version import __version__
from .writer import PDFSerializer


log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minipdf",
        description="Write a minimal text-only PDF 1.4 file",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Examples:
  minipdf hello.pdf
  minipdf out.pdf --text "First line" --text "Second line" --x 1 --y 1 --unit in --top-left
  minipdf wide.pdf --page-size letter --landscape --pages 3 --title "Report"
        """,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"minipdf {__version__}"
    )
    parser.add_argument("output", help="Output PDF path")
    parser.add_argument(
        "--text",
        action="append",
        default=None,
        metavar="LINE",
        help="Line of text to draw; repeat for more lines (default: 'Hello, PDF!')",
    )
    parser.add_argument("--x", type=float, default=100, help="Text x position (default: 100)")
    parser.add_argument("--y", type=float, default=700, help="Text y position (default: 700)")
    parser.add_argument(
        "--unit",
        choices=[u.value for u in Unit],
        default=Unit.POINTS.value,
        help="Unit for --x/--y (default: pt)",
    )
    parser.add_argument(
        "--top-left",
        action="store_true",
        help="Measure --y from the top edge instead of the bottom",
    )
    parser.add_argument(
        "--font",
        default=DEFAULT_BASE_FONT,
        metavar="NAME",
        help=f"Standard base font (default: {DEFAULT_BASE_FONT})",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE,
        metavar="PT",
        help=f"Font size in points (default: {DEFAULT_FONT_SIZE})",
    )
    parser.add_argument(
        "--page-size",
        choices=sorted(PAGE_SIZES),
        default="a4",
        help="Page size (default: a4)",
    )
    parser.add_argument("--landscape", action="store_true", help="Use landscape pages")
    parser.add_argument(
        "--pages",
        type=int,
        default=1,
        metavar="N",
        help="Number of pages; the text is drawn on each (default: 1)",
    )
    parser.add_argument("--title", default=None)
    parser.add_argument("--author", default=None)
    parser.add_argument("--subject", default=None)
    parser.add_argument("--keywords", nargs="*", default=None, metavar="WORD")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level (default: INFO)",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )
    # Keep reportlab quiet unless explicitly debugging.
    logging.getLogger("reportlab").setLevel(logging.WARNING)


def _resolve_base_font(name: str) -> str:
    registry = FontRegistry()
    registry.register_standard_fonts()
    if registry.lookup_registered(name) is None:
        log.warning("Unknown standard font '%s', using %s", name, DEFAULT_BASE_FONT)
        return DEFAULT_BASE_FONT
    return name


def build_document(args: argparse.Namespace) -> Document:
    doc = Document()
    doc.set_title(args.title)
    doc.set_author(args.author)
    doc.set_subject(args.subject)
    doc.set_keywords(args.keywords)

    size = PAGE_SIZES[args.page_size]
    orientation = Orientation.PORTRAIT
    if args.landscape:
        size = size.landscape()
        orientation = Orientation.LANDSCAPE

    layout = PageLayout(use_top_left_origin=args.top_left, unit=Unit(args.unit))
    lines = args.text if args.text else ["Hello, PDF!"]
    # Line spacing expressed in the caller's unit; top-left origin grows downwards.
    leading = from_points(args.font_size * 1.2, layout.unit)
    step = leading if args.top_left else -leading

    for _ in range(max(0, args.pages)):
        page = doc.add_page(Page(size=size, orientation=orientation))
        for i, line in enumerate(lines):
            page.add_text(
                line, args.x, args.y + i * step, DEFAULT_FONT_KEY, args.font_size, layout=layout
            )
    return doc


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.log_level)

    doc = build_document(args)
    out_path = Path(args.output)
    serializer = PDFSerializer(doc, base_font=_resolve_base_font(args.font))
    try:
        serializer.save(out_path)
    except OSError as exc:
        log.error("Error: could not write '%s': %s", out_path, exc)
        return 1

    if out_path.is_file() and out_path.stat().st_size > 0:
        log.info("PDF created successfully: %s", out_path.resolve())
        return 0
    log.error("PDF creation failed: %s is missing or empty", out_path)
    return 1


if __name__ == "__main__":
    sys.exit(main())
