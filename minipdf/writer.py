from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from .constants import DEFAULT_BASE_FONT, DEFAULT_FONT_KEY, PDF_HEADER, PRODUCER
from .content import format_number, pdf_escape_literal

if TYPE_CHECKING:
    from .document import Document
    from .page import Page


log = logging.getLogger(__name__)

# Fonts with a built-in encoding that must not be overridden.
_SYMBOLIC_FONTS = {"Symbol", "ZapfDingbats"}


def pdf_string(s: str) -> bytes:
    return b"(" + pdf_escape_literal(s).encode("ascii") + b")"


def _target_mode(path: Path) -> int:
    # Keep an existing file's permissions; new files get what open() would give.
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _start_offset(sink: BinaryIO) -> int:
    try:
        if sink.seekable():
            return sink.tell()
    except (AttributeError, OSError):
        pass
    return 0


class PDFObjectWriter:
    """
    Writes indirect objects to a binary sink while tracking byte offsets.

    Offsets are absolute positions in the sink: a seekable sink that already
    holds data is measured from its current position, a non-seekable one is
    assumed to start at 0. ``offsets[0]`` is the xref free-list head;
    ``offsets[n]`` is where ``n 0 obj`` begins.
    """

    def __init__(self, sink: BinaryIO):
        self._sink = sink
        self._start = _start_offset(sink)
        self._offset = self._start
        self.offsets: list[int] = [0]

    @property
    def position(self) -> int:
        return self._offset

    @property
    def bytes_written(self) -> int:
        return self._offset - self._start

    @property
    def object_count(self) -> int:
        return len(self.offsets) - 1

    def next_object_number(self) -> int:
        return len(self.offsets)

    def write_raw(self, data: bytes) -> None:
        self._sink.write(data)
        self._offset += len(data)

    def write_obj(self, obj_num: int, body: bytes) -> None:
        if obj_num != self.next_object_number():
            raise ValueError(
                f"object {obj_num} written out of order (expected {self.next_object_number()})"
            )
        self.offsets.append(self._offset)
        self.write_raw(b"%d 0 obj\n" % obj_num + body + b"\nendobj\n")

    def write_stream_obj(self, obj_num: int, data: bytes) -> None:
        body = b"<< /Length %d >>\nstream\n" % len(data) + data + b"\nendstream"
        self.write_obj(obj_num, body)

    def write_xref(self) -> int:
        """Write the cross-reference table and return its starting offset."""
        xref_offset = self._offset
        self.write_raw(b"xref\n")
        self.write_raw(b"0 %d\n" % len(self.offsets))
        # Object 0 is the free-list head (65535 f), never an in-use entry.
        self.write_raw(b"0000000000 65535 f \n")
        for off in self.offsets[1:]:
            self.write_raw(f"{off:010d} 00000 n \n".encode("ascii"))
        return xref_offset

    def write_trailer(self, root_num: int, xref_offset: int, info_num: int | None = None) -> None:
        trailer = (
            b"trailer\n"
            b"<<\n"
            + b"/Size %d\n" % len(self.offsets)
            + b"/Root %d 0 R\n" % root_num
            + (b"/Info %d 0 R\n" % info_num if info_num is not None else b"")
            + b">>\n"
            b"startxref\n"
            + str(xref_offset).encode("ascii")
            + b"\n%%EOF\n"
        )
        self.write_raw(trailer)


class PDFSerializer:
    """
    Single-pass PDF 1.4 serializer for a :class:`Document`.

    Object layout for N pages::

        1                 shared Type1 font
        2 .. 2N+1         content stream / page pairs, in page order
        2N+2              pages tree
        2N+3              catalog
        2N+4              info dictionary (only when metadata is set)
    """

    def __init__(
        self,
        document: Document,
        base_font: str = DEFAULT_BASE_FONT,
        font_key: str = DEFAULT_FONT_KEY,
    ):
        self.document = document
        self.base_font = base_font
        self.font_key = font_key

    def _font_body(self) -> bytes:
        body = b"<< /Type /Font /Subtype /Type1 /BaseFont /" + self.base_font.encode("ascii")
        if self.base_font not in _SYMBOLIC_FONTS:
            body += b" /Encoding /WinAnsiEncoding"
        return body + b" >>"

    def _page_body(self, page: Page, parent_num: int, content_num: int, font_num: int) -> bytes:
        media_box = "[0 0 %s %s]" % (format_number(page.width), format_number(page.height))
        return (
            b"<< /Type /Page\n"
            + b"/Parent %d 0 R\n" % parent_num
            + b"/MediaBox "
            + media_box.encode("ascii")
            + b"\n/Resources << /ProcSet [/PDF /Text] /Font << /"
            + self.font_key.encode("ascii")
            + b" %d 0 R >> >>\n" % font_num
            + b"/Contents %d 0 R\n" % content_num
            + b">>"
        )

    def _info_body(self, metadata: dict[str, str]) -> bytes:
        entries = [
            b"/%s %s" % (key.encode("ascii"), pdf_string(value))
            for key, value in metadata.items()
        ]
        entries.append(b"/Producer " + pdf_string(PRODUCER))
        return b"<< " + b"\n".join(entries) + b" >>"

    def write(self, sink: BinaryIO) -> int:
        """Write the whole document to ``sink``; returns the number of bytes written."""
        pages = list(self.document.pages)
        writer = PDFObjectWriter(sink)
        writer.write_raw(PDF_HEADER)

        font_num = writer.next_object_number()
        writer.write_obj(font_num, self._font_body())

        # Numbering is fixed up front so pages can point at their real parent.
        pages_num = font_num + 1 + 2 * len(pages)

        kids: list[int] = []
        for index, page in enumerate(pages):
            if page.width <= 0 or page.height <= 0:
                log.warning(
                    "Page %d has non-positive size %sx%s; writing it unchanged",
                    index + 1, page.width, page.height,
                )
            data = page.content_stream_bytes()
            content_num = writer.next_object_number()
            writer.write_stream_obj(content_num, data)

            page_num = writer.next_object_number()
            writer.write_obj(page_num, self._page_body(page, pages_num, content_num, font_num))
            kids.append(page_num)
            log.debug(
                "Page %d: content obj %d (%d bytes), page obj %d",
                index + 1, content_num, len(data), page_num,
            )

        pages_body = (
            b"<< /Type /Pages\n"
            + b"/Count %d\n" % len(kids)
            + b"/Kids ["
            + b" ".join(b"%d 0 R" % pid for pid in kids)
            + b"]\n>>"
        )
        writer.write_obj(pages_num, pages_body)

        catalog_num = writer.next_object_number()
        writer.write_obj(catalog_num, b"<< /Type /Catalog /Pages %d 0 R >>" % pages_num)

        info_num = None
        metadata = self.document.metadata()
        if metadata:
            info_num = writer.next_object_number()
            writer.write_obj(info_num, self._info_body(metadata))

        xref_offset = writer.write_xref()
        writer.write_trailer(catalog_num, xref_offset, info_num)
        log.debug("Serialized %d objects, xref at %d", writer.object_count, xref_offset)
        return writer.bytes_written

    def save(self, out_path: Path) -> Path:
        """
        Write the document to ``out_path``.

        Output goes to a temporary file next to the target which then
        replaces it, so an interrupted save never leaves a truncated PDF
        under the final name. The result keeps an existing target's permissions,
        otherwise gets the umask default. Errors propagate to the caller.
        """
        out_path.parent.mkdir(parents=True, exist_ok=True)
        mode = _target_mode(out_path)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb",
                delete=False,
                dir=str(out_path.parent),
                prefix=f".{out_path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                size = self.write(tmp)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, out_path)
        except BaseException:
            if tmp_path is not None:
                try:
                    tmp_path.unlink(missing_ok=True)
                except OSError:
                    pass
            raise
        log.info("Wrote %s (%d pages, %d bytes)", out_path, len(self.document.pages), size)
        return out_path
