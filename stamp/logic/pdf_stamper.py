"""
===============================================================================
PdfStamper – document/image collaborator for the stamp run
-------------------------------------------------------------------------------
Implementation
    - pypdf reads the source, merges overlays and writes the result.
    - reportlab renders a page-sized overlay holding the stamp image.
    - Pillow decodes the stamp and bakes the opacity into its alpha channel.
Placement coordinates arrive top-left relative (keypad semantics) and are
flipped into PDF user space (origin bottom-left, y up) here and only here.
===============================================================================
"""
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError
from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PyPdfError
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..exceptions.errors import (
    MalformedImageError,
    PageReadError,
    UnreadableSourceError,
    WriteFailureError,
)
from ..models.stamp_geometry import PageGeometry, Placement, StampImage

PathLike = Union[str, Path]


@dataclass
class StampDocument:
    """Source reader plus the writer that collects the stamped pages in order."""
    path: Path
    reader: PdfReader
    writer: PdfWriter = field(default_factory=PdfWriter)


@dataclass
class LoadedStamp:
    """Decoded stamp. ``image`` is RGBA with the run's opacity already applied."""
    path: Path
    image: Image.Image
    size: StampImage
    _reader: ImageReader | None = field(default=None, repr=False)

    def reader(self) -> ImageReader:
        if self._reader is None:
            self._reader = ImageReader(self.image)
        return self._reader


class PdfStamper:
    # ---- document ---------------------------------------------------- #
    @staticmethod
    def open_document(path: PathLike) -> StampDocument:
        path = Path(path)
        try:
            reader = PdfReader(str(path))
        except (PyPdfError, OSError, ValueError) as exc:
            raise UnreadableSourceError(f"Failed to open the source file. [{exc}]") from exc
        return StampDocument(path=path, reader=reader)

    @staticmethod
    def page_count(doc: StampDocument) -> int:
        try:
            return len(doc.reader.pages)
        except (PyPdfError, OSError, ValueError, KeyError) as exc:
            raise UnreadableSourceError(f"Failed to get PageCount of the source file. [{exc}]") from exc

    @staticmethod
    def get_page(doc: StampDocument, page_no: int) -> PageObject:
        """``page_no`` is 1-based."""
        try:
            return doc.reader.pages[page_no - 1]
        except (PyPdfError, OSError, ValueError, KeyError, IndexError) as exc:
            raise PageReadError(f"Failed to read page {page_no} from source. [{exc}]") from exc

    @staticmethod
    def page_geometry(page: PageObject) -> PageGeometry:
        box = page.mediabox
        return PageGeometry(
            width_pt=float(box.width),
            height_pt=float(box.height),
            left_pt=float(box.left),
            bottom_pt=float(box.bottom),
        )

    @staticmethod
    def write_document(doc: StampDocument, path: PathLike) -> Path:
        """
        Write via a temp file next to the target, so a failed write never
        leaves a truncated output behind.
        """
        target = Path(path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".pdfstamp_", suffix=".pdf", dir=str(target.parent))
            with os.fdopen(fd, "wb") as fh:
                doc.writer.write(fh)
            os.replace(tmp_name, target)
        except (OSError, PyPdfError, ValueError) as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise WriteFailureError(f"Failed to write the output file {target}. [{exc}]") from exc
        return target

    # ---- image ------------------------------------------------------- #
    @staticmethod
    def load_image(path: PathLike, *, opacity: float = 1.0) -> LoadedStamp:
        path = Path(path)
        try:
            with Image.open(path) as src:
                img = src.convert("RGBA")
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise MalformedImageError(f"Failed to load stamp image. [{exc}]") from exc

        size = StampImage(natural_width=float(img.width), natural_height=float(img.height))
        if opacity < 1.0:
            alpha = img.getchannel("A").point(lambda a: round(a * opacity))
            img.putalpha(alpha)
        return LoadedStamp(path=path, image=img, size=size)

    # ---- compositing ------------------------------------------------- #
    @staticmethod
    def _make_overlay(page: PageGeometry, stamp: LoadedStamp, placement: Placement) -> bytes:
        """One overlay page covering the target media box, holding only the stamp."""
        draw_w = stamp.size.natural_width * placement.scale_x
        draw_h = stamp.size.natural_height * placement.scale_y
        x = page.left_pt + placement.x_pt
        y = page.bottom_pt + page.height_pt - placement.y_pt - draw_h

        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=(page.left_pt + page.width_pt, page.bottom_pt + page.height_pt))
        c.drawImage(stamp.reader(), x, y, width=draw_w, height=draw_h, mask="auto")
        c.showPage()
        c.save()
        return buf.getvalue()

    @staticmethod
    def compose(
        doc: StampDocument,
        page: PageObject,
        stamp: LoadedStamp,
        placement: Placement,
        geometry: PageGeometry | None = None,
    ) -> PageObject:
        """Append ``page`` to the output and paint the stamp on the writer's copy."""
        geometry = geometry or PdfStamper.page_geometry(page)
        overlay = PdfReader(BytesIO(PdfStamper._make_overlay(geometry, stamp, placement)))
        out_page = doc.writer.add_page(page)
        out_page.merge_page(overlay.pages[0])
        return out_page
