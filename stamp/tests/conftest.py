"""Shared fixtures: real PDFs rendered with reportlab, real PNGs via Pillow."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Tuple

import pytest
from PIL import Image
from reportlab.lib.pagesizes import A4, letter
from reportlab.pdfgen import canvas


def _write_pdf(path: Path, sizes: Sequence[Tuple[float, float]]) -> Path:
    c = canvas.Canvas(str(path))
    for i, size in enumerate(sizes, start=1):
        c.setPageSize(size)
        c.drawString(72, 72, f"page {i}")
        c.showPage()
    c.save()
    return path


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str = "source.pdf", sizes: Sequence[Tuple[float, float]] = (A4,)) -> Path:
        return _write_pdf(tmp_path / name, sizes)
    return _make


@pytest.fixture
def a4_letter_pdf(make_pdf) -> Path:
    return make_pdf("mixed.pdf", (A4, letter))


@pytest.fixture
def stamp_png(tmp_path: Path) -> Path:
    """Opaque 200 x 100 px image (aspect 2:1)."""
    path = tmp_path / "stamp.png"
    Image.new("RGBA", (200, 100), (200, 20, 20, 255)).save(path)
    return path
