# stamp/logic/stamp_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..exceptions.errors import StampFileNotFoundError
from ..models.stamp_geometry import Placement, ResolvedSize
from ..models.stamp_spec import StampSpec
from .geometry_resolver import resolve
from .pdf_stamper import PathLike, PdfStamper
from .placement_engine import compute_scale, place_on_page
from .units import pt_to_mm, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class StampRunResult:
    output_path: Path
    page_count: int
    resolved: ResolvedSize
    scale: Tuple[float, float]
    opacity: float
    placements: List[Placement] = field(default_factory=list)


class StampService:
    """
    Page iteration controller (no UI, no argv).

    Resolves the stamp size once, then visits pages 1..N in order: read page,
    compute placement from that page's own size, composite, append. The first
    error aborts the whole run; nothing is written unless every page succeeded.
    """

    def __init__(self, *, stamper: Optional[PdfStamper] = None) -> None:
        self._stamper = stamper or PdfStamper()

    def stamp_document(
        self,
        source_path: PathLike,
        stamp_path: PathLike,
        output_path: PathLike,
        spec: StampSpec,
    ) -> StampRunResult:
        st = self._stamper
        logger.debug("Input PDF: %s", source_path)

        doc = st.open_document(source_path)
        num_pages = st.page_count(doc)

        stamp_path = Path(stamp_path)
        if not stamp_path.is_file():
            raise StampFileNotFoundError(f"File {stamp_path} stat error: no such file")

        stamp = st.load_image(stamp_path, opacity=spec.opacity)
        logger.debug("Stamp Width  : %g", stamp.size.natural_width)
        logger.debug("Stamp Height : %g", stamp.size.natural_height)

        resolved = resolve(spec, stamp.size)
        scale = compute_scale(resolved, stamp.size)

        placements: List[Placement] = []
        for page_no in range(1, num_pages + 1):
            page = st.get_page(doc, page_no)
            geometry = st.page_geometry(page)
            logger.debug(
                "Page (%d) Width : %d [mm]   Height : %d [mm]",
                page_no,
                round_half_up(pt_to_mm(geometry.width_pt)),
                round_half_up(pt_to_mm(geometry.height_pt)),
            )
            placement = place_on_page(geometry, resolved, spec.anchor, scale)
            st.compose(doc, page, stamp, placement, geometry)
            placements.append(placement)

        written = st.write_document(doc, output_path)
        return StampRunResult(
            output_path=written,
            page_count=num_pages,
            resolved=resolved,
            scale=scale,
            opacity=spec.opacity,
            placements=placements,
        )
