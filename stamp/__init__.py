"""
Stamp module.

Places a raster image ("stamp") on every page of a PDF at one of nine
keypad-style anchor positions, with millimetre offsets, optional target size
and opacity. Geometry is kept pure (resolver + placement engine); the pdf
plumbing lives in :mod:`stamp.logic.pdf_stamper`.
"""
__version__ = "1.0.0"
