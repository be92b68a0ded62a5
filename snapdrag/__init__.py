"""SnapDrag - drag rectangles around a page and snap them into alignment."""

__version__ = "0.1.0"
