"""Isometric wireframe viewer for plain-text height maps, with an XPM reader."""

__version__ = "0.1.0"
__all__ = ["__version__"]