"""Dominant colours of BMP images, sent over TCP and drawn as SVG pie charts."""

__version__ = "0.1.0"