"""Isometric wireframe rendering of height-map files, with image, XPM and colour helpers."""

__version__ = "0.1.0"