"""Tools for identifying and stripping NewGRF container files, with helpers for palettes, file naming and line input."""

__version__ = "0.1.0"