"""Grayscale image filters, histograms and equalization, plus small helpers."""

__version__ = "0.1.0"
__all__ = ["basics", "filters", "histogram"]