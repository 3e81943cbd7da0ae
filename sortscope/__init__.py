"""Terminal visualiser for classic sorting algorithms."""

__version__ = "0.1.0"
__all__ = ["__version__"]