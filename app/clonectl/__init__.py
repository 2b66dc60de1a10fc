"""clonectl - clear a destination completely, then clone into it."""

__version__ = "0.1.0"
