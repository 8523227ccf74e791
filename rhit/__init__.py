"""Reports of the hits found in nginx access logs."""

__version__ = "1.0.0"