"""orderctl — purchase order validation and processing."""

__version__ = "0.1.0"
