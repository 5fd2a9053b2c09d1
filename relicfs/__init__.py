"""Hex-dump image recovery and virtual filesystem operations for chunked and filtered files."""

__version__ = "0.1.0"