"""Ingestion layer.

This package contains the boundary pieces that bring externally sourced
records into a store: the file loader and the feed adapter.
"""

__all__: list[str] = []
