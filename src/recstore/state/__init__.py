"""State/store layer.

This package owns the keyed record collection, its change notifications
and the creation variants (plain factory and per-type singleton registry).
"""
