"""
Top-level package for the Warehouse Inventory API.

All functionality lives in submodules under ``app``; the bundled seed
data lives in ``data``.
"""

__all__ = []
