"""
Top-level package for the Catalog API.

This file makes ``catalog_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``catalog_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
