"""
Top‑level package for the Service Catalog API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``service_catalog_api.app.main:app``.
"""

__all__ = []
