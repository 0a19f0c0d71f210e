"""
Version 4 of the API.

Mirrors TMF633 Service Catalog Management v4.  Breaking changes
belong in a new version subpackage so existing clients keep working.
"""
