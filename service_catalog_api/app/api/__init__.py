"""
API package containing versioned routes.

A version subpackage (e.g. ``v4``) exposes a top‑level ``router``
which includes all of its resource endpoints.
"""
