"""
Pydantic schema definitions for API payloads.

Schemas describe the wire representation of resources and are kept
separate from the stores, which work on plain documents.
"""
