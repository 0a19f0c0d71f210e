"""
Top‑level router for version 4 of the Service Catalog Management API.

This router aggregates the resource routers under the TMF633 base
path, which ``main`` applies as the prefix.  New resources of the
catalog (categories, candidates) would be included here.
"""

from fastapi import APIRouter

from .endpoints import service_specifications

router = APIRouter()

router.include_router(
    service_specifications.router,
    prefix="/serviceSpecification",
    tags=["serviceSpecification"],
)
