"""
ServiceSpecification endpoints for API v4.

These routes expose the TMF633 CRUD operations for service
specifications.  List accepts arbitrary ``field=value`` query
parameters as equality filters plus ``fields`` for projection.
Request bodies are free‑form JSON objects; missing fields are
defaulted rather than rejected, and a body that is not an object
counts as an empty one.  Unknown identifiers produce
``{"code": 404, "error": "Not found"}``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from service_catalog_api.app.core.db import get_store
from service_catalog_api.app.schemas.service_specification import ErrorResponse, ServiceSpecification
from service_catalog_api.app.services.service_specification_service import (
    RecordNotFoundError,
    ServiceSpecificationService,
)
from service_catalog_api.app.stores import Store

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _base_url(request: Request) -> str:
    """Scheme and host the request was served on."""
    return str(request.base_url).rstrip("/")


def _as_fields(body: Any) -> Optional[Dict[str, Any]]:
    """Bodies that are not JSON objects carry no fields; they are not rejected."""
    return body if isinstance(body, dict) else None


def _not_found() -> JSONResponse:
    body = ErrorResponse(code=status.HTTP_404_NOT_FOUND, error="Not found")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())


@router.get("")
async def list_service_specifications(
    request: Request,
    fields: Optional[str] = Query(None, description="Comma-separated list of fields to return"),
    store: Store = Depends(get_store),
) -> List[Dict[str, Any]]:
    """Return service specifications, optionally filtered and projected.

    Every query parameter other than ``fields`` filters on the field of
    the same name, e.g. ``?isBundle=true&fields=id,name``.
    """
    return await ServiceSpecificationService.list_specifications(
        store,
        _base_url(request),
        filters=dict(request.query_params),
        fields=fields,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_201_CREATED: {"model": ServiceSpecification}},
)
async def create_service_specification(
    request: Request,
    payload: Any = Body(None),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Create a service specification from a partial representation."""
    return await ServiceSpecificationService.create_specification(
        store, _base_url(request), _as_fields(payload)
    )


@router.get(
    "/{spec_id}",
    responses={status.HTTP_200_OK: {"model": ServiceSpecification}, **NOT_FOUND_RESPONSE},
)
async def get_service_specification(
    spec_id: str,
    request: Request,
    store: Store = Depends(get_store),
) -> Any:
    """Retrieve a single service specification by its ID."""
    try:
        return await ServiceSpecificationService.get_specification(store, _base_url(request), spec_id)
    except RecordNotFoundError:
        return _not_found()


@router.patch(
    "/{spec_id}",
    responses={status.HTTP_200_OK: {"model": ServiceSpecification}, **NOT_FOUND_RESPONSE},
)
async def patch_service_specification(
    spec_id: str,
    request: Request,
    changes: Any = Body(None),
    store: Store = Depends(get_store),
) -> Any:
    """Partially update a service specification.

    Only the fields present in the body are changed; ``id`` and ``href``
    cannot be set by the client.
    """
    try:
        return await ServiceSpecificationService.update_specification(
            store, _base_url(request), spec_id, _as_fields(changes)
        )
    except RecordNotFoundError:
        return _not_found()


@router.delete(
    "/{spec_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_service_specification(
    spec_id: str,
    store: Store = Depends(get_store),
) -> Response:
    """Delete a service specification."""
    try:
        await ServiceSpecificationService.delete_specification(store, spec_id)
    except RecordNotFoundError:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
