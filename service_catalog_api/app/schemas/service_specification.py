"""
Pydantic schemas for ServiceSpecification resources.

Records are stored and returned as plain JSON documents so that any
extra fields a client sends survive a round trip.  ``ServiceSpecification``
declares the fields every record carries and their semantic types; it
documents the resource in the OpenAPI schema and tells the query filter
how to compare each field.  ``ErrorResponse`` is the body returned for
unknown identifiers.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

SERVICE_SPECIFICATION_TYPE = "ServiceSpecification"
DEFAULT_VERSION = "1.0"
DEFAULT_LIFECYCLE_STATUS = "active"


class ServiceSpecification(BaseModel):
    """Schema for a ServiceSpecification as returned by the API."""

    type_: str = Field(SERVICE_SPECIFICATION_TYPE, alias="@type")
    id: str = Field(..., examples=["5ae4dc5f-8031-40f6-ab85-ca6912d8635c"])
    href: str = Field(
        ...,
        examples=[
            "http://localhost:3000/tmf-api/serviceCatalogManagement/v4/"
            "serviceSpecification/5ae4dc5f-8031-40f6-ab85-ca6912d8635c"
        ],
    )
    name: str = Field(..., examples=["TestServiceName"])
    version: str = Field(DEFAULT_VERSION, examples=["1.0"])
    lifecycleStatus: str = Field(DEFAULT_LIFECYCLE_STATUS, examples=["active"])
    isBundle: bool = Field(False, examples=[True])
    lastUpdate: str = Field(..., examples=["2025-07-01T00:00:00Z"])

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body of a 404 response."""

    code: int = Field(..., examples=[404])
    error: str = Field(..., examples=["Not found"])


def declared_field_types() -> Dict[str, Any]:
    """Map each wire field name of ``ServiceSpecification`` to its type."""
    return {
        info.alias or name: info.annotation
        for name, info in ServiceSpecification.model_fields.items()
    }
