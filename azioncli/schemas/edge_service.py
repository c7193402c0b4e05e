"""
Edge Service Schemas.

Pydantic schemas for edge services and the resources attached to them.
"""

from pydantic import Field

from azioncli.schemas.base import EntitySchema, RequestSchema

RESOURCE_TRIGGERS = ("Install", "Reload", "Uninstall")

CONTENT_TYPES = {
    "shellscript": "Shell Script",
    "text": "Text",
}


class Variable(EntitySchema):
    """A name/value pair attached to an edge service."""

    name: str
    value: str = ""


class EdgeService(EntitySchema):
    """An edge service as returned by the API."""

    id: int
    name: str = ""
    active: bool = False
    updated_at: str = ""
    last_editor: str = ""
    bound_nodes: int = 0
    permissions: list[str] = Field(default_factory=list)
    variables: list[Variable] = Field(default_factory=list)


class ServiceResource(EntitySchema):
    """A file or script attached to an edge service."""

    id: int
    name: str = ""
    type: str = ""
    content_type: str = ""
    content: str = ""
    last_editor: str = ""
    updated_at: str = ""


class CreateEdgeServiceRequest(RequestSchema):
    """Schema for creating a new edge service."""

    name: str = Field(..., min_length=1)


class UpdateEdgeServiceRequest(RequestSchema):
    """Schema for patching an edge service. `id` is not part of the body."""

    id: int = Field(..., gt=0, exclude=True)
    name: str | None = Field(default=None, min_length=1)
    active: bool | None = None
    variables: list[Variable] | None = None


class CreateResourceRequest(RequestSchema):
    """Schema for creating a resource under an edge service."""

    service_id: int = Field(..., gt=0, exclude=True)
    name: str = Field(..., min_length=1)
    type: str | None = None
    content_type: str = Field(..., min_length=1)
    content: str


class UpdateResourceRequest(RequestSchema):
    """Schema for patching a resource. Both ids are path parameters."""

    service_id: int = Field(..., gt=0, exclude=True)
    id: int = Field(..., gt=0, exclude=True)
    name: str | None = Field(default=None, min_length=1)
    type: str | None = None
    content_type: str | None = None
    content: str | None = None
