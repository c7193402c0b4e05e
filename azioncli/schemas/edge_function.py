"""
Edge Function Schemas.

Pydantic schemas for edge function payloads.
"""

from typing import Any

from pydantic import Field

from azioncli.schemas.base import EntitySchema, RequestSchema


class EdgeFunction(EntitySchema):
    """An edge function as returned by the API."""

    id: int
    name: str = ""
    language: str = ""
    code: str = ""
    json_args: Any = None
    function_to_run: str = ""
    initiator_type: str = ""
    active: bool = False
    last_editor: str = ""
    modified: str = ""
    reference_count: int = 0


class CreateEdgeFunctionRequest(RequestSchema):
    """Schema for creating a new edge function."""

    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    language: str | None = None
    initiator_type: str | None = None
    active: bool | None = None
    json_args: Any = None


class UpdateEdgeFunctionRequest(RequestSchema):
    """Schema for patching an edge function. `id` is not part of the body."""

    id: int = Field(..., gt=0, exclude=True)
    name: str | None = Field(default=None, min_length=1)
    code: str | None = None
    initiator_type: str | None = None
    active: bool | None = None
    json_args: Any = None
