# Pydantic schemas package
from azioncli.schemas.base import EntitySchema, ListOptions, RequestSchema
from azioncli.schemas.edge_function import (
    CreateEdgeFunctionRequest,
    EdgeFunction,
    UpdateEdgeFunctionRequest,
)
from azioncli.schemas.edge_service import (
    CreateEdgeServiceRequest,
    CreateResourceRequest,
    EdgeService,
    ServiceResource,
    UpdateEdgeServiceRequest,
    UpdateResourceRequest,
    Variable,
)

__all__ = [
    "CreateEdgeFunctionRequest",
    "CreateEdgeServiceRequest",
    "CreateResourceRequest",
    "EdgeFunction",
    "EdgeService",
    "EntitySchema",
    "ListOptions",
    "RequestSchema",
    "ServiceResource",
    "UpdateEdgeFunctionRequest",
    "UpdateEdgeServiceRequest",
    "UpdateResourceRequest",
    "Variable",
]
