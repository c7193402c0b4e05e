"""
Edge Services Client.

Typed wrapper around the edge services API: services themselves and the
resources (files and scripts) attached to each service. Paths are
relative to the edge services base URL.
"""

from azioncli.api.base import BaseResourceClient
from azioncli.schemas.base import ListOptions
from azioncli.schemas.edge_service import (
    CreateEdgeServiceRequest,
    CreateResourceRequest,
    EdgeService,
    ServiceResource,
    UpdateEdgeServiceRequest,
    UpdateResourceRequest,
)


def _list_params(options: ListOptions) -> dict[str, str | int]:
    params: dict[str, str | int] = {
        "page": options.page,
        "limit": options.page_size,
    }
    if options.filter:
        params["filter"] = options.filter
    return params


class EdgeServicesClient(BaseResourceClient):
    """Client for edge services."""

    resource = "edge service"

    async def get(self, service_id: int) -> EdgeService:
        """Fetch a service including its variables."""
        self._validate_id(service_id)
        data = await self._request_json(
            "GET", f"/{service_id}", params={"with_vars": "true"}
        )
        return self._decode(EdgeService, data)

    async def create(self, request: CreateEdgeServiceRequest) -> EdgeService:
        self._log_operation("Creating edge service", name=request.name)
        data = await self._request_json("POST", "/", json=request.payload())
        return self._decode(EdgeService, data)

    async def update(self, request: UpdateEdgeServiceRequest) -> EdgeService:
        self._validate_id(request.id)
        self._log_operation("Updating edge service", service_id=request.id)
        data = await self._request_json("PATCH", f"/{request.id}", json=request.payload())
        return self._decode(EdgeService, data)

    async def delete(self, service_id: int) -> None:
        self._validate_id(service_id)
        self._log_operation("Deleting edge service", service_id=service_id)
        await self._request("DELETE", f"/{service_id}")

    async def list(self, options: ListOptions) -> list[EdgeService]:
        """List one page of services, optionally filtered by name."""
        data = await self._request_json("GET", "/", params=_list_params(options))
        return self._decode_list(EdgeService, self._field(data, "services"))


class ServiceResourcesClient(BaseResourceClient):
    """Client for the resources of one edge service."""

    resource = "edge service resource"

    async def get(self, service_id: int, resource_id: int) -> ServiceResource:
        self._validate_id(service_id, "service id")
        self._validate_id(resource_id)
        data = await self._request_json("GET", f"/{service_id}/resources/{resource_id}")
        return self._decode(ServiceResource, data)

    async def create(self, request: CreateResourceRequest) -> ServiceResource:
        self._validate_id(request.service_id, "service id")
        self._log_operation(
            "Creating edge service resource",
            service_id=request.service_id,
            name=request.name,
        )
        data = await self._request_json(
            "POST",
            f"/{request.service_id}/resources",
            json=request.payload(),
        )
        return self._decode(ServiceResource, data)

    async def update(self, request: UpdateResourceRequest) -> ServiceResource:
        self._validate_id(request.service_id, "service id")
        self._validate_id(request.id)
        self._log_operation(
            "Updating edge service resource",
            service_id=request.service_id,
            resource_id=request.id,
        )
        data = await self._request_json(
            "PATCH",
            f"/{request.service_id}/resources/{request.id}",
            json=request.payload(),
        )
        return self._decode(ServiceResource, data)

    async def delete(self, service_id: int, resource_id: int) -> None:
        self._validate_id(service_id, "service id")
        self._validate_id(resource_id)
        self._log_operation(
            "Deleting edge service resource",
            service_id=service_id,
            resource_id=resource_id,
        )
        await self._request("DELETE", f"/{service_id}/resources/{resource_id}")

    async def list(self, service_id: int, options: ListOptions) -> list[ServiceResource]:
        self._validate_id(service_id, "service id")
        data = await self._request_json(
            "GET",
            f"/{service_id}/resources",
            params=_list_params(options),
        )
        return self._decode_list(ServiceResource, self._field(data, "resources"))
