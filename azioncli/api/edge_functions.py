"""
Edge Functions Client.

Typed wrapper around the edge functions endpoints of the v3 API.
Responses wrap the record (or the page of records) in "results".
"""

from azioncli.api.base import BaseResourceClient
from azioncli.schemas.base import ListOptions
from azioncli.schemas.edge_function import (
    CreateEdgeFunctionRequest,
    EdgeFunction,
    UpdateEdgeFunctionRequest,
)

# The API requires `language` and only accepts javascript.
JAVASCRIPT = "javascript"


class EdgeFunctionsClient(BaseResourceClient):
    """Client for /edge_functions."""

    resource = "edge function"

    async def get(self, function_id: int) -> EdgeFunction:
        self._validate_id(function_id)
        data = await self._request_json("GET", f"/edge_functions/{function_id}")
        return self._decode(EdgeFunction, self._field(data, "results"))

    async def list(self, options: ListOptions) -> list[EdgeFunction]:
        """List one page of edge functions."""
        params: dict[str, str | int] = {
            "page": options.page,
            "page_size": options.page_size,
        }
        if options.sort:
            params["sort"] = options.sort
        if options.order_by:
            params["order_by"] = options.order_by

        data = await self._request_json("GET", "/edge_functions", params=params)
        return self._decode_list(EdgeFunction, self._field(data, "results"))

    async def create(self, request: CreateEdgeFunctionRequest) -> EdgeFunction:
        """Create an edge function. The language is always javascript."""
        request.language = JAVASCRIPT
        self._log_operation("Creating edge function", name=request.name)
        data = await self._request_json("POST", "/edge_functions", json=request.payload())
        return self._decode(EdgeFunction, self._field(data, "results"))

    async def update(self, request: UpdateEdgeFunctionRequest) -> EdgeFunction:
        self._validate_id(request.id)
        self._log_operation("Updating edge function", function_id=request.id)
        data = await self._request_json(
            "PATCH",
            f"/edge_functions/{request.id}",
            json=request.payload(),
        )
        return self._decode(EdgeFunction, self._field(data, "results"))

    async def delete(self, function_id: int) -> None:
        self._validate_id(function_id)
        self._log_operation("Deleting edge function", function_id=function_id)
        await self._request("DELETE", f"/edge_functions/{function_id}")
