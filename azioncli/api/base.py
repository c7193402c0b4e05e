"""
Base Resource Client.

Base class for the typed wrappers around one API resource family.
Resource clients build requests, call the shared APIClient and decode
payloads into schema objects.

Usage:
    from azioncli.api.base import BaseResourceClient

    class WidgetsClient(BaseResourceClient):
        resource = "widget"

        async def get(self, widget_id: int) -> Widget:
            self._validate_id(widget_id)
            data = await self._request_json("GET", f"/widgets/{widget_id}")
            return self._decode(Widget, data)
"""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from azioncli.api.client import APIClient
from azioncli.core.exceptions import ApplicationError, ValidationError
from azioncli.core.logging import get_logger

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class BaseResourceClient:
    """
    Base class for all resource clients.

    Provides:
    - Access to the shared APIClient
    - Identifier validation before any request
    - Payload decoding with a clear error on malformed responses

    Subclasses set `resource`, the name used in error messages.
    """

    resource = "resource"

    def __init__(self, api: APIClient) -> None:
        self._api = api
        self._logger = get_logger(self.__class__.__module__)

    @property
    def api(self) -> APIClient:
        """Get the underlying API client."""
        return self._api

    def _validate_id(self, value: int, name: str = "id") -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(
                f"{self.resource} {name} must be a positive integer",
                details={name: value},
            )

    async def _request(self, method: str, path: str, **kwargs: Any) -> None:
        await self._api.request(method, path, resource=self.resource, **kwargs)

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        return await self._api.request_json(method, path, resource=self.resource, **kwargs)

    def _decode(self, schema_cls: type[SchemaT], data: Any) -> SchemaT:
        """Build a schema object from a decoded payload."""
        try:
            return schema_cls.model_validate(data)
        except PydanticValidationError as e:
            raise ApplicationError(
                f"Unexpected {self.resource} payload: {e}",
                code="SYS_BAD_RESPONSE",
            ) from e

    def _field(self, data: Any, key: str) -> Any:
        """Pull one key out of a decoded JSON object."""
        if not isinstance(data, dict):
            raise ApplicationError(
                f"Unexpected {self.resource} payload",
                code="SYS_BAD_RESPONSE",
            )
        return data.get(key)

    def _decode_list(self, schema_cls: type[SchemaT], items: Any) -> list[SchemaT]:
        if items is None:
            return []
        if not isinstance(items, list):
            raise ApplicationError(
                f"Unexpected {self.resource} list payload",
                code="SYS_BAD_RESPONSE",
            )
        return [self._decode(schema_cls, item) for item in items]

    def _log_operation(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, resource=self.resource, **kwargs)
