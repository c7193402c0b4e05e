"""
Base Schemas.

Shared base classes for API payloads and the list options every
list command builds from its flags.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationInfo, field_validator

from azioncli.core.exceptions import ApplicationError, ValidationError


class EntitySchema(BaseModel):
    """
    Base for server-owned records.

    Unknown fields are ignored so new server fields never break decoding.
    A null optional field decodes to its default; other values are kept
    exactly as served.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class RequestSchema(BaseModel):
    """
    Base for create/update payloads.

    A request is consumed by exactly one API call: payload() may only be
    called once. Fields set to None are left out of the body.
    """

    model_config = ConfigDict(extra="forbid")

    _consumed: bool = PrivateAttr(default=False)

    def payload(self) -> dict[str, Any]:
        """Return the JSON body and mark the request as consumed."""
        if self._consumed:
            raise ApplicationError(
                f"{type(self).__name__} was already sent",
                code="REQ_ALREADY_SENT",
            )
        self._consumed = True
        return self.model_dump(exclude_none=True)


@dataclass
class ListOptions:
    """
    Pagination, sort and filter parameters for a collection query.

    Built once per invocation from command flags.
    """

    page: int = 1
    page_size: int = 10
    sort: str = ""
    order_by: str = ""
    filter: str = ""

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be a positive integer", details={"page": self.page})
        if self.page_size < 1:
            raise ValidationError(
                "page size must be a positive integer",
                details={"page_size": self.page_size},
            )
