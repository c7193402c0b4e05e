"""
Command Helpers.

Shared plumbing for the resource commands: running the async body,
turning application errors into a non-zero exit, and reading input files.
"""

import asyncio
import json
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import typer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from azioncli.api.client import close_api_clients
from azioncli.cli.printer import print_error
from azioncli.core.config import get_app_config
from azioncli.core.exceptions import ApplicationError, ValidationError
from azioncli.core.logging import get_logger, log_with_source
from azioncli.schemas.base import ListOptions

logger = get_logger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


async def _run_and_close(coro: Coroutine[Any, Any, None]) -> None:
    try:
        await coro
    finally:
        await close_api_clients()


def run_command(coro: Coroutine[Any, Any, None]) -> None:
    """
    Run a command body to completion.

    Any ApplicationError is printed to stderr and ends the command with
    exit status 1.
    """
    try:
        asyncio.run(_run_and_close(coro))
    except ApplicationError as e:
        log_with_source(logger, "cli", "debug", "Command failed", code=e.code, error=e.message)
        print_error(e.message)
        raise typer.Exit(1) from e


def list_options(
    page: int | None,
    page_size: int | None,
    sort: str = "",
    order_by: str = "",
    filter: str = "",
) -> ListOptions:
    """Build ListOptions from flags, falling back to application.yaml defaults."""
    defaults = get_app_config().application.list_defaults
    return ListOptions(
        page=defaults.page if page is None else page,
        page_size=defaults.page_size if page_size is None else page_size,
        sort=sort,
        order_by=order_by,
        filter=filter,
    )


def read_text_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValidationError(f"Failed to read {path}: {e}") from e


def read_json_file(path: Path) -> Any:
    """Read and decode a JSON input file."""
    text = read_text_file(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e


def build_request(schema_cls: type[RequestT], **data: Any) -> RequestT:
    """Validate flag or file input into a request object."""
    try:
        return schema_cls(**data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid input: {e}") from e


def request_from_file(schema_cls: type[RequestT], path: Path, **extra: Any) -> RequestT:
    """Build a request from a JSON object file given with --in."""
    data = read_json_file(path)
    if not isinstance(data, dict):
        raise ValidationError(f"{path} must contain a JSON object")
    return build_request(schema_cls, **{**data, **extra})


def ensure_exclusive(input_file: Path | None, **flags: Any) -> None:
    """--in cannot be combined with the per-field flags."""
    if input_file is None:
        return
    given = [name for name, value in flags.items() if value is not None]
    if given:
        raise ValidationError(
            f"--in cannot be combined with {', '.join('--' + n.replace('_', '-') for n in given)}"
        )


def ensure_any(**flags: Any) -> None:
    """Update commands need at least one field to change."""
    if all(value is None for value in flags.values()):
        names = ", ".join("--" + n.replace("_", "-") for n in flags)
        raise ValidationError(f"Nothing to update. Use at least one of: {names}")
