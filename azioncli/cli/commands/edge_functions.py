"""
Edge Function Commands.

list, describe, create, update and delete for edge functions.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from azioncli.api.dependencies import get_edge_functions_client
from azioncli.cli.printer import print_block, print_fields, print_message, print_table, to_json
from azioncli.cli.utils import (
    build_request,
    ensure_any,
    ensure_exclusive,
    list_options,
    read_json_file,
    read_text_file,
    request_from_file,
    run_command,
)
from azioncli.core.exceptions import ValidationError
from azioncli.schemas.edge_function import (
    CreateEdgeFunctionRequest,
    EdgeFunction,
    UpdateEdgeFunctionRequest,
)

app = typer.Typer(help="Manage edge functions", no_args_is_help=True)


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


class InitiatorType(str, Enum):
    edge_application = "edge_application"
    edge_firewall = "edge_firewall"


LIST_COLUMNS = [
    ("ID", "id"),
    ("NAME", "name"),
    ("LANGUAGE", "language"),
    ("ACTIVE", "active"),
]

DETAIL_COLUMNS = LIST_COLUMNS + [
    ("LAST EDITOR", "last_editor"),
    ("MODIFIED", "modified"),
    ("REFERENCE COUNT", "reference_count"),
    ("INITIATOR TYPE", "initiator_type"),
]


def describe_fields(function: EdgeFunction) -> list[tuple[str, object]]:
    """Fixed-order fields of the describe output."""
    return [
        ("ID", function.id),
        ("Name", function.name),
        ("Language", function.language),
        ("Reference Count", function.reference_count),
        ("Modified at", function.modified),
        ("Initiator Type", function.initiator_type),
        ("Last Editor", function.last_editor),
        ("Function to run", function.function_to_run),
        ("JSON Args", to_json(function.json_args)),
    ]


# =============================================================================
# list
# =============================================================================


@app.command("list")
def list_functions(
    page: Optional[int] = typer.Option(None, "--page", min=1, help="Page of results to show"),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", min=1, help="Number of items per page"
    ),
    sort: SortOrder = typer.Option(SortOrder.asc, "--sort", help="Sort direction"),
    order_by: str = typer.Option("name", "--order-by", help="Field to order the results by"),
    details: bool = typer.Option(False, "--details", help="Show more fields when listing"),
) -> None:
    """
    List the edge functions of your account.

    Examples:
        azioncli edge_functions list
        azioncli edge_functions list --page 2 --page-size 5 --details
    """
    run_command(_list(page, page_size, sort.value, order_by, details))


async def _list(
    page: int | None, page_size: int | None, sort: str, order_by: str, details: bool
) -> None:
    options = list_options(page, page_size, sort=sort, order_by=order_by)
    client = get_edge_functions_client()
    functions = await client.list(options)
    print_table(functions, DETAIL_COLUMNS if details else LIST_COLUMNS)


# =============================================================================
# describe
# =============================================================================


@app.command()
def describe(
    function_id: int = typer.Argument(..., min=1, help="ID of the edge function"),
    with_code: bool = typer.Option(False, "--with-code", help="Also print the function code"),
) -> None:
    """
    Describe an edge function.

    Examples:
        azioncli edge_functions describe 1337
        azioncli edge_functions describe 1337 --with-code
    """
    run_command(_describe(function_id, with_code))


async def _describe(function_id: int, with_code: bool) -> None:
    client = get_edge_functions_client()
    function = await client.get(function_id)

    print_fields(describe_fields(function))
    if with_code:
        print_block("Code", function.code)


# =============================================================================
# create
# =============================================================================


@app.command()
def create(
    name: Optional[str] = typer.Option(None, "--name", help="Name of the edge function"),
    code: Optional[Path] = typer.Option(
        None, "--code", exists=True, dir_okay=False, help="Path to the function code"
    ),
    active: Optional[bool] = typer.Option(
        None, "--active/--inactive", help="Whether the function is active"
    ),
    args: Optional[Path] = typer.Option(
        None, "--args", exists=True, dir_okay=False, help="Path to a JSON file with the arguments"
    ),
    initiator_type: Optional[InitiatorType] = typer.Option(
        None, "--initiator-type", help="Where the function runs"
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--in", exists=True, dir_okay=False, help="Path to a JSON file with the full request"
    ),
) -> None:
    """
    Create a new edge function.

    Either pass --name and --code (plus optional fields), or --in with a
    JSON file holding the whole request.

    Examples:
        azioncli edge_functions create --name hello --code ./hello.js --active
        azioncli edge_functions create --in ./request.json
    """
    run_command(_create(name, code, active, args, initiator_type, input_file))


async def _create(
    name: str | None,
    code: Path | None,
    active: bool | None,
    args: Path | None,
    initiator_type: InitiatorType | None,
    input_file: Path | None,
) -> None:
    ensure_exclusive(
        input_file,
        name=name,
        code=code,
        active=active,
        args=args,
        initiator_type=initiator_type,
    )

    if input_file is not None:
        request = request_from_file(CreateEdgeFunctionRequest, input_file)
    else:
        if not name or code is None:
            raise ValidationError("--name and --code are required (or use --in)")
        request = build_request(
            CreateEdgeFunctionRequest,
            name=name,
            code=read_text_file(code),
            active=True if active is None else active,
            json_args=read_json_file(args) if args is not None else {},
            initiator_type=(initiator_type or InitiatorType.edge_application).value,
        )

    client = get_edge_functions_client()
    function = await client.create(request)
    print_message(f"Created edge function with ID {function.id}")


# =============================================================================
# update
# =============================================================================


@app.command()
def update(
    function_id: int = typer.Argument(..., min=1, help="ID of the edge function"),
    name: Optional[str] = typer.Option(None, "--name", help="New name"),
    code: Optional[Path] = typer.Option(
        None, "--code", exists=True, dir_okay=False, help="Path to the new function code"
    ),
    active: Optional[bool] = typer.Option(
        None, "--active/--inactive", help="Activate or deactivate the function"
    ),
    args: Optional[Path] = typer.Option(
        None, "--args", exists=True, dir_okay=False, help="Path to a JSON file with the arguments"
    ),
    initiator_type: Optional[InitiatorType] = typer.Option(
        None, "--initiator-type", help="Where the function runs"
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--in", exists=True, dir_okay=False, help="Path to a JSON file with the fields to change"
    ),
) -> None:
    """
    Update an edge function. Only the given fields change.

    Examples:
        azioncli edge_functions update 1337 --name renamed --inactive
        azioncli edge_functions update 1337 --in ./patch.json
    """
    run_command(_update(function_id, name, code, active, args, initiator_type, input_file))


async def _update(
    function_id: int,
    name: str | None,
    code: Path | None,
    active: bool | None,
    args: Path | None,
    initiator_type: InitiatorType | None,
    input_file: Path | None,
) -> None:
    ensure_exclusive(
        input_file,
        name=name,
        code=code,
        active=active,
        args=args,
        initiator_type=initiator_type,
    )

    if input_file is not None:
        request = request_from_file(UpdateEdgeFunctionRequest, input_file, id=function_id)
    else:
        ensure_any(
            name=name,
            code=code,
            active=active,
            args=args,
            initiator_type=initiator_type,
        )
        request = build_request(
            UpdateEdgeFunctionRequest,
            id=function_id,
            name=name,
            code=read_text_file(code) if code is not None else None,
            active=active,
            json_args=read_json_file(args) if args is not None else None,
            initiator_type=initiator_type.value if initiator_type else None,
        )

    client = get_edge_functions_client()
    function = await client.update(request)
    print_message(f"Updated edge function with ID {function.id}")


# =============================================================================
# delete
# =============================================================================


@app.command()
def delete(
    function_id: int = typer.Argument(..., min=1, help="ID of the edge function"),
) -> None:
    """
    Delete an edge function.

    Examples:
        azioncli edge_functions delete 1337
    """
    run_command(_delete(function_id))


async def _delete(function_id: int) -> None:
    client = get_edge_functions_client()
    await client.delete(function_id)
    print_message(f"Edge function {function_id} was successfully deleted")
