"""
Edge Service Commands.

list, describe, create, update and delete for edge services, plus the
`resources` group for the files and scripts attached to a service.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import dotenv_values

from azioncli.api.dependencies import get_edge_services_client, get_service_resources_client
from azioncli.cli.printer import print_block, print_fields, print_message, print_table
from azioncli.cli.utils import (
    build_request,
    ensure_any,
    ensure_exclusive,
    list_options,
    read_text_file,
    request_from_file,
    run_command,
)
from azioncli.core.exceptions import ValidationError
from azioncli.schemas.edge_service import (
    CONTENT_TYPES,
    RESOURCE_TRIGGERS,
    CreateEdgeServiceRequest,
    CreateResourceRequest,
    EdgeService,
    ServiceResource,
    UpdateEdgeServiceRequest,
    UpdateResourceRequest,
    Variable,
)

app = typer.Typer(help="Manage edge services", no_args_is_help=True)
resources_app = typer.Typer(help="Manage the resources of an edge service", no_args_is_help=True)
app.add_typer(resources_app, name="resources")


class Trigger(str, Enum):
    install = "Install"
    reload = "Reload"
    uninstall = "Uninstall"


class ContentType(str, Enum):
    shellscript = "shellscript"
    text = "text"


SERVICE_COLUMNS = [
    ("ID", "id"),
    ("NAME", "name"),
]

SERVICE_DETAIL_COLUMNS = SERVICE_COLUMNS + [
    ("LAST EDITOR", "last_editor"),
    ("LAST MODIFIED", "updated_at"),
    ("ACTIVE", "active"),
    ("BOUND NODES", "bound_nodes"),
]

RESOURCE_COLUMNS = [
    ("ID", "id"),
    ("NAME", "name"),
]

RESOURCE_DETAIL_COLUMNS = RESOURCE_COLUMNS + [
    ("LAST EDITOR", "last_editor"),
    ("LAST MODIFIED", "updated_at"),
    ("TRIGGER", "type"),
    ("CONTENT TYPE", "content_type"),
]


def service_fields(service: EdgeService) -> list[tuple[str, object]]:
    return [
        ("ID", service.id),
        ("Name", service.name),
        ("Active", service.active),
        ("Updated at", service.updated_at),
        ("Last Editor", service.last_editor),
        ("Bound Nodes", service.bound_nodes),
        ("Permissions", ", ".join(service.permissions)),
    ]


def resource_fields(resource: ServiceResource) -> list[tuple[str, object]]:
    return [
        ("ID", resource.id),
        ("Name", resource.name),
        ("Trigger", resource.type),
        ("Content type", resource.content_type),
        ("Last Editor", resource.last_editor),
        ("Updated at", resource.updated_at),
    ]


def read_variables_file(path: Path) -> list[Variable]:
    """Read KEY=VALUE lines (dotenv syntax) into service variables."""
    try:
        values = dotenv_values(path)
    except OSError as e:
        raise ValidationError(f"Failed to read {path}: {e}") from e
    return [Variable(name=key, value=value or "") for key, value in values.items()]


# =============================================================================
# services
# =============================================================================


@app.command("list")
def list_services(
    page: Optional[int] = typer.Option(None, "--page", min=1, help="Page of results to show"),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, help="Maximum number of items to fetch"
    ),
    filter: str = typer.Option("", "--filter", help="Filter results by their name"),
    details: bool = typer.Option(False, "--details", help="Show more fields when listing"),
) -> None:
    """
    List the edge services of your account.

    Examples:
        azioncli edge_services list
        azioncli edge_services list --filter cache --details
    """
    run_command(_list_services(page, limit, filter, details))


async def _list_services(page: int | None, limit: int | None, filter: str, details: bool) -> None:
    options = list_options(page, limit, filter=filter)
    client = get_edge_services_client()
    services = await client.list(options)
    print_table(services, SERVICE_DETAIL_COLUMNS if details else SERVICE_COLUMNS)


@app.command()
def describe(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    with_variables: bool = typer.Option(
        False, "--with-variables", help="Also print the service variables"
    ),
) -> None:
    """
    Describe an edge service.

    Examples:
        azioncli edge_services describe 4321 --with-variables
    """
    run_command(_describe_service(service_id, with_variables))


async def _describe_service(service_id: int, with_variables: bool) -> None:
    client = get_edge_services_client()
    service = await client.get(service_id)

    print_fields(service_fields(service))
    if with_variables:
        if service.variables:
            print_block("Variables", "\n".join(f"  {v.name}={v.value}" for v in service.variables))
        else:
            print_message("Variables:")


@app.command()
def create(
    name: Optional[str] = typer.Option(None, "--name", help="Name of the edge service"),
    input_file: Optional[Path] = typer.Option(
        None, "--in", exists=True, dir_okay=False, help="Path to a JSON file with the full request"
    ),
) -> None:
    """
    Create a new edge service.

    Examples:
        azioncli edge_services create --name my-service
    """
    run_command(_create_service(name, input_file))


async def _create_service(name: str | None, input_file: Path | None) -> None:
    ensure_exclusive(input_file, name=name)
    if input_file is not None:
        request = request_from_file(CreateEdgeServiceRequest, input_file)
    else:
        if not name:
            raise ValidationError("--name is required (or use --in)")
        request = build_request(CreateEdgeServiceRequest, name=name)

    client = get_edge_services_client()
    service = await client.create(request)
    print_message(f"Created edge service with ID {service.id}")


@app.command()
def update(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    name: Optional[str] = typer.Option(None, "--name", help="New name"),
    active: Optional[bool] = typer.Option(
        None, "--active/--inactive", help="Activate or deactivate the service"
    ),
    variables_file: Optional[Path] = typer.Option(
        None,
        "--variables-file",
        exists=True,
        dir_okay=False,
        help="Path to a KEY=VALUE file that replaces the service variables",
    ),
) -> None:
    """
    Update an edge service. Only the given fields change.

    Examples:
        azioncli edge_services update 4321 --name renamed
        azioncli edge_services update 4321 --variables-file ./vars.env
    """
    run_command(_update_service(service_id, name, active, variables_file))


async def _update_service(
    service_id: int, name: str | None, active: bool | None, variables_file: Path | None
) -> None:
    ensure_any(name=name, active=active, variables_file=variables_file)
    request = build_request(
        UpdateEdgeServiceRequest,
        id=service_id,
        name=name,
        active=active,
        variables=read_variables_file(variables_file) if variables_file is not None else None,
    )

    client = get_edge_services_client()
    service = await client.update(request)
    print_message(f"Updated edge service with ID {service.id}")


@app.command()
def delete(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
) -> None:
    """
    Delete an edge service.

    Examples:
        azioncli edge_services delete 4321
    """
    run_command(_delete_service(service_id))


async def _delete_service(service_id: int) -> None:
    client = get_edge_services_client()
    await client.delete(service_id)
    print_message(f"Edge service {service_id} was successfully deleted")


# =============================================================================
# resources
# =============================================================================


def _resource_type(trigger: Trigger | None, content_type: ContentType | None) -> str | None:
    """Shell scripts need a trigger; text files must not have one."""
    if content_type is ContentType.text and trigger is not None:
        raise ValidationError("--trigger is only valid for shellscript resources")
    if content_type is ContentType.shellscript and trigger is None:
        raise ValidationError("--trigger is required for shellscript resources")
    return trigger.value if trigger else None


def _validate_resource_name(name: str | None) -> None:
    if name is not None and not name.startswith("/"):
        raise ValidationError("Resource name must be an absolute path, e.g. /etc/app/config")


def _parse_content_type(value: str) -> ContentType:
    """Accept the flag spelling (shellscript) or the API spelling (Shell Script)."""
    for key, api_value in CONTENT_TYPES.items():
        if value in (key, api_value):
            return ContentType(key)
    raise ValidationError(
        f"Unknown content type '{value}'. Use one of: {', '.join(CONTENT_TYPES)}"
    )


def _parse_trigger(value: str | None) -> Trigger | None:
    if value is None:
        return None
    try:
        return Trigger(value)
    except ValueError as e:
        raise ValidationError(
            f"Unknown trigger '{value}'. Use one of: {', '.join(RESOURCE_TRIGGERS)}"
        ) from e


@resources_app.command("list")
def list_resources(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    page: Optional[int] = typer.Option(None, "--page", min=1, help="Page of results to show"),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, help="Maximum number of items to fetch"
    ),
    filter: str = typer.Option("", "--filter", help="Filter results by their name"),
    details: bool = typer.Option(False, "--details", help="Show more fields when listing"),
) -> None:
    """
    List the resources of an edge service.

    Examples:
        azioncli edge_services resources list 4321 --details
    """
    run_command(_list_resources(service_id, page, limit, filter, details))


async def _list_resources(
    service_id: int, page: int | None, limit: int | None, filter: str, details: bool
) -> None:
    options = list_options(page, limit, filter=filter)
    client = get_service_resources_client()
    resources = await client.list(service_id, options)
    print_table(resources, RESOURCE_DETAIL_COLUMNS if details else RESOURCE_COLUMNS)


@resources_app.command("describe")
def describe_resource(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    resource_id: int = typer.Argument(..., min=1, help="ID of the resource"),
    with_content: bool = typer.Option(
        False, "--with-content", help="Also print the resource content"
    ),
) -> None:
    """
    Describe a resource of an edge service.

    Examples:
        azioncli edge_services resources describe 4321 99 --with-content
    """
    run_command(_describe_resource(service_id, resource_id, with_content))


async def _describe_resource(service_id: int, resource_id: int, with_content: bool) -> None:
    client = get_service_resources_client()
    resource = await client.get(service_id, resource_id)

    print_fields(resource_fields(resource))
    if with_content:
        print_block("Content", resource.content)


@resources_app.command("create")
def create_resource(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    name: Optional[str] = typer.Option(None, "--name", help="Absolute path of the resource"),
    trigger: Optional[Trigger] = typer.Option(
        None, "--trigger", help="When a shellscript resource runs"
    ),
    content_type: Optional[ContentType] = typer.Option(
        None, "--content-type", help="Kind of content"
    ),
    content_file: Optional[Path] = typer.Option(
        None, "--content-file", exists=True, dir_okay=False, help="Path to the content"
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--in", exists=True, dir_okay=False, help="Path to a JSON file with the full request"
    ),
) -> None:
    """
    Create a resource under an edge service.

    Examples:
        azioncli edge_services resources create 4321 --name /tmp/setup.sh \\
            --trigger Install --content-type shellscript --content-file ./setup.sh
    """
    run_command(
        _create_resource(service_id, name, trigger, content_type, content_file, input_file)
    )


async def _create_resource(
    service_id: int,
    name: str | None,
    trigger: Trigger | None,
    content_type: ContentType | None,
    content_file: Path | None,
    input_file: Path | None,
) -> None:
    ensure_exclusive(
        input_file,
        name=name,
        trigger=trigger,
        content_type=content_type,
        content_file=content_file,
    )

    if input_file is not None:
        request = request_from_file(CreateResourceRequest, input_file, service_id=service_id)
        content_type = _parse_content_type(request.content_type)
        _validate_resource_name(request.name)
        request.type = _resource_type(_parse_trigger(request.type), content_type)
        request.content_type = CONTENT_TYPES[content_type.value]
    else:
        if not name or content_type is None or content_file is None:
            raise ValidationError(
                "--name, --content-type and --content-file are required (or use --in)"
            )
        _validate_resource_name(name)
        request = build_request(
            CreateResourceRequest,
            service_id=service_id,
            name=name,
            type=_resource_type(trigger, content_type),
            content_type=CONTENT_TYPES[content_type.value],
            content=read_text_file(content_file),
        )

    client = get_service_resources_client()
    resource = await client.create(request)
    print_message(f"Created resource with ID {resource.id}")


@resources_app.command("update")
def update_resource(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    resource_id: int = typer.Argument(..., min=1, help="ID of the resource"),
    name: Optional[str] = typer.Option(None, "--name", help="New absolute path"),
    trigger: Optional[Trigger] = typer.Option(
        None, "--trigger", help="When a shellscript resource runs"
    ),
    content_type: Optional[ContentType] = typer.Option(
        None, "--content-type", help="Kind of content"
    ),
    content_file: Optional[Path] = typer.Option(
        None, "--content-file", exists=True, dir_okay=False, help="Path to the new content"
    ),
) -> None:
    """
    Update a resource of an edge service. Only the given fields change.

    Examples:
        azioncli edge_services resources update 4321 99 --content-file ./setup.sh
    """
    run_command(
        _update_resource(service_id, resource_id, name, trigger, content_type, content_file)
    )


async def _update_resource(
    service_id: int,
    resource_id: int,
    name: str | None,
    trigger: Trigger | None,
    content_type: ContentType | None,
    content_file: Path | None,
) -> None:
    ensure_any(name=name, trigger=trigger, content_type=content_type, content_file=content_file)
    _validate_resource_name(name)
    if content_type is not None:
        resource_type = _resource_type(trigger, content_type)
    else:
        resource_type = trigger.value if trigger else None

    request = build_request(
        UpdateResourceRequest,
        service_id=service_id,
        id=resource_id,
        name=name,
        type=resource_type,
        content_type=CONTENT_TYPES[content_type.value] if content_type else None,
        content=read_text_file(content_file) if content_file is not None else None,
    )

    client = get_service_resources_client()
    resource = await client.update(request)
    print_message(f"Updated resource with ID {resource.id}")


@resources_app.command("delete")
def delete_resource(
    service_id: int = typer.Argument(..., min=1, help="ID of the edge service"),
    resource_id: int = typer.Argument(..., min=1, help="ID of the resource"),
) -> None:
    """
    Delete a resource of an edge service.

    Examples:
        azioncli edge_services resources delete 4321 99
    """
    run_command(_delete_resource(service_id, resource_id))


async def _delete_resource(service_id: int, resource_id: int) -> None:
    client = get_service_resources_client()
    await client.delete(service_id, resource_id)
    print_message(f"Resource {resource_id} was successfully deleted")
