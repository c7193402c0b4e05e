"""
Azion CLI.

Entry point for the azioncli command.

Usage:
    azioncli --help                                   # Show help
    azioncli version                                  # Show the CLI version

    # Edge functions
    azioncli edge_functions list --details
    azioncli edge_functions describe 1337 --with-code
    azioncli edge_functions create --name hello --code ./hello.js
    azioncli edge_functions update 1337 --inactive
    azioncli edge_functions delete 1337

    # Edge services and their resources
    azioncli edge_services list --filter cache
    azioncli edge_services describe 4321 --with-variables
    azioncli edge_services resources list 4321

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message

Environment:
    AZIONCLI_TOKEN    API token sent with every request
"""

import typer

from azioncli.cli.commands import edge_functions_app, edge_services_app
from azioncli.cli.printer import err_console, print_error, print_message
from azioncli.core.config import get_app_config
from azioncli.core.exceptions import ApplicationError
from azioncli.core.logging import setup_logging

app = typer.Typer(
    name="azioncli",
    help="Azion CLI - manage edge functions and edge services.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(edge_functions_app, name="edge_functions")
app.add_typer(edge_services_app, name="edge_services")


@app.command()
def version() -> None:
    """
    Show the CLI version.
    """
    try:
        application = get_app_config().application
    except ApplicationError as e:
        print_error(e.message)
        raise typer.Exit(1) from e
    print_message(f"{application.name} {application.version}")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Azion CLI.

    Create, inspect, update and delete edge functions, edge services and
    edge service resources. Set AZIONCLI_TOKEN before running commands
    that talk to the API.
    """
    try:
        if debug:
            setup_logging(level="DEBUG", format_type="console")
            err_console.print("[dim]Debug mode enabled[/dim]")
        elif verbose:
            setup_logging(level="INFO", format_type="console")
        else:
            setup_logging()
    except ApplicationError as e:
        print_error(e.message)
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
