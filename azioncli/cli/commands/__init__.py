"""
CLI Commands.

Organized by resource family.
"""

from azioncli.cli.commands.edge_functions import app as edge_functions_app
from azioncli.cli.commands.edge_services import app as edge_services_app

__all__ = [
    "edge_functions_app",
    "edge_services_app",
]
