"""
CLI Test Fixtures.

Commands close their API clients when they finish, so the mock-backed
clients are registered again before every invocation.
"""

import pytest
from typer.testing import CliRunner

from azioncli.api.client import set_api_client
from azioncli.api.dependencies import EDGE_FUNCTIONS_API, EDGE_SERVICES_API
from azioncli.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli(runner, mock_server):
    """Invoke the CLI against the mock server."""

    def invoke(*args: str):
        set_api_client(EDGE_FUNCTIONS_API, mock_server.client("https://api.test"))
        set_api_client(EDGE_SERVICES_API, mock_server.client("https://api.test/edge_services"))
        return runner.invoke(app, list(args))

    return invoke
