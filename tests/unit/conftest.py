"""
Unit Test Fixtures.

Sample API payloads shared by the client and command tests.
"""

from typing import Any

import pytest


@pytest.fixture
def function_payload() -> dict[str, Any]:
    """An edge function record as served by the API."""
    return {
        "id": 1337,
        "name": "SUUPA_FUNCTION",
        "language": "javascript",
        "code": 'async function handleRequest(request) {return new Response("Hello World!",{status:200})}',
        "json_args": {"a": 1, "b": 2},
        "function_to_run": "",
        "initiator_type": "edge_application",
        "active": True,
        "last_editor": "testando@azion.com",
        "modified": "2022-01-26T12:31:09.865515Z",
        "reference_count": 0,
    }


@pytest.fixture
def service_payload() -> dict[str, Any]:
    """An edge service record as served by the API."""
    return {
        "id": 4321,
        "name": "cache-warmer",
        "active": True,
        "updated_at": "2022-02-01T10:00:00Z",
        "last_editor": "ops@azion.com",
        "bound_nodes": 3,
        "permissions": ["read", "write"],
        "variables": [
            {"name": "REGION", "value": "sa-east"},
            {"name": "DEBUG", "value": "0"},
        ],
    }


@pytest.fixture
def resource_payload() -> dict[str, Any]:
    """An edge service resource as served by the API."""
    return {
        "id": 99,
        "name": "/opt/warmer/setup.sh",
        "type": "Install",
        "content_type": "Shell Script",
        "content": "#!/bin/sh\necho ready\n",
        "last_editor": "ops@azion.com",
        "updated_at": "2022-02-02T08:30:00Z",
    }
