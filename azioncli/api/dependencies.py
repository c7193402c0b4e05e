"""
Client Dependencies.

Factories the CLI commands call to obtain resource clients. Each one
wraps the module-level APIClient for its API, so tests can register a
client with a mock transport through set_api_client().
"""

from azioncli.api.client import get_api_client
from azioncli.api.edge_functions import EdgeFunctionsClient
from azioncli.api.edge_services import EdgeServicesClient, ServiceResourcesClient

EDGE_FUNCTIONS_API = "edge_functions"
EDGE_SERVICES_API = "edge_services"


def get_edge_functions_client() -> EdgeFunctionsClient:
    return EdgeFunctionsClient(get_api_client(EDGE_FUNCTIONS_API))


def get_edge_services_client() -> EdgeServicesClient:
    return EdgeServicesClient(get_api_client(EDGE_SERVICES_API))


def get_service_resources_client() -> ServiceResourcesClient:
    return ServiceResourcesClient(get_api_client(EDGE_SERVICES_API))
