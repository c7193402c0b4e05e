"""
API Clients.

HTTP transport shared by all resources, plus one typed client per
resource family.
"""

from azioncli.api.client import APIClient, classify_response
from azioncli.api.edge_functions import EdgeFunctionsClient
from azioncli.api.edge_services import EdgeServicesClient, ServiceResourcesClient

__all__ = [
    "APIClient",
    "EdgeFunctionsClient",
    "EdgeServicesClient",
    "ServiceResourcesClient",
    "classify_response",
]
