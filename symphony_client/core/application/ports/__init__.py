"""
Ports - Interfaces for external systems.

Ports define how the application layer interacts with the outside world.
They are implemented by adapters in the adapters layer.
"""

from .api_executor import ApiExecutor
from .authenticator import Authenticator
from .pod_gateway import PodGateway
from .remote_call import RemoteCall, RemoteOperation, operation_name

__all__ = [
    "ApiExecutor",
    "Authenticator",
    "PodGateway",
    "RemoteCall",
    "RemoteOperation",
    "operation_name",
]
