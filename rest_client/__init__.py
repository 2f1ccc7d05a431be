"""
REST client SDK.

Resolves a logical resource name to a base URL through a pluggable config
provider and exposes thin GET/POST/PUT/PATCH/DELETE helpers on top of httpx.
"""

from rest_client.client import RequestModifier, RestClient, query_parameter_request_modifier
from rest_client.config import (
    CONFIG,
    SERVICE_TYPE,
    ConfigProvider,
    ConfigRegistry,
    EnvConfigProvider,
    StaticConfigProvider,
)
from rest_client.errors import (
    AlreadyInitializedError,
    InvalidInputKindError,
    RequestConstructionError,
    RestClientError,
    SerializationError,
    ServiceResolutionError,
    TransportError,
)
from rest_client.query import struct_to_query_params
from rest_client.settings import Settings

__all__ = [
    "CONFIG",
    "SERVICE_TYPE",
    "AlreadyInitializedError",
    "ConfigProvider",
    "ConfigRegistry",
    "EnvConfigProvider",
    "InvalidInputKindError",
    "RequestConstructionError",
    "RequestModifier",
    "RestClient",
    "RestClientError",
    "SerializationError",
    "ServiceResolutionError",
    "Settings",
    "StaticConfigProvider",
    "TransportError",
    "query_parameter_request_modifier",
    "struct_to_query_params",
]
