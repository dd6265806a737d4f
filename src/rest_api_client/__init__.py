'''
REST API client: async HTTP verbs with JSON/form bodies, a unified error
taxonomy and Bearer-token authentication via a client-credentials exchange.
'''
from rest_api_client.api_clients import ApiClient, get_api_client
from rest_api_client.errors import (
    ApiError,
    ApiStatusError,
    ApiTransportError,
    RequestSerializationError,
    ResponseDeserializationError,
)
from rest_api_client.models import AuthToken
from rest_api_client.repository import (
    AuthRepository,
    RestAuthRepository,
    get_auth_repository,
)
from rest_api_client.services import AuthService, get_auth_service
from rest_api_client.utils.logger import logger

# silent until the application opts in via configure_logging or logger.enable
logger.disable("rest_api_client")

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiStatusError",
    "ApiTransportError",
    "AuthRepository",
    "AuthService",
    "AuthToken",
    "RequestSerializationError",
    "ResponseDeserializationError",
    "RestAuthRepository",
    "get_api_client",
    "get_auth_repository",
    "get_auth_service",
]
