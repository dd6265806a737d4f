from .api_client import ApiClient, get_api_client

__all__ = ["ApiClient", "get_api_client"]
