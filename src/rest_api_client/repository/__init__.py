from .auth_repository import AuthRepository, RestAuthRepository, get_auth_repository

__all__ = ["AuthRepository", "RestAuthRepository", "get_auth_repository"]
