"""
Authentication for fetch_request.
"""
from .auth_handler import (
    AuthHandler,
    NoAuthHandler,
    BearerAuthHandler,
    BasicAuthHandler,
    UrlCredentialsAuthHandler,
    create_auth_handler,
)
from .credentials import split_username_password, strip_credentials
from .encoding import encode_auth

__all__ = [
    "AuthHandler",
    "NoAuthHandler",
    "BearerAuthHandler",
    "BasicAuthHandler",
    "UrlCredentialsAuthHandler",
    "create_auth_handler",
    "split_username_password",
    "strip_credentials",
    "encode_auth",
]
