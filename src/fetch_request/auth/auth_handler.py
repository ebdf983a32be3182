"""
Auth handler utilities for fetch_request.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..config import AuthDescriptor
from ..console import mask_auth_header, mask_sensitive, mask_url
from ..errors import CredentialsNotFoundError
from .credentials import split_username_password
from .encoding import encode_auth

logger = logging.getLogger("fetch_request.auth_handler")
LOG_PREFIX = "[AUTH]"


class AuthHandler(ABC):
    """Auth handler interface."""

    @abstractmethod
    def get_header(self, url: str) -> Optional[Dict[str, str]]:
        """Get auth header for a request to ``url``."""
        ...


class NoAuthHandler(AuthHandler):
    """Attaches no credentials."""

    def get_header(self, url: str) -> Optional[Dict[str, str]]:
        return encode_auth("none") or None


class BearerAuthHandler(AuthHandler):
    """Bearer token auth handler."""

    def __init__(self, token: str):
        self._token = token

    def get_header(self, url: str) -> Optional[Dict[str, str]]:
        """Get bearer auth header."""
        if not self._token:
            return None
        header = encode_auth("bearer", token=self._token)
        logger.debug(
            f"{LOG_PREFIX} BearerAuthHandler.get_header: "
            f"Authorization={mask_auth_header(header['Authorization'])}"
        )
        return header


class BasicAuthHandler(AuthHandler):
    """Basic auth handler. Needs both username and password."""

    def __init__(self, username: Optional[str], password: Optional[str]):
        self._username = username
        self._password = password

    def get_header(self, url: str) -> Optional[Dict[str, str]]:
        """Get basic auth header."""
        if not self._username or not self._password:
            return None
        header = encode_auth("basic", username=self._username, password=self._password)
        logger.debug(
            f"{LOG_PREFIX} BasicAuthHandler.get_header: username={self._username}, "
            f"password={mask_sensitive(self._password)}"
        )
        return header


class UrlCredentialsAuthHandler(AuthHandler):
    """Basic auth from the user-info embedded in the request URL."""

    def get_header(self, url: str) -> Optional[Dict[str, str]]:
        """Get basic auth header from URL credentials, if any."""
        try:
            username, password = split_username_password(url)
        except CredentialsNotFoundError:
            logger.debug(f"{LOG_PREFIX} UrlCredentialsAuthHandler: no credentials in {mask_url(url)}")
            return None
        return BasicAuthHandler(username, password).get_header(url)


def create_auth_handler(auth: Optional[AuthDescriptor]) -> AuthHandler:
    """Create auth handler for a request.

    An explicit descriptor resolves to bearer, then basic, then nothing. With
    no descriptor, credentials are taken from the request URL.
    """
    if auth is None:
        logger.debug(f"{LOG_PREFIX} create_auth_handler: no descriptor, using URL credentials")
        return UrlCredentialsAuthHandler()

    logger.debug(f"{LOG_PREFIX} create_auth_handler: {auth!r}")

    if auth.bearer:
        return BearerAuthHandler(auth.bearer)
    if auth.username and auth.password:
        return BasicAuthHandler(auth.username, auth.password)
    return NoAuthHandler()
