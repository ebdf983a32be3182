"""
Configuration for fetch_request.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

from .console import mask_sensitive, mask_url
from .errors import InvalidRequestError


@dataclass
class AuthDescriptor:
    """Credentials attached to a request.

    A non-empty ``bearer`` takes precedence over ``username``/``password``.
    Basic auth is only applied when both ``username`` and ``password`` are
    non-empty.
    """

    username: Optional[str] = None
    password: Optional[str] = None
    bearer: Optional[str] = None

    def __repr__(self) -> str:
        """Safe repr that masks sensitive values."""
        return (
            f"AuthDescriptor(username={self.username!r}, "
            f"password={mask_sensitive(self.password)!r}, "
            f"bearer={mask_sensitive(self.bearer)!r})"
        )


@dataclass
class RequestOptions:
    """Per-request options.

    ``body`` may hold any value or a ``Payload``. ``json`` is either a flag
    asking for ``body`` to be sent as JSON, or the value to send as JSON.
    """

    url: str
    headers: Optional[Dict[str, str]] = None
    auth: Optional[AuthDescriptor] = None
    body: Any = None
    json: Any = None
    # Content-Type last written into headers by build_request
    _content_type: Optional[str] = field(default=None, init=False, repr=False, compare=False)


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 30.0
    read: float = 30.0
    write: float = 30.0
    pool: float = 30.0


@dataclass
class ClientConfig:
    """Client configuration."""

    timeout: Union[TimeoutConfig, float, None] = None
    verify: bool = True
    headers: Dict[str, str] = field(default_factory=dict)
    verbose: bool = False


# Default values
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    timeout: TimeoutConfig
    verify: bool
    headers: Dict[str, str]
    verbose: bool


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        timeout = DEFAULT_TIMEOUT_SECONDS
    if isinstance(timeout, (int, float)):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout, pool=timeout)
    return timeout


def validate_url(url: str) -> None:
    """Validate that ``url`` is absolute, with a scheme and a host."""
    if not url:
        raise InvalidRequestError("url is required")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidRequestError(f"Invalid url: {mask_url(url)}") from e

    if not parsed.scheme or not parsed.netloc:
        raise InvalidRequestError(f"Invalid url: {mask_url(url)}")


def resolve_config(config: Optional[ClientConfig] = None) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    config = config or ClientConfig()

    return ResolvedConfig(
        timeout=normalize_timeout(config.timeout),
        verify=config.verify,
        headers=dict(config.headers),
        verbose=config.verbose,
    )
