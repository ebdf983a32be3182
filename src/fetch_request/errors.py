"""
Exceptions for fetch_request.
"""


class RequestError(Exception):
    """Base class for errors raised while preparing a request."""
    pass


class InvalidRequestError(RequestError):
    """Raised when the method or URL cannot form a valid request."""
    pass


class EncodingError(RequestError):
    """Raised when the request body cannot be serialized."""
    pass


class CredentialsNotFoundError(RequestError):
    """Raised when a URL carries no user-info segment."""
    pass
