"""
Module-level verbs backed by the default client.
"""
from .config import RequestOptions
from .factory import get_default_client
from .types import RequestResult


def get(options: RequestOptions) -> RequestResult:
    return get_default_client().get(options)


def post(options: RequestOptions) -> RequestResult:
    return get_default_client().post(options)


def put(options: RequestOptions) -> RequestResult:
    return get_default_client().put(options)


def delete(options: RequestOptions) -> RequestResult:
    return get_default_client().delete(options)


def new_request(url: str) -> RequestResult:
    """GET ``url`` with no headers, auth or body."""
    return get(RequestOptions(url=url))
