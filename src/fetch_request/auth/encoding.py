import base64
from typing import Any, Dict


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_auth(auth_type: str, **kwargs: Any) -> Dict[str, str]:
    """
    Encodes authentication credentials into HTTP headers based on the auth type.

    Args:
        auth_type: 'basic', 'bearer' or 'none'.
        **kwargs: credentials: username, password, token.

    Returns:
        A dictionary containing the HTTP headers.
    """
    auth_type = auth_type.lower()

    username = kwargs.get("username")
    password = kwargs.get("password")
    token = kwargs.get("token")

    # RFC 7617: Basic <base64(username:password)>
    if auth_type == "basic":
        if not username or not password:
            raise ValueError("Basic auth requires username and password")
        return {"Authorization": f"Basic {_base64_encode(f'{username}:{password}')}"}

    # RFC 6750: Bearer <token>
    if auth_type == "bearer":
        if not token:
            raise ValueError("bearer requires token")
        return {"Authorization": f"Bearer {token}"}

    if auth_type == "none":
        return {}

    raise ValueError(f"Unsupported auth type: {auth_type}")
