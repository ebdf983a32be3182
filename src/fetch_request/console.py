"""
Console output and masking helpers for fetch_request.

Used by the clients to pretty-print requests and responses when
``ClientConfig.verbose`` is set, and by the loggers to keep credentials out
of log records.
"""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

console = Console(stderr=True)


def mask_sensitive(value: Optional[str], show_chars: int = 4) -> str:
    """
    Mask sensitive values for logging.

    Args:
        value: Value to mask
        show_chars: Number of characters to show before masking

    Returns:
        str: Masked value, ``"<none>"`` for empty input
    """
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


def mask_auth_header(value: Optional[str]) -> str:
    """Mask an Authorization header value, keeping the scheme visible."""
    if not value:
        return "<none>"
    scheme, sep, credentials = value.partition(" ")
    if not sep:
        return mask_sensitive(value)
    return f"{scheme} {mask_sensitive(credentials)}"


def mask_url(url: Optional[str]) -> str:
    """
    Mask the user-info of a URL.

    A username alone may carry a token, so the whole user-info is masked.

    Args:
        url: URL to mask

    Returns:
        str: URL with the user-info replaced by ``****``
    """
    if not url:
        return "<none>"

    try:
        parts = urlsplit(url)
    except ValueError:
        return re.sub(r"(://)[^/?#]*@", r"\1****@", url)

    if "@" not in parts.netloc:
        return url
    hostport = parts.netloc.rpartition("@")[2]
    return urlunsplit(parts._replace(netloc=f"****@{hostport}"))


def mask_headers(headers) -> dict:
    """Copy headers with credential-bearing values masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in ("authorization", "proxy-authorization", "x-api-key"):
            masked[key] = mask_auth_header(masked[key])
    return masked


def print_panel(content: str, title: Optional[str] = None) -> None:
    """Print content in a bordered box."""
    console.print(Panel(content, title=title))


def print_syntax_panel(
    code: str,
    lexer: str = "json",
    title: Optional[str] = None,
    theme: str = "monokai",
) -> None:
    """
    Print syntax-highlighted text in a panel.

    Args:
        code: Text to highlight
        lexer: Syntax lexer (e.g. 'json', 'text')
        title: Panel title (supports Rich markup)
        theme: Syntax theme
    """
    syntax = Syntax(code, lexer, theme=theme)
    console.print(Panel(syntax, title=title, expand=True))
