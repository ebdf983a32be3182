"""
Base HTTP clients using httpx.
"""
import json
import logging
from typing import Any, Optional

import httpx

from ..config import ClientConfig, RequestOptions, ResolvedConfig, resolve_config
from ..console import console, mask_headers, mask_url, print_panel, print_syntax_panel
from ..errors import RequestError
from ..types import BODYLESS_METHODS, CONTENT_TYPE_JSON, HttpMethod, RequestResult
from .request_builder import build_request, build_timeout

logger = logging.getLogger("fetch_request.base_client")


def _format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if not body:
        return ""
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except ValueError:
            return text
    return str(body)


def discard_body(method: HttpMethod, options: RequestOptions) -> None:
    """Drop any request entity for methods that must not send one.

    RFC 2616 section 4.3: a message-body MUST NOT be included if the method
    does not allow an entity-body.
    """
    if str(method).upper() in BODYLESS_METHODS:
        options.body = None
        options.json = None


class _BaseClient:
    """State and diagnostics shared by the sync and async clients."""

    _config: ResolvedConfig
    _closed: bool

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def _prepare(self, method: HttpMethod, options: RequestOptions) -> httpx.Request:
        if self._closed:
            raise RuntimeError("Client has been closed")

        discard_body(method, options)
        return build_request(
            method,
            options,
            timeout=self._config.timeout,
            default_headers=self._config.headers,
        )

    def _print_request(self, request: httpx.Request) -> None:
        if not self._config.verbose:
            return
        request_info = f"[bold cyan]{request.method}[/bold cyan] {mask_url(str(request.url))}"
        print_panel(request_info, title="[bold blue]Request[/bold blue]")
        console.print("[bold]Headers:[/bold]", mask_headers(request.headers))
        if request.content:
            lexer = "json" if request.headers.get("content-type") == CONTENT_TYPE_JSON else "text"
            print_syntax_panel(
                _format_body(request.content), lexer=lexer, title="[bold]Request Body[/bold]"
            )

    def _print_response(self, response: httpx.Response, body: Optional[bytes]) -> None:
        if not self._config.verbose:
            return
        url = mask_url(str(response.request.url))
        status_color = "green" if 200 <= response.status_code < 300 else "red"
        response_info = (
            f"[bold {status_color}]{response.status_code}[/bold {status_color}] "
            f"{response.reason_phrase or ''}"
        )
        print_panel(response_info, title=f"[bold blue]Response[/bold blue] ({url})")
        console.print("[bold]Headers:[/bold]", mask_headers(response.headers))
        if body:
            print_syntax_panel(
                _format_body(body), lexer="json", title=f"[bold]Response Body[/bold] (URL: {url})"
            )


class RequestClient(_BaseClient):
    """Synchronous HTTP client.

    Every verb returns a ``RequestResult`` that unpacks as
    ``(response, body, error)``. Errors raised while preparing or sending the
    request are returned in ``error``, never raised.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.Client] = None,
    ):
        self._config = resolve_config(config)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=build_timeout(self._config.timeout),
                verify=self._config.verify,
            )
        self._closed = False

    def request(self, method: HttpMethod, options: RequestOptions) -> RequestResult:
        """Make a generic HTTP request."""
        try:
            request = self._prepare(method, options)
        except RequestError as e:
            logger.warning(f"RequestClient.request: {method} {mask_url(options.url)} rejected: {e}")
            return RequestResult(None, None, e)

        self._print_request(request)

        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.warning(f"RequestClient.request: {request.method} {request.url} failed: {e!r}")
            return RequestResult(None, None, e)

        try:
            body = response.read()
        except httpx.HTTPError as e:
            logger.warning(f"RequestClient.request: reading {request.url} failed: {e!r}")
            return RequestResult(response, None, e)
        finally:
            response.close()

        logger.debug(
            f"RequestClient.request: {request.method} {request.url} -> "
            f"{response.status_code} ({len(body)} bytes)"
        )
        self._print_response(response, body)
        return RequestResult(response, body, None)

    def get(self, options: RequestOptions) -> RequestResult:
        """GET request. Any body is discarded."""
        return self.request("GET", options)

    def post(self, options: RequestOptions) -> RequestResult:
        """POST request."""
        return self.request("POST", options)

    def put(self, options: RequestOptions) -> RequestResult:
        """PUT request."""
        return self.request("PUT", options)

    def delete(self, options: RequestOptions) -> RequestResult:
        """DELETE request. Any body is discarded."""
        return self.request("DELETE", options)

    def close(self) -> None:
        """Close the client."""
        self._closed = True
        self._client.close()

    def __enter__(self) -> "RequestClient":
        """Enter sync context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit sync context manager."""
        self.close()


class AsyncRequestClient(_BaseClient):
    """Asynchronous HTTP client. Mirrors ``RequestClient``."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = resolve_config(config)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(
                timeout=build_timeout(self._config.timeout),
                verify=self._config.verify,
            )
        self._closed = False

    async def request(self, method: HttpMethod, options: RequestOptions) -> RequestResult:
        """Make a generic HTTP request."""
        try:
            request = self._prepare(method, options)
        except RequestError as e:
            logger.warning(f"AsyncRequestClient.request: {method} {mask_url(options.url)} rejected: {e}")
            return RequestResult(None, None, e)

        self._print_request(request)

        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.warning(f"AsyncRequestClient.request: {request.method} {request.url} failed: {e!r}")
            return RequestResult(None, None, e)

        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            logger.warning(f"AsyncRequestClient.request: reading {request.url} failed: {e!r}")
            return RequestResult(response, None, e)
        finally:
            await response.aclose()

        self._print_response(response, body)
        return RequestResult(response, body, None)

    async def get(self, options: RequestOptions) -> RequestResult:
        """GET request. Any body is discarded."""
        return await self.request("GET", options)

    async def post(self, options: RequestOptions) -> RequestResult:
        """POST request."""
        return await self.request("POST", options)

    async def put(self, options: RequestOptions) -> RequestResult:
        """PUT request."""
        return await self.request("PUT", options)

    async def delete(self, options: RequestOptions) -> RequestResult:
        """DELETE request. Any body is discarded."""
        return await self.request("DELETE", options)

    async def close(self) -> None:
        """Close the client."""
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncRequestClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()
