"""Synchronous, single-use HTTP client with auth and header injection.

This module provides :class:`SyncClient`, which wraps :class:`httpx.Client`
and layers on:

- **Auth injection** -- the :class:`~ucli.auth.base.AuthResult` resolved on
  entry is merged into the request headers.
- **Configured headers** -- every ``headers`` entry from the configuration
  is applied last, so it overrides anything set before it, including the
  generated ``Authorization`` header.
- **Error mapping** -- transport failures, invalid URLs, and body read
  errors surface as :class:`~ucli.exceptions.ConnectionError_`.
- **Debug trace** -- URL, body, and headers are reported through
  :func:`~ucli.output.debug`.

Requests are sent once, without a timeout, and redirects are followed.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from ucli.auth.base import AuthResult
from ucli.auth.manager import AuthManager
from ucli.exceptions import ConnectionError_, UsageError
from ucli.models import Configuration
from ucli.output import get_output

_JSON_CONTENT_TYPE = "application/json"


class SyncClient:
    """Single-use HTTP client for one ucli invocation.

    Must be used as a context manager: the underlying connection pool is
    opened on entry and closed on exit, after the response body has been
    read in full.

    Args:
        config: The loaded configuration (base URL, auth, headers).
        auth_manager: Optional manager that resolves credentials on entry.
            When ``None``, no auth header is generated.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests.

    Example::

        with SyncClient(config, auth_manager=am) as client:
            response = client.request("DELETE", "/users/42")
    """

    def __init__(
        self,
        config: Configuration,
        auth_manager: Optional[AuthManager] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._auth_manager = auth_manager
        self._transport = transport
        self._auth_result: Optional[AuthResult] = None
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        if self._auth_manager is not None:
            self._auth_result = self._auth_manager.authenticate(self._config)
        self._client = httpx.Client(
            transport=self._transport, timeout=None, follow_redirects=True,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request method
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, str]] = None,
        json_body: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request to ``config.url + endpoint`` and read the whole body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            endpoint: Path appended verbatim to the configured base URL.
            params: Query parameters, merged with any query in the base URL.
            json_body: Body to send as compact JSON with
                ``Content-Type: application/json``. ``None`` sends no body.

        Returns:
            The :class:`httpx.Response`, already read.

        Raises:
            UsageError: If the body contains values JSON cannot represent.
            ConnectionError_: On invalid URLs and network or read failures.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"
        output = get_output()

        url = f"{self._config.url}{endpoint}"
        output.debug(f"Performing {method} on URL: {url}")

        headers = httpx.Headers()
        content: Optional[bytes] = None
        if json_body is not None:
            content = self._encode_body(json_body)
            output.debug(f"Data sent in request: {content.decode('utf-8')}")
            headers["Content-Type"] = _JSON_CONTENT_TYPE

        self._inject_auth(headers)
        self._apply_configured_headers(headers)

        try:
            request = self._client.build_request(
                method, url, params=params or None, headers=headers, content=content,
            )
            output.debug(f"Request headers: {dict(request.headers)}")
            if params:
                output.debug(f"Query parameters: {request.url.query.decode('ascii')}")
            return self._client.send(request)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise ConnectionError_(f"{method} {url} failed: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _encode_body(body: dict[str, Any]) -> bytes:
        try:
            text = json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            raise UsageError(f"Error marshaling JSON: {exc}") from exc
        return text.encode("utf-8")

    def _inject_auth(self, headers: httpx.Headers) -> None:
        """Set the generated auth headers, if any."""
        if self._auth_result is None or not self._auth_result.headers:
            return
        for name, value in self._auth_result.headers.items():
            headers[name] = value
        get_output().debug(f"Set {self._auth_result.auth_type} credentials in Authorization header")

    def _apply_configured_headers(self, headers: httpx.Headers) -> None:
        """Apply configured headers, overriding same-named headers set earlier."""
        configured = self._config.headers
        if not configured:
            return
        output = get_output()
        for name, value in configured.items():
            if name.lower() == "authorization" and "Authorization" in headers:
                output.warning(
                    f"Configured header '{name}' replaces the generated Authorization header"
                )
            headers[name] = value
        output.debug(f"Set additional headers from configuration: {configured}")
