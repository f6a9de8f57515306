"""HTTP Basic authentication from ``username``/``password``.

The pair is joined as ``username:password``, Base64-encoded, and sent as an
``Authorization: Basic <encoded>`` header per :rfc:`7617`. Both values must
be non-empty.
"""

from __future__ import annotations

import base64

from ucli.auth.base import AuthPlugin, AuthResult
from ucli.models import Configuration


class BasicAuthPlugin(AuthPlugin):
    """Authenticate via HTTP Basic credentials from the configuration."""

    @property
    def auth_type(self) -> str:
        return "basic"

    def applies(self, config: Configuration) -> bool:
        return bool(config.username) and bool(config.password)

    def authenticate(self, config: Configuration) -> AuthResult:
        raw = f"{config.username}:{config.password}"
        encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
        return AuthResult(headers={"Authorization": f"Basic {encoded}"}, auth_type=self.auth_type)
