"""Bearer token authentication read from a token file.

The configuration's ``token`` key is a *path*, not the token itself. The
file is read on every invocation, so rotating the token only requires
rewriting the file. Surrounding whitespace (the trailing newline most
editors add) is stripped.
"""

from __future__ import annotations

from pathlib import Path

from ucli.auth.base import AuthPlugin, AuthResult
from ucli.exceptions import AuthError
from ucli.models import Configuration


class BearerAuthPlugin(AuthPlugin):
    """Authenticate via a Bearer token loaded from ``config.token``."""

    @property
    def auth_type(self) -> str:
        return "bearer"

    def applies(self, config: Configuration) -> bool:
        return bool(config.token)

    def authenticate(self, config: Configuration) -> AuthResult:
        """Read the token file and return an ``Authorization: Bearer`` header.

        Raises:
            AuthError: If the token file cannot be read. An unreadable token
                is fatal so a broken setup never sends anonymous requests.
        """
        assert config.token is not None  # applies() guarantees this
        path = Path(config.token).expanduser()
        try:
            token = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise AuthError(f"Error reading token file: {exc}") from exc
        return AuthResult(headers={"Authorization": f"Bearer {token}"}, auth_type=self.auth_type)
