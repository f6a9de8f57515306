"""Abstract base class for authentication strategies.

- :class:`AuthResult` -- the HTTP headers a strategy produces.
- :class:`AuthPlugin` -- the interface every strategy implements.

A strategy decides for itself whether the configuration asks for it
(:meth:`AuthPlugin.applies`), and :class:`~ucli.auth.manager.AuthManager`
asks each registered strategy in priority order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ucli.models import Configuration


class AuthResult:
    """Container for authentication headers to inject into a request.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Bearer ..."}``).
        auth_type: Identifier of the strategy that produced the headers, or
            ``None`` when the request goes out unauthenticated.

    Example::

        result = AuthResult(headers={"Authorization": "Bearer tok123"}, auth_type="bearer")
        assert result.headers["Authorization"] == "Bearer tok123"
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        auth_type: str | None = None,
    ):
        self.headers = headers or {}
        self.auth_type = auth_type


class AuthPlugin(ABC):
    """Abstract base class for authentication strategies.

    Subclasses provide an :attr:`auth_type` identifier, an :meth:`applies`
    check against the configuration, and :meth:`authenticate`, which builds
    the headers.
    """

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the unique identifier of this strategy (``"bearer"``, ``"basic"``)."""
        ...

    @abstractmethod
    def applies(self, config: Configuration) -> bool:
        """Return True if *config* carries the settings this strategy needs."""
        ...

    @abstractmethod
    def authenticate(self, config: Configuration) -> AuthResult:
        """Resolve credentials from *config* and return the auth headers.

        Raises:
            AuthError: If the configured credential material cannot be read.
        """
        ...
