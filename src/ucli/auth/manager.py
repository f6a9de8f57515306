"""Auth manager -- ordered registry of authentication strategies.

The :class:`AuthManager` holds strategies in registration order and
:meth:`~AuthManager.authenticate` returns the result of the first one whose
:meth:`~ucli.auth.base.AuthPlugin.applies` check passes. The default order
makes a configured token file win over basic credentials.

See Also:
    :class:`~ucli.client.sync_client.SyncClient` -- consumes the
    :class:`~ucli.auth.base.AuthResult` produced here.
"""

from __future__ import annotations

from ucli.auth.base import AuthPlugin, AuthResult
from ucli.models import Configuration


class AuthManager:
    """Registry and dispatcher for authentication strategies.

    Example::

        manager = AuthManager()
        manager.register(BearerAuthPlugin())
        manager.register(BasicAuthPlugin())
        result = manager.authenticate(config)
    """

    def __init__(self) -> None:
        self._plugins: list[AuthPlugin] = []

    def register(self, plugin: AuthPlugin) -> None:
        """Append *plugin*; earlier registrations take priority."""
        self._plugins.append(plugin)

    def authenticate(self, config: Configuration) -> AuthResult:
        """Authenticate with the first strategy that applies to *config*.

        Returns:
            The strategy's :class:`~ucli.auth.base.AuthResult`, or an empty
            one when no strategy applies.

        Raises:
            AuthError: If the selected strategy cannot load its credentials.
        """
        for plugin in self._plugins:
            if plugin.applies(config):
                return plugin.authenticate(config)
        return AuthResult()


def create_default_manager() -> AuthManager:
    """Create an :class:`AuthManager` with the bearer then basic strategies."""
    from ucli.auth.basic import BasicAuthPlugin
    from ucli.auth.bearer import BearerAuthPlugin

    manager = AuthManager()
    manager.register(BearerAuthPlugin())
    manager.register(BasicAuthPlugin())
    return manager
