"""Authentication for outgoing requests.

Two strategies are supported, chosen from the configuration in priority
order:

1. **Bearer** -- ``token`` names a file whose trimmed contents become an
   ``Authorization: Bearer <token>`` header.
2. **Basic** -- ``username`` and ``password`` are both set and become an
   ``Authorization: Basic <base64>`` header.

Without either, requests are sent unauthenticated.

Typical usage::

    from ucli.auth import create_default_manager

    manager = create_default_manager()
    auth_result = manager.authenticate(config)
    # auth_result.headers is ready to merge into the request headers.
"""

from ucli.auth.base import AuthPlugin, AuthResult
from ucli.auth.manager import AuthManager, create_default_manager

__all__ = [
    "AuthPlugin",
    "AuthResult",
    "AuthManager",
    "create_default_manager",
]
