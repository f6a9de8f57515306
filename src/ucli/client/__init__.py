"""HTTP client module for ucli.

Provides :class:`SyncClient`, a single-use blocking client that wraps
:mod:`httpx` with auth and configured-header injection, and the response
rendering helpers in :mod:`ucli.client.response`.

Example::

    from ucli.client import SyncClient

    with SyncClient(config, auth_manager=manager) as client:
        resp = client.request("GET", "/users", params={"page": "2"})
"""

from ucli.client.sync_client import SyncClient

__all__ = ["SyncClient"]
