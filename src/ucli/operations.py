"""Route an operation verb to an HTTP request and print the result.

Verbs are grouped into four actions::

    get, list, show         -> RETRIEVE  GET     flags as query string
    create, search, find    -> SUBMIT    POST    flags as JSON body
    update, set             -> REPLACE   PUT     flags as JSON body
    delete, drop            -> REMOVE    DELETE  flags ignored

The resource path is joined into the endpoint appended to the configured
base URL: ``ucli show users 42`` requests ``<url>/users/42``.
"""

from __future__ import annotations

from typing import Optional, Sequence

import httpx

from ucli.auth import create_default_manager
from ucli.client import SyncClient
from ucli.client.response import render_response
from ucli.exceptions import ConfigError
from ucli.models import Action, Configuration, FlagValue
from ucli.output import get_output
from ucli.parser.flags import flags_to_plain

# ---------------------------------------------------------------------------
# Operation verb -> action
# ---------------------------------------------------------------------------

VERB_TO_ACTION: dict[str, Action] = {
    "get": Action.RETRIEVE,
    "list": Action.RETRIEVE,
    "show": Action.RETRIEVE,
    "create": Action.SUBMIT,
    "search": Action.SUBMIT,
    "find": Action.SUBMIT,
    "update": Action.REPLACE,
    "set": Action.REPLACE,
    "delete": Action.REMOVE,
    "drop": Action.REMOVE,
}


def resolve_action(operation: str) -> Optional[Action]:
    """Return the :class:`~ucli.models.Action` for *operation*, or ``None`` if unknown.

    Matching is exact: ``GET`` is not an alias of ``get``.
    """
    return VERB_TO_ACTION.get(operation)


def build_endpoint(resources: Sequence[str]) -> str:
    """Join resource segments into an endpoint path (``[]`` gives ``"/"``)."""
    return "/" + "/".join(resources)


def handle_operation(
    operation: str,
    resources: Sequence[str],
    flags: dict[str, FlagValue],
    config: Configuration,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """Perform the request described by the command line and print the response.

    An unknown verb prints a message to stdout and sends nothing; it is not
    an error.

    Args:
        operation: The operation verb (``get``, ``create``, ...).
        resources: Resource path segments.
        flags: The parsed flag mapping.
        config: The loaded configuration.
        transport: Optional httpx transport override, used by tests.

    Raises:
        ConfigError: If no base ``url`` is configured.
        AuthError: If the configured token file cannot be read.
        ConnectionError_: On network failures.
    """
    output = get_output()
    endpoint = build_endpoint(resources)
    output.debug(f"Endpoint: {endpoint}")

    action = resolve_action(operation)
    if action is None:
        output.print_data(f"Unknown operation: {operation}")
        return

    if not config.url:
        raise ConfigError("No 'url' configured; set the base URL in the configuration file")

    params: Optional[dict[str, str]] = None
    json_body = None
    if action.sends_query:
        params = {key: value.as_query() for key, value in flags.items()}
    elif action.sends_body:
        json_body = flags_to_plain(flags)

    with SyncClient(config, auth_manager=create_default_manager(), transport=transport) as client:
        response = client.request(
            action.method.value, endpoint, params=params, json_body=json_body,
        )
        render_response(response)
