"""Render an :class:`httpx.Response` for the user.

A non-empty body is printed verbatim to stdout, whatever the status code:
the server's own words are the most useful thing to show. An empty body
gets a one-line explanation of the status instead, see
:func:`interpret_status`.
"""

from __future__ import annotations

import httpx

from ucli.output import get_output

_STATUS_MESSAGES: dict[int, str] = {
    200: "Operation completed successfully.",
    201: "Resource created successfully.",
    202: "Request accepted, processing in progress.",
    204: "Operation completed successfully, no content to display.",
    301: "The resource has been moved permanently to a new URL.",
    302: "The resource is temporarily located at a different URL.",
    304: "The resource has not been modified since the last request.",
    400: "The request was invalid. Please check the input data.",
    401: "Authorization required or token is invalid.",
    403: "You do not have permission to access this resource.",
    404: "The resource could not be found.",
    405: "The HTTP method used is not allowed for this resource.",
    408: "The server timed out waiting for the request.",
    409: "There was a conflict with the request, such as duplicate data.",
    410: "The resource is no longer available.",
    413: "The request payload is too large to be processed.",
    415: "The media type of the request is not supported.",
    429: "Too many requests have been made in a short period. Please try again later.",
    500: "The server encountered an error.",
    502: "The server received an invalid response from an upstream server.",
    503: "The server is temporarily unavailable. Please try again later.",
    504: "The server did not receive a timely response from an upstream server.",
}


def interpret_status(status_code: int, reason_phrase: str = "") -> str:
    """Return a human-readable message for an HTTP status.

    Args:
        status_code: Numeric HTTP status.
        reason_phrase: Reason phrase sent by the server, only shown for
            statuses without a dedicated message.

    Returns:
        ``"[<code>] <message>"``, or ``"[<code> <reason>] Unknown status."``
        for statuses outside the table.

    Example::

        >>> interpret_status(404)
        '[404] The resource could not be found.'
        >>> interpret_status(418, "I'm a teapot")
        "[418 I'm a teapot] Unknown status."
    """
    message = _STATUS_MESSAGES.get(status_code)
    if message is not None:
        return f"[{status_code}] {message}"
    status = f"{status_code} {reason_phrase}".strip()
    return f"[{status}] Unknown status."


def render_response(response: httpx.Response) -> None:
    """Print *response* to stdout: the body, or a status message if it is empty."""
    output = get_output()
    output.debug(f"Response Status: {response.status_code} {response.reason_phrase}")
    output.debug(f"Response Headers: {dict(response.headers)}")

    if not response.content:
        output.print_data(interpret_status(response.status_code, response.reason_phrase))
    else:
        output.print_data(response.text)
