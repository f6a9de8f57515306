"""Numeric process exit codes.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~ucli.exceptions.UcliError` subclass. Shell scripts
wrapping ``ucli`` can inspect the exit code to tell a broken configuration
from an unreachable server without parsing stderr.

Example::

    $ ucli get users
    $ echo $?
    6   # EXIT_CONNECTION_ERROR -- the server could not be reached
"""

EXIT_GENERIC_FAILURE = 1
"""Invalid invocation, configuration failure, or an unclassified error."""

EXIT_AUTH_FAILURE = 3
"""Authentication material could not be read."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (DNS failure, connection refused, bad URL)."""

EXIT_INTERRUPTED = 130
"""The process was interrupted with Ctrl-C."""
