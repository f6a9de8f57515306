"""Exception hierarchy for ucli.

All exceptions inherit from :class:`UcliError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`ucli.exit_codes`.
Lower layers raise; the Typer command in :mod:`ucli.app` is the only place
that turns an error into a process exit.

Subclass hierarchy::

    UcliError (exit 1)
    +-- UsageError          (exit 1)
    +-- ConfigError         (exit 1)
    +-- AuthError           (exit 3)
    +-- ConnectionError_    (exit 6)
"""

from ucli.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
)


class UcliError(Exception):
    """Base exception for all ucli errors.

    Subclasses set ``exit_code`` to the status the process exits with.
    """

    exit_code: int = EXIT_GENERIC_FAILURE


class UsageError(UcliError):
    """Raised when the command line is missing a required piece (operation, ``--config`` value)."""

    exit_code = EXIT_GENERIC_FAILURE


class ConfigError(UcliError):
    """Raised when the configuration file is missing, unreadable, or invalid."""

    exit_code = EXIT_GENERIC_FAILURE


class AuthError(UcliError):
    """Raised when configured credentials cannot be loaded (e.g. unreadable token file)."""

    exit_code = EXIT_AUTH_FAILURE


class ConnectionError_(UcliError):
    """Raised on network-level failures (DNS resolution, connection refused, invalid URL).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR
