"""Split ``argv`` into global options, operation, resource path, and flags.

ucli owns exactly two options, recognised anywhere on the command line:

* ``--config <path>`` / ``--config=<path>`` -- configuration file override.
* ``--ucli-debug`` / ``--ucli-debug=<bool>`` -- verbose diagnostics.

Everything else belongs to the request. After the global options are
removed, the first token is the operation verb, the following tokens up to
the first ``-``-prefixed one form the resource path, and the rest are flag
tokens for :func:`~ucli.parser.flags.parse_dynamic_flags`::

    ucli get users 42 --expand owner
         ^^^ ^^^^^^^^ ^^^^^^^^^^^^^^
          |     |          flag tokens
          |     resource path
          operation
"""

from __future__ import annotations

from typing import Sequence

from ucli.exceptions import UsageError
from ucli.models import GlobalOptions, Invocation

_CONFIG_OPTION = "--config"
_DEBUG_OPTION = "--ucli-debug"
_DEBUG_TRUE_VALUES = ("true", "1")


def split_global_options(argv: Sequence[str]) -> GlobalOptions:
    """Remove ucli's own options from *argv*.

    ``--config`` consumes the following token unconditionally, even one that
    looks like a flag.

    Args:
        argv: Command-line tokens, without the program name.

    Returns:
        The parsed :class:`~ucli.models.GlobalOptions`; ``args`` keeps the
        remaining tokens in order.

    Raises:
        UsageError: If ``--config`` is the last token.
    """
    options = GlobalOptions()
    remaining: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == _CONFIG_OPTION:
            if i + 1 >= len(argv):
                raise UsageError("Missing value for --config")
            options.config_path = argv[i + 1]
            i += 2
            continue

        if arg.startswith(f"{_CONFIG_OPTION}="):
            options.config_path = arg[len(_CONFIG_OPTION) + 1:]
        elif arg == _DEBUG_OPTION:
            options.debug = True
        elif arg.startswith(f"{_DEBUG_OPTION}="):
            options.debug = arg[len(_DEBUG_OPTION) + 1:] in _DEBUG_TRUE_VALUES
        else:
            remaining.append(arg)
        i += 1

    options.args = remaining
    return options


def split_command(args: Sequence[str]) -> Invocation:
    """Split the request tokens into operation, resource path, and flag tokens.

    Args:
        args: Tokens left over by :func:`split_global_options`.

    Returns:
        The :class:`~ucli.models.Invocation`.

    Raises:
        UsageError: If *args* is empty (no operation was given).
    """
    if not args:
        raise UsageError(
            "You need to provide an operation, e.g. get, create, update, delete"
        )

    resources: list[str] = []
    flag_tokens: list[str] = []
    for i, arg in enumerate(args[1:], start=1):
        if arg.startswith("-"):
            flag_tokens = list(args[i:])
            break
        resources.append(arg)

    return Invocation(operation=args[0], resources=resources, flag_tokens=flag_tokens)
