"""Command-line parsing -- global options, command splitting, and dynamic flags.

This sub-package turns raw ``argv`` into the pieces the dispatcher needs.

Typical usage::

    from ucli.parser import parse_dynamic_flags, split_command, split_global_options

    options = split_global_options(["--ucli-debug", "get", "users", "--page", "2"])
    invocation = split_command(options.args)
    flags = parse_dynamic_flags(invocation.flag_tokens)

Sub-modules:

* :mod:`~ucli.parser.arguments` -- strips ``--config``/``--ucli-debug`` and
  splits operation, resource path, and flag tokens.
* :mod:`~ucli.parser.flags` -- turns flag tokens into a flag mapping.
* :mod:`~ucli.parser.values` -- infers the type of each raw flag value.
"""

from ucli.parser.arguments import split_command, split_global_options
from ucli.parser.flags import parse_dynamic_flags
from ucli.parser.values import parse_value

__all__ = ["split_global_options", "split_command", "parse_dynamic_flags", "parse_value"]
