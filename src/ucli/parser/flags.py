"""Parse trailing ``--flag [value]`` tokens into a typed flag mapping.

Flags are not declared anywhere: any ``--name`` becomes a key, and its
value's type is guessed by :func:`~ucli.parser.values.parse_value`.

Accepted shapes::

    --name=John        -> name: "John"
    --age 30           -> age: 30
    --active           -> active: ""      (no value follows)
    --empty=           -> empty: ""

Tokens that are neither a flag nor the value of the preceding flag are
ignored. When a key repeats, the last occurrence wins.
"""

from __future__ import annotations

from typing import Sequence

from ucli.models import FlagValue
from ucli.parser.values import parse_value

_FLAG_PREFIX = "--"


def parse_dynamic_flags(tokens: Sequence[str]) -> dict[str, FlagValue]:
    """Build the flag mapping from *tokens*.

    Args:
        tokens: The flag tokens following the resource path.

    Returns:
        An insertion-ordered mapping from flag name to inferred
        :class:`~ucli.models.FlagValue`.
    """
    flags: dict[str, FlagValue] = {}

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith(_FLAG_PREFIX):
            key = token[len(_FLAG_PREFIX):]
            if "=" in key:
                key, raw = key.split("=", 1)
            elif i + 1 < len(tokens) and not tokens[i + 1].startswith(_FLAG_PREFIX):
                i += 1
                raw = tokens[i]
            else:
                raw = ""
            flags[key] = parse_value(raw)
        i += 1

    return flags


def flags_to_plain(flags: dict[str, FlagValue]) -> dict[str, object]:
    """Strip the type tags, e.g. for debug display or a JSON body."""
    return {key: value.as_json() for key, value in flags.items()}
