"""Best-guess typing of raw flag values.

A raw value is tried against each type in a fixed order and the first
match wins:

1. **Integer** -- optional sign and ASCII digits, within signed 64-bit range
   (``"00123"`` -> ``123``).
2. **Boolean** -- ``true``/``false`` or ``t``/``f`` in any case
   (``"True"`` -> ``True``, ``"truee"`` does not match).
3. **Float** -- decimal with optional exponent, or ``inf``/``nan``
   (``"-123.456"`` -> ``-123.456``).
4. **JSON** -- values starting with ``[`` or ``{`` (after trimming) that
   decode cleanly; every JSON number becomes a float
   (one that overflows a float rejects the whole value).
5. **String** -- anything else, returned untouched.

Python's own ``int()``/``float()`` are too lenient on their own (they accept
surrounding whitespace and ``1_000``), so the candidate text is matched
against a strict pattern first.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from ucli.models import FlagKind, FlagValue

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

_TRUE_LITERALS = frozenset({"true", "t"})
_FALSE_LITERALS = frozenset({"false", "f"})


def parse_value(raw: str) -> FlagValue:
    """Infer the type of *raw* and wrap it in a :class:`~ucli.models.FlagValue`.

    Args:
        raw: The flag value exactly as typed on the command line.

    Returns:
        The tagged value. Never raises: unrecognised input comes back as a
        :attr:`~ucli.models.FlagKind.STRING`.
    """
    for kind, parse in _PARSERS:
        matched, value = parse(raw)
        if matched:
            return FlagValue(kind=kind, value=value)
    return FlagValue(kind=FlagKind.STRING, value=raw)


def _parse_integer(raw: str) -> tuple[bool, Any]:
    if not _INTEGER_RE.fullmatch(raw):
        return False, None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return False, None
    return True, value


def _parse_boolean(raw: str) -> tuple[bool, Any]:
    lowered = raw.lower()
    if lowered in _TRUE_LITERALS:
        return True, True
    if lowered in _FALSE_LITERALS:
        return True, False
    return False, None


def _parse_float(raw: str) -> tuple[bool, Any]:
    if _SPECIAL_FLOAT_RE.fullmatch(raw):
        return True, float(raw)
    if not _FLOAT_RE.fullmatch(raw):
        return False, None
    value = float(raw)
    # "1e400" overflows to inf; only explicit inf literals may produce one.
    if math.isinf(value):
        return False, None
    return True, value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _parse_json(raw: str) -> tuple[bool, Any]:
    trimmed = raw.strip()
    if not trimmed.startswith(("[", "{")):
        return False, None
    try:
        value = json.loads(
            trimmed,
            parse_int=_finite_float,
            parse_float=_finite_float,
            parse_constant=_reject_constant,
        )
    except ValueError:
        return False, None
    return True, value


_PARSERS = (
    (FlagKind.INTEGER, _parse_integer),
    (FlagKind.BOOLEAN, _parse_boolean),
    (FlagKind.FLOAT, _parse_float),
    (FlagKind.JSON, _parse_json),
)
