"""Canonical Pydantic models shared across all ucli modules.

The models fall into three groups:

**Configuration** -- deserialised from the YAML configuration file:
    :class:`Configuration`.

**Command line** -- produced by :mod:`ucli.parser.arguments`:
    :class:`GlobalOptions` and :class:`Invocation`.

**Request building** -- consumed by :mod:`ucli.operations` and the client:
    :class:`FlagKind`, :class:`FlagValue`, :class:`HTTPMethod`, and
    :class:`Action`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _scalar_to_str(value: Any) -> Optional[str]:
    """Render a YAML scalar the way it was most likely written."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"expected a string, got {type(value).__name__}")


# --- Configuration ---


class Configuration(BaseModel):
    """Settings read once at startup from ``configuration.yaml``.

    The instance is passed explicitly to the dispatcher, the auth manager,
    and the HTTP client; nothing mutates it after loading.

    Top-level keys are matched case-insensitively and unknown keys are
    ignored. Scalars that YAML types as numbers or booleans (a numeric
    password, ``X-Api-Version: 2``) are coerced back to strings.

    Example::

        Configuration(
            url="https://api.example.com",
            token="~/.config/example/token",
            headers={"X-Client": "ucli"},
        )
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    url: str = Field(default="", description="Base URL every endpoint is appended to")
    token: Optional[str] = Field(
        default=None, description="Path to a file holding a bearer token"
    )
    username: Optional[str] = Field(default=None, description="HTTP Basic username")
    password: Optional[str] = Field(default=None, description="HTTP Basic password")
    headers: Optional[dict[str, str]] = Field(
        default=None, description="Headers applied verbatim to every request"
    )

    @model_validator(mode="before")
    @classmethod
    def _lowercase_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {str(key).lower(): value for key, value in data.items()}
        return data

    @field_validator("url", mode="before")
    @classmethod
    def _coerce_url(cls, value: Any) -> str:
        return _scalar_to_str(value) or ""

    @field_validator("token", "username", "password", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Optional[str]:
        return _scalar_to_str(value)

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: Any) -> Optional[dict[str, str]]:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError("headers must be a mapping of header names to values")
        return {str(name): _scalar_to_str(val) or "" for name, val in value.items()}


# --- Command line ---


class GlobalOptions(BaseModel):
    """Options understood by ucli itself, stripped out of ``argv``.

    Attributes:
        config_path: Explicit configuration file from ``--config``.
        debug: Whether ``--ucli-debug`` diagnostics are enabled.
        args: The remaining tokens, in their original order.
    """

    config_path: Optional[str] = None
    debug: bool = False
    args: list[str] = Field(default_factory=list)


class Invocation(BaseModel):
    """A command line split into operation verb, resource path, and flag tokens."""

    operation: str
    resources: list[str] = Field(default_factory=list)
    flag_tokens: list[str] = Field(default_factory=list)


# --- Request building ---


class FlagKind(str, enum.Enum):
    """The type inferred for a dynamic flag value."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"
    JSON = "json"
    STRING = "string"


class FlagValue(BaseModel):
    """A dynamic flag value tagged with its inferred :class:`FlagKind`.

    ``value`` holds an ``int``, ``bool``, ``float``, decoded JSON
    (``list``/``dict``), or ``str`` matching ``kind``. The two render
    methods cover the only places flags leave the process: the query string
    of a retrieve request and the JSON body of a submit/replace request.
    """

    model_config = ConfigDict(frozen=True)

    kind: FlagKind
    value: Any

    def as_query(self) -> str:
        """Render the value for a URL query parameter.

        Decoded JSON is rendered with ``str()`` rather than re-encoded, so
        ``--ids '[1, 2]'`` is sent as ``[1.0, 2.0]``.
        """
        if self.kind is FlagKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind is FlagKind.FLOAT:
            return repr(self.value)
        return str(self.value)

    def as_json(self) -> Any:
        """Return the plain value for inclusion in a JSON request body."""
        return self.value


class HTTPMethod(str, enum.Enum):
    """HTTP methods ucli can issue."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Action(str, enum.Enum):
    """The four semantic actions an operation verb can resolve to.

    Each action fixes the HTTP method and how the flag mapping travels:
    as a query string (retrieve), as a JSON body (submit, replace), or not
    at all (remove).
    """

    RETRIEVE = "retrieve"
    SUBMIT = "submit"
    REPLACE = "replace"
    REMOVE = "remove"

    @property
    def method(self) -> HTTPMethod:
        return _ACTION_METHODS[self]

    @property
    def sends_body(self) -> bool:
        return self in (Action.SUBMIT, Action.REPLACE)

    @property
    def sends_query(self) -> bool:
        return self is Action.RETRIEVE


_ACTION_METHODS: dict[Action, HTTPMethod] = {
    Action.RETRIEVE: HTTPMethod.GET,
    Action.SUBMIT: HTTPMethod.POST,
    Action.REPLACE: HTTPMethod.PUT,
    Action.REMOVE: HTTPMethod.DELETE,
}
