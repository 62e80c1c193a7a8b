"""Error types and normalization of values raised by the transport."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

ERROR_PREFIX = "StreetEasy GraphQL Error: "


class _Undefined:
    """Marker for a raised value that carries nothing at all."""

    def __repr__(self) -> str:
        return "undefined"

    __str__ = __repr__


UNDEFINED = _Undefined()


class StreetEasyError(Exception):
    """The single error raised by StreetEasyClient operations."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{ERROR_PREFIX}{detail}")
        self.detail = detail

    @property
    def message(self) -> str:
        return self.args[0]


class GraphQLClientError(Exception):
    """Raised by the transport for HTTP failures and GraphQL error payloads."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


def describe_error(value: object) -> str:
    """
    Turn whatever the transport raised into detail text.

    Structured errors contribute their message; None becomes "null" and
    anything else is rendered with str().
    """
    message = getattr(value, "message", None)
    if isinstance(message, str):
        return message
    if isinstance(value, Mapping) and isinstance(value.get("message"), str):
        return value["message"]
    if value is None:
        return "null"
    return str(value)

