"""HTTP transport executing GraphQL documents against a single endpoint."""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx
from graphql import DocumentNode, print_ast

from .errors import GraphQLClientError

logger = logging.getLogger(__name__)

_OPERATION_RE = re.compile(r"\b(?:query|mutation|subscription)\s+(\w+)")


def document_to_text(document: str | DocumentNode) -> str:
    """Render a query document as text; strings are sent untouched."""
    if isinstance(document, str):
        return document
    return print_ast(document)


def operation_name(query: str) -> str | None:
    match = _OPERATION_RE.search(query)
    return match.group(1) if match else None


class GraphQLTransport:
    """
    POSTs `{"query", "variables"}` to one endpoint and returns the `data` object.

    Raises GraphQLClientError when the server answers with a non-2xx status
    or a non-empty `errors` list. Network failures surface as httpx errors.
    Each call opens its own httpx.AsyncClient unless one is passed in, so the
    transport can be driven from successive event loops.
    """

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._client = http_client

    async def request(
        self,
        document: str | DocumentNode,
        variables: dict[str, Any] | None = None,
    ) -> Any:
        query = document_to_text(document)
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        if self._client is not None:
            resp = await self._client.post(self.endpoint, json=payload, headers=self.headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(self.endpoint, json=payload, headers=self.headers)
        logger.debug(
            "GraphQL %s -> HTTP %d",
            operation_name(query) or "anonymous operation",
            resp.status_code,
        )

        body = self._decode(resp)
        errors = body.get("errors") if isinstance(body, dict) else None

        if resp.status_code < 200 or resp.status_code >= 300:
            message = _first_error_message(errors) or f"HTTP {resp.status_code}"
            raise GraphQLClientError(message, status_code=resp.status_code, errors=errors)
        if errors:
            raise GraphQLClientError(
                _first_error_message(errors) or "GraphQL request failed",
                status_code=resp.status_code,
                errors=errors,
            )
        if not isinstance(body, dict) or "data" not in body:
            raise GraphQLClientError(
                "Response is missing the data field",
                status_code=resp.status_code,
            )
        return body["data"]

    def _decode(self, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError:
            if resp.is_success:
                raise GraphQLClientError(
                    f"Invalid JSON in response (HTTP {resp.status_code})",
                    status_code=resp.status_code,
                ) from None
            return None

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()


def _first_error_message(errors: Any) -> str | None:
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, dict) and isinstance(first.get("message"), str):
            return first["message"]
    return None
