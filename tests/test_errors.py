"""Tests for raised-value normalization."""

import httpx
import pytest

from street_easy.errors import (
    UNDEFINED,
    GraphQLClientError,
    StreetEasyError,
    describe_error,
)


class _Structured:
    def __init__(self, message: str) -> None:
        self.message = message


@pytest.mark.parametrize(
    "value, expected",
    [
        (Exception("API Error"), "StreetEasy GraphQL Error: API Error"),
        ("String error message", "StreetEasy GraphQL Error: String error message"),
        (None, "StreetEasy GraphQL Error: null"),
        (UNDEFINED, "StreetEasy GraphQL Error: undefined"),
        (
            GraphQLClientError("invalid type for variable: 'input'", status_code=400),
            "StreetEasy GraphQL Error: invalid type for variable: 'input'",
        ),
        (_Structured("from attribute"), "StreetEasy GraphQL Error: from attribute"),
        ({"message": "from mapping", "path": ["x"]}, "StreetEasy GraphQL Error: from mapping"),
        (42, "StreetEasy GraphQL Error: 42"),
    ],
)
def test_error_messages(value, expected) -> None:
    error = StreetEasyError(describe_error(value))
    assert isinstance(error, StreetEasyError)
    assert str(error) == expected


def test_non_string_message_attribute_falls_back_to_str() -> None:
    obj = _Structured("x")
    obj.message = None
    assert describe_error(obj) == str(obj)


def test_mapping_without_message_uses_str() -> None:
    assert describe_error({"code": 1}) == "{'code': 1}"


def test_httpx_error_text() -> None:
    assert describe_error(httpx.ConnectError("connection failed")) == "connection failed"


def test_streeteasy_error_detail() -> None:
    original = StreetEasyError("boom")
    assert original.detail == "boom"
    assert original.message == "StreetEasy GraphQL Error: boom"


def test_client_error_carries_response_details() -> None:
    errors = [{"message": "bad", "extensions": {"code": "X"}}]
    error = GraphQLClientError("bad", status_code=400, errors=errors)
    assert error.status_code == 400
    assert error.errors == errors
    assert GraphQLClientError("x").errors == []
