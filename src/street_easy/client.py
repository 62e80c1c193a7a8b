"""StreetEasy GraphQL client: request defaults and error normalization."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from graphql import DocumentNode

from .errors import StreetEasyError, describe_error
from .queries import RENTAL_LISTING_DETAILS_QUERY, SEARCH_RENTALS_QUERY
from .schema import RentalListingDetailsResponse, SearchRentalsResponse
from .transport import GraphQLTransport

DEFAULT_ENDPOINT = "https://api-v6.streeteasy.com/"
DEFAULT_AD_STRATEGY = "NONE"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "App-Version": "1.0.0",
    "Apollographql-Client-Name": "srp-frontend-service",
    "Apollographql-Client-Version": "version  50bef71ef923e981bdcb7c781851c3bfdb12a0c1",
    "Os": "web",
    "Dnt": "1",
    "Origin": "https://streeteasy.com",
    "Referer": "https://streeteasy.com/",
    "Sec-Ch-Ua": '"Chromium";v="133", "Not(A:Brand";v="99"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"macOS"',
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-site",
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36"
    ),
    "X-Forwarded-Proto": "https",
}


class Transport(Protocol):
    async def request(
        self,
        document: str | DocumentNode,
        variables: dict[str, Any] | None = None,
    ) -> Any: ...


def new_search_token() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class StreetEasyConfig:
    """Client settings. An unset or empty endpoint means DEFAULT_ENDPOINT."""

    endpoint: str | None = None
    timeout: float = 30.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StreetEasyConfig:
        return cls(
            endpoint=data.get("endpoint") or None,
            timeout=float(data.get("timeout") or 30.0),
        )

    @property
    def resolved_endpoint(self) -> str:
        return self.endpoint or DEFAULT_ENDPOINT


def with_search_defaults(
    search_input: Mapping[str, Any],
    token_factory: Callable[[], str] | None = None,
) -> dict[str, Any]:
    """
    Copy a search input, filling `adStrategy` and `userSearchToken` when absent.

    Missing, None and empty values count as absent. Caller-supplied values
    are kept and the caller's mapping is left untouched.
    """
    merged = dict(search_input)
    if not merged.get("adStrategy"):
        merged["adStrategy"] = DEFAULT_AD_STRATEGY
    if not merged.get("userSearchToken"):
        merged["userSearchToken"] = (token_factory or new_search_token)()
    return merged


class StreetEasyClient:
    """
    Async client for the StreetEasy GraphQL API.

    Every operation either returns the decoded `data` payload untouched or
    raises StreetEasyError. Nothing is retried or cached, and the instance
    holds no per-call state, so calls may run concurrently.
    """

    def __init__(
        self,
        config: StreetEasyConfig | Mapping[str, Any] | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        if config is None:
            config = StreetEasyConfig()
        elif not isinstance(config, StreetEasyConfig):
            config = StreetEasyConfig.from_mapping(config)
        self.config = config
        self.endpoint = config.resolved_endpoint
        self.transport: Transport = transport or GraphQLTransport(
            self.endpoint,
            headers=DEFAULT_HEADERS,
            timeout=config.timeout,
        )

    async def request(
        self,
        document: str | DocumentNode,
        variables: dict[str, Any] | None = None,
    ) -> Any:
        """Execute a GraphQL document and return its decoded result."""
        try:
            return await self.transport.request(document, variables)
        except StreetEasyError:
            raise
        except Exception as e:
            raise StreetEasyError(describe_error(e)) from e

    async def search_rentals(self, search_input: Mapping[str, Any]) -> SearchRentalsResponse:
        """Search rental listings; see with_search_defaults for injected fields."""
        return await self.request(
            SEARCH_RENTALS_QUERY,
            {"input": with_search_defaults(search_input)},
        )

    async def get_rental_listing_details(self, listing_id: str) -> RentalListingDetailsResponse:
        """Fetch listing, building, school and partner data for one rental."""
        return await self.request(
            RENTAL_LISTING_DETAILS_QUERY,
            {"listingID": listing_id},
        )

    get_listing_details = get_rental_listing_details

    async def aclose(self) -> None:
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> StreetEasyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

