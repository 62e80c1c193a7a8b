"""Async client for the StreetEasy rentals GraphQL API."""

from .client import (
    DEFAULT_AD_STRATEGY,
    DEFAULT_ENDPOINT,
    DEFAULT_HEADERS,
    StreetEasyClient,
    StreetEasyConfig,
    with_search_defaults,
)
from .constants import Amenity, Area
from .edges import EdgeKind, edge_kind, is_organic_or_featured_edge, is_sponsored_edge
from .errors import GraphQLClientError, StreetEasyError, describe_error
from .models import RentalDetailsSummary, RentalSummary, summarize_search
from .queries import RENTAL_LISTING_DETAILS_QUERY, SEARCH_RENTALS_QUERY
from .transport import GraphQLTransport

__all__ = [
    "DEFAULT_AD_STRATEGY",
    "DEFAULT_ENDPOINT",
    "DEFAULT_HEADERS",
    "RENTAL_LISTING_DETAILS_QUERY",
    "SEARCH_RENTALS_QUERY",
    "Amenity",
    "Area",
    "EdgeKind",
    "GraphQLClientError",
    "GraphQLTransport",
    "RentalDetailsSummary",
    "RentalSummary",
    "StreetEasyClient",
    "StreetEasyConfig",
    "StreetEasyError",
    "describe_error",
    "edge_kind",
    "is_organic_or_featured_edge",
    "is_sponsored_edge",
    "summarize_search",
    "with_search_defaults",
]
