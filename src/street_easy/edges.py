"""Classification of search result edges by their __typename."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class EdgeKind(str, Enum):
    ORGANIC = "OrganicRentalEdge"
    FEATURED = "FeaturedRentalEdge"
    SPONSORED = "SponsoredRentalEdge"
    UNKNOWN = "Unknown"


def edge_kind(edge: object) -> EdgeKind:
    """Return the variant of an edge; anything unrecognized is UNKNOWN."""
    if not isinstance(edge, Mapping):
        return EdgeKind.UNKNOWN
    match edge.get("__typename"):
        case "OrganicRentalEdge":
            return EdgeKind.ORGANIC
        case "FeaturedRentalEdge":
            return EdgeKind.FEATURED
        case "SponsoredRentalEdge":
            return EdgeKind.SPONSORED
        case _:
            return EdgeKind.UNKNOWN


def is_organic_or_featured_edge(edge: object) -> bool:
    return edge_kind(edge) in (EdgeKind.ORGANIC, EdgeKind.FEATURED)


def is_sponsored_edge(edge: object) -> bool:
    return edge_kind(edge) is EdgeKind.SPONSORED
