"""Tests for the wire-shape TypedDicts."""

from street_easy.schema import (
    Media,
    RentalListingDetailsResponse,
    SearchRentalListing,
    SponsoredRentalEdge,
)


def test_search_listing_keys() -> None:
    keys = SearchRentalListing.__annotations__
    assert "__typename" in keys
    assert "hasTour3d" in keys
    assert "hasVideos" in keys
    assert "urlPath" in keys


def test_media_keys() -> None:
    assert set(Media.__annotations__) == {
        "__typename", "photos", "floorPlans", "videos", "tour3dUrl", "assetCount",
    }


def test_typename_not_mangled() -> None:
    assert "__typename" in SponsoredRentalEdge.__annotations__
    assert not any(k.startswith("_Sponsored") for k in SponsoredRentalEdge.__annotations__)


def test_details_response_sections() -> None:
    assert set(RentalListingDetailsResponse.__annotations__) == {
        "rentalByListingId",
        "buildingByRentalListingId",
        "getBuildingExpressByRentalListingId",
        "getRelloRentalById",
        "getRentalListingExpressById",
    }
