"""Pytest fixtures."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from street_easy import StreetEasyClient


class FakeTransport:
    """Records calls and replays a fixed response or raised value."""

    def __init__(self, response: Any = None, error: BaseException | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[Any, Any]] = []

    async def request(self, document: Any, variables: Any = None) -> Any:
        self.calls.append((document, variables))
        if self.error is not None:
            raise self.error
        # Each decode yields a fresh object tree, as a real JSON transport would.
        return copy.deepcopy(self.response)


@pytest.fixture
def search_payload() -> dict[str, Any]:
    node = {
        "__typename": "SearchRentalListing",
        "id": "4652509",
        "areaName": "Queens",
        "availableAt": None,
        "bedroomCount": 2,
        "buildingType": "RENTAL",
        "fullBathroomCount": 1,
        "halfBathroomCount": 1,
        "noFee": True,
        "price": 2500,
        "street": "123 Main St",
        "unit": "2B",
        "urlPath": "/rental/4652509",
    }
    return {
        "searchRentals": {
            "__typename": "SearchRentalsResponse",
            "totalCount": 3,
            "edges": [
                {
                    "__typename": "OrganicRentalEdge",
                    "node": node,
                    "amenitiesMatch": True,
                    "matchedAmenities": ["DISHWASHER"],
                    "missingAmenities": [],
                },
                {
                    "__typename": "FeaturedRentalEdge",
                    "node": {**node, "id": "111", "noFee": False, "unit": None},
                    "amenitiesMatch": False,
                    "matchedAmenities": [],
                    "missingAmenities": ["GYM"],
                },
                {
                    "__typename": "SponsoredRentalEdge",
                    "node": {**node, "id": "222", "price": 4100},
                    "sponsoredSimilarityLabel": "Similar price",
                },
            ],
        }
    }


@pytest.fixture
def details_payload() -> dict[str, Any]:
    return {
        "rentalByListingId": {
            "__typename": "RentalListing",
            "id": "4652509",
            "offMarketAt": None,
            "availableAt": "2025-03-01",
            "buildingId": "990",
            "status": "ACTIVE",
            "description": "Sunny two bedroom.",
            "media": {
                "__typename": "Media",
                "photos": [{"__typename": "Photo", "key": "abc"}],
                "floorPlans": None,
                "videos": [],
                "tour3dUrl": None,
                "assetCount": 1,
            },
            "propertyDetails": {
                "__typename": "PropertyDetails",
                "address": {
                    "__typename": "Address",
                    "street": "123 Main St",
                    "city": "Queens",
                    "state": "NY",
                    "zipCode": "11101",
                    "unit": "2B",
                },
                "bedroomCount": 2,
                "fullBathroomCount": 1,
                "halfBathroomCount": 0,
                "livingAreaSize": None,
                "amenities": {"__typename": "Amenities", "list": ["WASHER_DRYER"]},
                "features": {"__typename": "Features", "list": ["CITY_VIEW"]},
            },
            "mlsNumber": None,
            "pricing": {"__typename": "RentalPricing", "price": 2500, "noFee": True},
        },
        "buildingByRentalListingId": {
            "__typename": "Building",
            "id": "990",
            "name": None,
            "type": "RENTAL",
            "yearBuilt": 1931,
            "area": {"__typename": "Area", "name": "Astoria"},
            "heroImage": None,
            "complex": None,
            "policies": None,
            "nearby": {
                "__typename": "Nearby",
                "transitStations": [
                    {"__typename": "TransitStation", "name": "Broadway", "distance": 0.2, "routes": ["N", "W"]},
                ],
            },
        },
        "getBuildingExpressByRentalListingId": {
            "__typename": "BuildingExpress",
            "nearbySchools": [
                {"__typename": "SchoolExpress", "name": "PS 17", "district": "30", "grades": ["K", "1"]},
            ],
        },
        "getRelloRentalById": None,
        "getRentalListingExpressById": {
            "__typename": "RentalListingExpress",
            "hasActiveBuildingShowcase": False,
        },
    }


@pytest.fixture
def make_client():
    """Build a client around a FakeTransport; returns (client, transport)."""

    def _make(response: Any = None, error: BaseException | None = None):
        transport = FakeTransport(response=response, error=error)
        return StreetEasyClient(transport=transport), transport

    return _make


@pytest.fixture
def fake_transport_cls():
    return FakeTransport
