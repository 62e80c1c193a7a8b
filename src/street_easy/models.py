"""Flat summaries of search edges and listing details for display and export."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .edges import EdgeKind, edge_kind

SITE_URL = "https://streeteasy.com"


def _get(data: Any, *path: str) -> Any:
    """Walk nested dicts, returning None as soon as a level is missing or null."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _listing_url(url_path: str | None) -> str:
    if not url_path:
        return ""
    if url_path.startswith("http"):
        return url_path
    return f"{SITE_URL}{url_path}" if url_path.startswith("/") else f"{SITE_URL}/{url_path}"


@dataclass
class RentalSummary:
    """One search result, flattened."""

    id: str
    kind: EdgeKind
    street: str
    unit: str
    area_name: str
    price: float
    bedrooms: int
    full_bathrooms: int
    half_bathrooms: int
    no_fee: bool
    url: str
    amenities_match: bool | None = None
    sponsored_label: str | None = None

    @classmethod
    def from_edge(cls, edge: dict[str, Any]) -> RentalSummary:
        kind = edge_kind(edge)
        node = edge.get("node") or {}
        summary = cls(
            id=str(node.get("id") or ""),
            kind=kind,
            street=str(node.get("street") or ""),
            unit=str(node.get("unit") or ""),
            area_name=str(node.get("areaName") or ""),
            price=float(node.get("price") or 0),
            bedrooms=int(node.get("bedroomCount") or 0),
            full_bathrooms=int(node.get("fullBathroomCount") or 0),
            half_bathrooms=int(node.get("halfBathroomCount") or 0),
            no_fee=bool(node.get("noFee")),
            url=_listing_url(node.get("urlPath")),
        )
        if kind in (EdgeKind.ORGANIC, EdgeKind.FEATURED):
            summary.amenities_match = bool(edge.get("amenitiesMatch"))
        elif kind is EdgeKind.SPONSORED:
            summary.sponsored_label = edge.get("sponsoredSimilarityLabel")
        return summary

    @property
    def address(self) -> str:
        return f"{self.street} {self.unit}".strip()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "street": self.street,
            "unit": self.unit,
            "area_name": self.area_name,
            "price": self.price,
            "bedrooms": self.bedrooms,
            "full_bathrooms": self.full_bathrooms,
            "half_bathrooms": self.half_bathrooms,
            "no_fee": self.no_fee,
            "url": self.url,
            "amenities_match": self.amenities_match,
            "sponsored_label": self.sponsored_label,
        }


def summarize_search(payload: dict[str, Any]) -> tuple[int, list[RentalSummary]]:
    """Return (totalCount, summaries) for a searchRentals payload."""
    results = payload.get("searchRentals") or {}
    edges = results.get("edges") or []
    summaries = [RentalSummary.from_edge(e) for e in edges if isinstance(e, dict)]
    return int(results.get("totalCount") or 0), summaries


@dataclass
class RentalDetailsSummary:
    """Listing details flattened from the federated response; nulls become blanks."""

    id: str
    status: str
    price: float | None
    no_fee: bool
    address: str
    area_name: str
    bedrooms: int | None
    full_bathrooms: int | None
    half_bathrooms: int | None
    living_area_size: int | None
    available_at: str | None
    building_name: str | None
    building_type: str | None
    year_built: int | None
    description: str
    amenities: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    transit: list[str] = field(default_factory=list)
    schools: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RentalDetailsSummary:
        listing = payload.get("rentalByListingId") or {}
        building = payload.get("buildingByRentalListingId") or {}
        details = listing.get("propertyDetails") or {}
        address = details.get("address") or {}

        transit = []
        for station in _get(building, "nearby", "transitStations") or []:
            routes = ", ".join(station.get("routes") or [])
            distance = station.get("distance")
            where = f" ({distance:.2f} mi)" if isinstance(distance, (int, float)) else ""
            transit.append(f"{station.get('name', '')}{where}: {routes}".rstrip(": "))

        schools = []
        for school in _get(payload, "getBuildingExpressByRentalListingId", "nearbySchools") or []:
            grades = ", ".join(school.get("grades") or [])
            schools.append(
                f"{school.get('name', '')} (District {school.get('district', '')}): Grades {grades}"
            )

        return cls(
            id=str(listing.get("id") or ""),
            status=str(listing.get("status") or ""),
            price=_get(listing, "pricing", "price"),
            no_fee=bool(_get(listing, "pricing", "noFee")),
            address=" ".join(
                p for p in (address.get("street"), address.get("unit")) if p
            ),
            area_name=str(_get(building, "area", "name") or ""),
            bedrooms=details.get("bedroomCount"),
            full_bathrooms=details.get("fullBathroomCount"),
            half_bathrooms=details.get("halfBathroomCount"),
            living_area_size=details.get("livingAreaSize"),
            available_at=listing.get("availableAt"),
            building_name=building.get("name"),
            building_type=building.get("type"),
            year_built=building.get("yearBuilt"),
            description=str(listing.get("description") or ""),
            amenities=list(_get(details, "amenities", "list") or []),
            features=list(_get(details, "features", "list") or []),
            transit=transit,
            schools=schools,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "price": self.price,
            "no_fee": self.no_fee,
            "address": self.address,
            "area_name": self.area_name,
            "bedrooms": self.bedrooms,
            "full_bathrooms": self.full_bathrooms,
            "half_bathrooms": self.half_bathrooms,
            "living_area_size": self.living_area_size,
            "available_at": self.available_at,
            "building_name": self.building_name,
            "building_type": self.building_type,
            "year_built": self.year_built,
            "description": self.description,
            "amenities": self.amenities,
            "features": self.features,
            "transit": self.transit,
            "schools": self.schools,
        }
