"""Area codes and amenity tags accepted by the rental search filters."""

from __future__ import annotations

from enum import Enum, IntEnum


class Area(IntEnum):
    # Regions
    ALL_NYC_AND_NJ = 1

    # Boroughs
    MANHATTAN = 100
    BRONX = 200
    BROOKLYN = 300
    QUEENS = 400
    STATEN_ISLAND = 500


class Amenity(str, Enum):
    # Unit amenities
    WASHER_DRYER = "WASHER_DRYER"
    DISHWASHER = "DISHWASHER"
    PRIVATE_OUTDOOR_SPACE = "PRIVATE_OUTDOOR_SPACE"
    CENTRAL_AC = "CENTRAL_AC"
    FURNISHED = "FURNISHED"
    FIREPLACE = "FIREPLACE"
    LOFT = "LOFT"

    # Views
    CITY_VIEW = "CITY_VIEW"
    GARDEN_VIEW = "GARDEN_VIEW"
    PARK_VIEW = "PARK_VIEW"
    SKYLINE_VIEW = "SKYLINE_VIEW"
    WATER_VIEW = "WATER_VIEW"

    # Building amenities
    DOORMAN = "DOORMAN"
    LAUNDRY = "LAUNDRY"
    ELEVATOR = "ELEVATOR"
    GYM = "GYM"
    PARKING = "PARKING"
    SHARED_OUTDOOR_SPACE = "SHARED_OUTDOOR_SPACE"
    POOL = "POOL"
    PIED_A_TERRE_ALLOWED = "PIED_A_TERRE_ALLOWED"
    CHILDRENS_PLAYROOM = "CHILDRENS_PLAYROOM"
    SMOKE_FREE = "SMOKE_FREE"
    STORAGE_SPACE = "STORAGE_SPACE"
    GUARANTORS_ACCEPTED = "GUARANTORS_ACCEPTED"


SORT_ATTRIBUTES = ("RECOMMENDED", "PRICE", "DATE_LISTED")
SORT_DIRECTIONS = ("ASCENDING", "DESCENDING")


def parse_area(value: str | int) -> Area:
    """Resolve an area from its code ("300", 300) or name ("brooklyn", "Staten Island")."""
    if isinstance(value, int):
        return Area(value)
    text = value.strip()
    if text.isdigit():
        return Area(int(text))
    key = text.upper().replace(" ", "_").replace("-", "_")
    try:
        return Area[key]
    except KeyError:
        raise ValueError(f"Unknown area: {value!r}") from None


def parse_amenity(value: str) -> Amenity:
    key = value.strip().upper().replace(" ", "_").replace("-", "_")
    try:
        return Amenity(key)
    except ValueError:
        raise ValueError(f"Unknown amenity: {value!r}") from None
