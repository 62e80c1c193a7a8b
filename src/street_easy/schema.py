"""Wire shapes of the StreetEasy GraphQL inputs and responses.

These describe the decoded JSON; the client returns plain dicts, so the
TypedDicts only serve type checkers and readers.
"""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict, Union

Variables = dict[str, Any]

BuildingType = Literal["CO_OP", "CONDO", "MULTI_FAMILY", "RENTAL", "TOWNHOUSE"]

# Search input

NumberRange = TypedDict("NumberRange", {
    "lowerBound": int | float | None,
    "upperBound": int | float | None,
})

SearchFilters = TypedDict("SearchFilters", {
    "areas": list[int],
    "rentalStatus": Literal["ACTIVE"],
    "price": NumberRange,
    "bedrooms": NumberRange,
    "bathrooms": NumberRange,
    "amenities": list[str],
    "petsAllowed": bool,
}, total=False)

Sorting = TypedDict("Sorting", {
    "attribute": Literal["RECOMMENDED", "PRICE", "DATE_LISTED"],
    "direction": Literal["ASCENDING", "DESCENDING"],
})

SearchRentalsInput = TypedDict("SearchRentalsInput", {
    "filters": SearchFilters,
    "sorting": NotRequired[Sorting],
    "adStrategy": NotRequired[Literal["NONE"]],
    "perPage": NotRequired[int],
    "page": NotRequired[int],
    "userSearchToken": NotRequired[str],
})

# Search response

GeoPoint = TypedDict("GeoPoint", {
    "__typename": str,
    "latitude": float,
    "longitude": float,
})

MediaKey = TypedDict("MediaKey", {
    "__typename": str,
    "key": str | None,
})

LeadMedia = TypedDict("LeadMedia", {
    "__typename": str,
    "photo": MediaKey | None,
    "floorPlan": NotRequired[MediaKey | None],
})

OpenHouseDigest = TypedDict("OpenHouseDigest", {
    "__typename": str,
    "startTime": str,
    "endTime": str,
    "appointmentOnly": bool,
})

SearchRentalListing = TypedDict("SearchRentalListing", {
    "__typename": str,
    "id": str,
    "areaName": str,
    "availableAt": str | None,
    "bedroomCount": int,
    "buildingType": BuildingType,
    "fullBathroomCount": int,
    "furnished": bool,
    "geoPoint": GeoPoint,
    "halfBathroomCount": int,
    "hasTour3d": bool,
    "hasVideos": bool,
    "isNewDevelopment": bool,
    "leadMedia": LeadMedia | None,
    "leaseTermMonths": int | None,
    "livingAreaSize": int | None,
    "mediaAssetCount": int,
    "monthsFree": float | None,
    "noFee": bool,
    "netEffectivePrice": float | None,
    "offMarketAt": str | None,
    "photos": list[MediaKey],
    "price": float,
    "priceChangedAt": str | None,
    "priceDelta": float | None,
    "slug": str,
    "sourceGroupLabel": str,
    "sourceType": str,
    "status": str,
    "street": str,
    "unit": str | None,
    "upcomingOpenHouse": OpenHouseDigest | None,
    "urlPath": str,
})

OrganicRentalEdge = TypedDict("OrganicRentalEdge", {
    "__typename": Literal["OrganicRentalEdge"],
    "node": SearchRentalListing,
    "amenitiesMatch": bool,
    "matchedAmenities": list[str],
    "missingAmenities": list[str],
})

FeaturedRentalEdge = TypedDict("FeaturedRentalEdge", {
    "__typename": Literal["FeaturedRentalEdge"],
    "node": SearchRentalListing,
    "amenitiesMatch": bool,
    "matchedAmenities": list[str],
    "missingAmenities": list[str],
})

SponsoredRentalEdge = TypedDict("SponsoredRentalEdge", {
    "__typename": Literal["SponsoredRentalEdge"],
    "node": SearchRentalListing,
    "sponsoredSimilarityLabel": str,
})

RentalEdge = Union[OrganicRentalEdge, FeaturedRentalEdge, SponsoredRentalEdge]

SearchRentals = TypedDict("SearchRentals", {
    "__typename": str,
    "edges": list[RentalEdge],
    "totalCount": int,
})

SearchRentalsResponse = TypedDict("SearchRentalsResponse", {
    "searchRentals": SearchRentals,
})

# Listing details response

Address = TypedDict("Address", {
    "__typename": str,
    "street": str,
    "houseNumber": NotRequired[str | None],
    "streetName": NotRequired[str | None],
    "city": str,
    "state": str,
    "zipCode": str,
    "unit": NotRequired[str | None],
})

Video = TypedDict("Video", {
    "__typename": str,
    "imageUrl": str,
    "id": str,
    "provider": str,
})

Media = TypedDict("Media", {
    "__typename": str,
    "photos": list[MediaKey],
    "floorPlans": list[MediaKey] | None,
    "videos": list[Video] | None,
    "tour3dUrl": str | None,
    "assetCount": int,
})

ListingAmenities = TypedDict("ListingAmenities", {
    "__typename": str,
    "list": list[str],
    "doormanTypes": list[str],
    "parkingTypes": list[str],
    "sharedOutdoorSpaceTypes": list[str],
    "storageSpaceTypes": list[str],
})

PropertyFeatures = TypedDict("PropertyFeatures", {
    "__typename": str,
    "list": list[str],
    "fireplaceTypes": list[str],
    "privateOutdoorSpaceTypes": list[str],
    "views": list[str],
})

PropertyDetails = TypedDict("PropertyDetails", {
    "__typename": str,
    "address": Address,
    "roomCount": int | None,
    "bedroomCount": int,
    "fullBathroomCount": int,
    "halfBathroomCount": int,
    "livingAreaSize": int | None,
    "amenities": ListingAmenities,
    "features": PropertyFeatures,
})

PriceChange = TypedDict("PriceChange", {
    "__typename": str,
    "changedAt": str,
})

RentalPricing = TypedDict("RentalPricing", {
    "__typename": str,
    "leaseTermMonths": int | None,
    "monthsFree": float | None,
    "noFee": bool,
    "price": float,
    "priceDelta": float | None,
    "priceChanges": list[PriceChange],
})

PriceStats = TypedDict("PriceStats", {
    "__typename": str,
    "medianPrice": float | None,
})

NeighborhoodPriceStats = TypedDict("NeighborhoodPriceStats", {
    "__typename": str,
    "rentalPriceStats": PriceStats | None,
    "salePriceStats": PriceStats | None,
})

OpenHouse = TypedDict("OpenHouse", {
    "__typename": str,
    "id": str,
    "startTime": str,
    "endTime": str,
    "appointmentOnly": bool,
})

RentalEventOfInterest = TypedDict("RentalEventOfInterest", {
    "__typename": str,
    "date": str,
    "price": float,
    "pricePercentChange": NotRequired[float | None],
    "status": NotRequired[str],
})

RentalListingChangesOfInterest = TypedDict("RentalListingChangesOfInterest", {
    "__typename": str,
    "listingId": str,
    "sourceGroupLabel": str,
    "photos": list[MediaKey],
    "offMarketAt": str | None,
    "rentalEventsOfInterest": list[RentalEventOfInterest],
})

RentalStatusChange = TypedDict("RentalStatusChange", {
    "__typename": str,
    "status": str,
    "changedAt": str,
})

DetailedRentalListing = TypedDict("DetailedRentalListing", {
    "__typename": str,
    "id": str,
    "offMarketAt": str | None,
    "availableAt": str | None,
    "buildingId": str,
    "status": str,
    "statusChanges": list[RentalStatusChange],
    "createdAt": str,
    "updatedAt": str,
    "interestingChangeAt": str,
    "description": str,
    "media": Media,
    "propertyDetails": PropertyDetails,
    "mlsNumber": str | None,
    "backOffice": dict[str, Any] | None,
    "pricing": RentalPricing,
    "recentListingsPriceStats": NeighborhoodPriceStats | None,
    "upcomingOpenHouses": list[OpenHouse],
    "listingSource": dict[str, Any] | None,
    "propertyHistory": list[RentalListingChangesOfInterest],
})

PetPolicy = TypedDict("PetPolicy", {
    "__typename": str,
    "catsAllowed": bool,
    "dogsAllowed": bool,
    "maxDogWeight": int | None,
    "restrictedDogBreeds": list[str],
})

Policies = TypedDict("Policies", {
    "__typename": str,
    "list": list[str],
    "petPolicy": PetPolicy | None,
})

Geo = TypedDict("Geo", {
    "__typename": str,
    "latitude": float,
    "longitude": float,
})

TransitStation = TypedDict("TransitStation", {
    "__typename": str,
    "name": str,
    "distance": float,
    "routes": list[str],
    "geo": Geo,
})

Building = TypedDict("Building", {
    "__typename": str,
    "id": str,
    "name": str | None,
    "type": str,
    "residentialUnitCount": int | None,
    "yearBuilt": int | None,
    "status": str,
    "additionalDetails": dict[str, Any] | None,
    "address": Address,
    "heroImage": MediaKey | None,
    "media": Media | None,
    "complex": dict[str, Any] | None,
    "area": dict[str, Any],
    "saleInventorySummary": dict[str, Any] | None,
    "rentalInventorySummary": dict[str, Any] | None,
    "isLandLease": bool | None,
    "policies": Policies | None,
    "nearby": dict[str, list[TransitStation]] | None,
})

SchoolExpress = TypedDict("SchoolExpress", {
    "__typename": str,
    "name": str,
    "district": str,
    "grades": list[str],
    "id": str,
    "idstr": str,
    "geoCenter": Geo,
})

BuildingExpress = TypedDict("BuildingExpress", {
    "__typename": str,
    "nearbySchools": list[SchoolExpress],
})

RelloExpress = TypedDict("RelloExpress", {
    "__typename": str,
    "rentalId": str,
    "ctaEnabled": bool,
    "link": str,
})

RentalListingExpress = TypedDict("RentalListingExpress", {
    "__typename": str,
    "hasActiveBuildingShowcase": bool,
})

RentalListingDetailsResponse = TypedDict("RentalListingDetailsResponse", {
    "rentalByListingId": DetailedRentalListing | None,
    "buildingByRentalListingId": Building | None,
    "getBuildingExpressByRentalListingId": BuildingExpress | None,
    "getRelloRentalById": RelloExpress | None,
    "getRentalListingExpressById": RentalListingExpress | None,
})
