"""Domain models for synthetic accounts and listings."""

from listing_seed.models.account import Account, Identity
from listing_seed.models.base import Address
from listing_seed.models.enums import Amenity, ImageCategory, ListingType, PropertyStyle
from listing_seed.models.listing import Listing, PriceQuote, PropertyAttributes

__all__ = [
    "Account",
    "Address",
    "Amenity",
    "Identity",
    "ImageCategory",
    "Listing",
    "ListingType",
    "PriceQuote",
    "PropertyAttributes",
    "PropertyStyle",
]
