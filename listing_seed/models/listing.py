"""Property listing models."""

from dataclasses import dataclass, field
from datetime import datetime

from listing_seed.models.base import Address
from listing_seed.models.enums import Amenity, ListingType, PropertyStyle


@dataclass(frozen=True)
class PropertyAttributes:
    """Structural attributes of one synthesized property."""

    style: PropertyStyle
    bedrooms: int  # 1-6
    bathrooms: int  # max(1, round(bedrooms * 0.7))
    luxury: bool
    amenities: tuple[Amenity, ...]  # 4-8, distinct, in selection order
    address: Address


@dataclass(frozen=True)
class PriceQuote:
    """List price with optional discount, both in whole thousands."""

    regular_price: int
    discount_price: int
    has_offer: bool


@dataclass
class Listing:
    """Property listing owned by an account."""

    name: str
    description: str
    address: str
    regular_price: int
    discount_price: int
    bathrooms: int
    bedrooms: int
    furnished: bool
    parking: bool
    type: ListingType
    offer: bool
    user_ref: str  # account_id of the owner
    image_urls: list[str] = field(default_factory=list)
    listing_id: str | None = None  # Assigned by the document store
    created_at: datetime | None = None
