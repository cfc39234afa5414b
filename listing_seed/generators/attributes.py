"""Property attribute synthesis."""

from __future__ import annotations

from listing_seed.generators.address import AddressGenerator
from listing_seed.generators.base import BaseGenerator
from listing_seed.models import Amenity, ListingType, PropertyAttributes, PropertyStyle


def bathrooms_for(bedrooms: int) -> int:
    """Bathroom count implied by a bedroom count (at least one)."""
    return max(1, round(bedrooms * 0.7))


class AttributeSynthesizer(BaseGenerator):
    """Derive the structural attributes of a property.

    Also draws the listing-level flags (transaction type, furnished,
    parking) that do not depend on the structure.
    """

    STYLES = list(PropertyStyle)
    AMENITIES = list(Amenity)
    BEDROOM_RANGE = (1, 6)
    AMENITY_COUNT_RANGE = (4, 8)

    LUXURY_PROBABILITY = 0.2
    SALE_PROBABILITY = 0.4
    FURNISHED_PROBABILITY = 0.5
    PARKING_PROBABILITY = 0.7

    def __init__(self, address_generator: AddressGenerator | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._address_gen = address_generator or AddressGenerator(
            rng=self.rng, fake=self.fake, pool=self.pool
        )

    def synthesize(self) -> PropertyAttributes:
        """Synthesize one property.

        Returns
        -------
        PropertyAttributes
            Style, room counts, luxury flag, amenities and address.
        """
        bedrooms = self.rng.randint(*self.BEDROOM_RANGE)
        return PropertyAttributes(
            style=self.rng.choice(self.STYLES),
            bedrooms=bedrooms,
            bathrooms=bathrooms_for(bedrooms),
            luxury=self.rng.random() < self.LUXURY_PROBABILITY,
            amenities=self.pick_amenities(),
            address=self._address_gen.generate(),
        )

    def pick_amenities(self) -> tuple[Amenity, ...]:
        """Draw 4-8 distinct amenities, keeping the draw order."""
        count = self.rng.randint(*self.AMENITY_COUNT_RANGE)
        return tuple(self.rng.sample(self.AMENITIES, count))

    def listing_type(self) -> ListingType:
        return ListingType.SALE if self.rng.random() < self.SALE_PROBABILITY else ListingType.RENT

    def furnished(self) -> bool:
        return self.rng.random() < self.FURNISHED_PROBABILITY

    def parking(self) -> bool:
        return self.rng.random() < self.PARKING_PROBABILITY
