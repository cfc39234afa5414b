"""List and discount price model."""

from __future__ import annotations

import math
from dataclasses import dataclass

from listing_seed.generators.base import BaseGenerator
from listing_seed.models import ListingType, PriceQuote

ROUNDING_UNIT = 1000


def floor_to_unit(value: float, unit: int = ROUNDING_UNIT) -> int:
    """Round ``value`` down to a whole multiple of ``unit``."""
    return math.floor(value / unit) * unit


@dataclass(frozen=True)
class PriceRule:
    """Pricing parameters for one transaction type."""

    base_range: tuple[int, int]
    per_bedroom: int  # Added per bedroom above REFERENCE_BEDROOMS (subtracted below)
    floor: int  # Lowest regular price ever quoted


class PriceModel(BaseGenerator):
    """Quote regular and discounted prices for a listing.

    regular = max(floor, floor_1000((base + (bedrooms - 2) * per_bedroom) * luxury))

    where ``luxury`` is 1.5 for luxury properties and 1 otherwise. An offer
    is made with probability 0.3 at 85-95% of the regular price, again
    rounded down to a whole thousand.
    """

    RULES: dict[ListingType, PriceRule] = {
        ListingType.SALE: PriceRule(base_range=(200_000, 2_000_000), per_bedroom=100_000, floor=100_000),
        ListingType.RENT: PriceRule(base_range=(1_000, 8_000), per_bedroom=500, floor=1_000),
    }
    REFERENCE_BEDROOMS = 2
    LUXURY_MULTIPLIER = 1.5
    OFFER_PROBABILITY = 0.3
    DISCOUNT_RANGE = (0.85, 0.95)

    def quote(self, listing_type: ListingType, bedrooms: int, luxury: bool) -> PriceQuote:
        """Draw a base price and quote the listing.

        Parameters
        ----------
        listing_type : ListingType
            SALE or RENT.
        bedrooms : int
            Bedroom count.
        luxury : bool
            Whether the luxury multiplier applies.

        Returns
        -------
        PriceQuote
            Regular price, discount price and offer flag.
        """
        base_price = self.rng.randint(*self.RULES[listing_type].base_range)
        regular = self.regular_price(listing_type, bedrooms, luxury, base_price)

        if self.rng.random() < self.OFFER_PROBABILITY:
            discounted = self.discount_price(regular, self.rng.uniform(*self.DISCOUNT_RANGE))
            if discounted is not None:
                return PriceQuote(regular_price=regular, discount_price=discounted, has_offer=True)

        return PriceQuote(regular_price=regular, discount_price=regular, has_offer=False)

    def regular_price(
        self,
        listing_type: ListingType,
        bedrooms: int,
        luxury: bool,
        base_price: int,
    ) -> int:
        """Regular price for a given base price (no randomness)."""
        rule = self.RULES[listing_type]
        price: float = base_price + (bedrooms - self.REFERENCE_BEDROOMS) * rule.per_bedroom
        if luxury:
            price *= self.LUXURY_MULTIPLIER
        return max(rule.floor, floor_to_unit(price))

    @staticmethod
    def discount_price(regular_price: int, multiplier: float) -> int | None:
        """Discounted price, or ``None`` when it would round down to nothing."""
        discounted = floor_to_unit(regular_price * multiplier)
        if discounted < ROUNDING_UNIT or discounted >= regular_price:
            return None
        return discounted
