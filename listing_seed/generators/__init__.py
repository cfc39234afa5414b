"""Synthetic data generators for accounts and listings."""

from listing_seed.generators.address import AddressGenerator
from listing_seed.generators.attributes import AttributeSynthesizer, bathrooms_for
from listing_seed.generators.identity import IdentityAllocator
from listing_seed.generators.media import MediaGenerator
from listing_seed.generators.narrative import NarrativeComposer
from listing_seed.generators.pool import FakerPool
from listing_seed.generators.price import PriceModel, floor_to_unit

__all__ = [
    "AddressGenerator",
    "AttributeSynthesizer",
    "FakerPool",
    "IdentityAllocator",
    "MediaGenerator",
    "NarrativeComposer",
    "PriceModel",
    "bathrooms_for",
    "floor_to_unit",
]
