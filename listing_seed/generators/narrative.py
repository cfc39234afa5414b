"""Listing name and description text."""

from __future__ import annotations

from collections.abc import Sequence

from listing_seed.generators.base import BaseGenerator
from listing_seed.models import Amenity, ListingType, PropertyStyle

NAME_TEMPLATES = (
    "The {adjective} {style}",
    "{street} {style} {suffix}",
    "{style} on {street}",
    "{long_adjective} {style} Living",
    "The {style} at {street}",
)

NAME_SUFFIXES = {
    ListingType.SALE: "Estate",
    ListingType.RENT: "Residence",
}


class NarrativeComposer(BaseGenerator):
    """Compose human-readable listing names and descriptions."""

    LONG_ADJECTIVE_LENGTH = (5, 8)
    MAX_ADJECTIVE_DRAWS = 200
    DISTANCE_RANGE = (0.5, 5.0)  # Miles to city center

    def compose_name(self, style: PropertyStyle, listing_type: ListingType) -> str:
        """Pick one of the name templates and fill it in."""
        fields = {
            "adjective": self.adjective().capitalize(),
            "long_adjective": self.long_adjective().capitalize(),
            "street": self._street(),
            "style": style.value,
            "suffix": NAME_SUFFIXES[listing_type],
        }
        return self.rng.choice(NAME_TEMPLATES).format(**fields)

    def adjective(self) -> str:
        return self.fake.word(part_of_speech="adjective")

    def long_adjective(self) -> str:
        """Adjective whose length lies within ``LONG_ADJECTIVE_LENGTH``."""
        lo, hi = self.LONG_ADJECTIVE_LENGTH
        for _ in range(self.MAX_ADJECTIVE_DRAWS):
            word = self.adjective()
            if lo <= len(word) <= hi:
                return word
        raise ValueError(f"No adjective of {lo}-{hi} letters in {self.MAX_ADJECTIVE_DRAWS} draws")

    def compose_description(
        self,
        bedrooms: int,
        style: PropertyStyle,
        amenities: Sequence[Amenity],
    ) -> str:
        """Build the multi-section listing description.

        Amenity bullets keep the order in which the amenities were drawn.
        """
        lead_in = "\n\n".join(self.fake.paragraphs(nb=2))
        features = "\n".join(f"• {amenity.value}" for amenity in amenities)
        distance = round(self.rng.uniform(*self.DISTANCE_RANGE), 1)

        description = f"""
{lead_in}

This stunning {style.value} home features {bedrooms} bedrooms and showcases:
{features}

{self.fake.paragraph()}

Location Highlights:
• {distance:.1f} miles to {self._city()} center
• Walking distance to {self._company()} Park
• Near {self._company()} Shopping Center
• Easy access to major highways

{self.fake.paragraph()}
        """
        return description.strip()
