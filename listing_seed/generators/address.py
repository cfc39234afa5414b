"""Street address generation."""

from __future__ import annotations

from listing_seed.generators.base import BaseGenerator
from listing_seed.models.base import Address


class AddressGenerator(BaseGenerator):
    """Generate US street addresses for listings."""

    def generate(self) -> Address:
        """Generate an address.

        Returns
        -------
        Address
            Building number, street, city, state abbreviation and ZIP code.
        """
        return Address(
            number=self.fake.building_number(),
            street=self._street(),
            city=self._city(),
            state=self._state(),
            postal_code=self._postcode(),
        )
