"""Pre-generated value pools for fast data generation.

Replaces per-call Faker invocations with O(1) ``choice()`` lookups from
pre-populated pools. Worth it for large batches where the same handful of
Faker providers (names, streets, cities) is hit once per record.

Usage::

    pool = FakerPool(seed=42)
    street = pool.street()      # choice from 1 000 street names
"""

from __future__ import annotations

import random

from faker import Faker


class FakerPool:
    """Pre-generated pools of Faker values for fast random selection.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_US``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    rng : random.Random | None
        Random source used for lookups. Defaults to a ``random.Random``
        seeded with ``seed``.
    """

    # Default pool sizes, balancing variety against startup cost
    DEFAULT_SIZES: dict[str, int] = {
        "first_name": 1000,
        "last_name": 1000,
        "street": 1000,
        "city": 500,
        "postcode": 500,
        "company": 500,
    }

    def __init__(
        self,
        locale: str = "en_US",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
        self._rng = rng if rng is not None else random.Random(seed)

        self._first_names: list[str] = [fake.first_name() for _ in range(sizes["first_name"])]
        self._last_names: list[str] = [fake.last_name() for _ in range(sizes["last_name"])]
        self._streets: list[str] = [fake.street_name() for _ in range(sizes["street"])]
        self._cities: list[str] = [fake.city() for _ in range(sizes["city"])]
        self._postcodes: list[str] = [fake.zipcode() for _ in range(sizes["postcode"])]
        self._companies: list[str] = [fake.company() for _ in range(sizes["company"])]

        # All state abbreviations the locale knows about
        self._states: list[str] = sorted({fake.state_abbr() for _ in range(500)})

    def first_name(self) -> str:
        """Return a random first name."""
        return self._rng.choice(self._first_names)

    def last_name(self) -> str:
        """Return a random last name."""
        return self._rng.choice(self._last_names)

    def street(self) -> str:
        """Return a random street name."""
        return self._rng.choice(self._streets)

    def city(self) -> str:
        """Return a random city name."""
        return self._rng.choice(self._cities)

    def state(self) -> str:
        """Return a random state abbreviation."""
        return self._rng.choice(self._states)

    def postcode(self) -> str:
        """Return a random ZIP code."""
        return self._rng.choice(self._postcodes)

    def company(self) -> str:
        """Return a random company name."""
        return self._rng.choice(self._companies)
