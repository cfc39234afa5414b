"""Base generator class for all listing-seed generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from listing_seed.generators.pool import FakerPool


class BaseGenerator(ABC):
    """Base class for all data generators.

    Every random draw goes through ``self.rng`` (a ``random.Random``) or
    ``self.fake`` (a Faker instance), so a single seeded pair can be shared
    by all generators of one run and tests can inject deterministic sources.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Ignored for sources passed in.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Shared random source.
    fake : Faker | None
        Shared Faker instance.
    pool : FakerPool | None
        Pre-generated value pool. When provided, name/street/city lookups
        use ``pool.first_name()`` etc. instead of calling Faker.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
        fake: Faker | None = None,
        pool: FakerPool | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        if fake is None:
            fake = Faker(locale)
            if seed is not None:
                fake.seed_instance(seed)
        self.fake = fake
        self.pool = pool

    def _first_name(self) -> str:
        return self.pool.first_name() if self.pool else self.fake.first_name()

    def _last_name(self) -> str:
        return self.pool.last_name() if self.pool else self.fake.last_name()

    def _street(self) -> str:
        return self.pool.street() if self.pool else self.fake.street_name()

    def _city(self) -> str:
        return self.pool.city() if self.pool else self.fake.city()

    def _state(self) -> str:
        return self.pool.state() if self.pool else self.fake.state_abbr()

    def _postcode(self) -> str:
        return self.pool.postcode() if self.pool else self.fake.zipcode()

    def _company(self) -> str:
        return self.pool.company() if self.pool else self.fake.company()
