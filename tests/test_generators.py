"""Tests for data generators."""

import random
import re
from unittest.mock import MagicMock

import pytest

from listing_seed.exceptions import FatalBatchError, IdentityExhaustedError
from listing_seed.generators import (
    AddressGenerator,
    AttributeSynthesizer,
    FakerPool,
    IdentityAllocator,
    MediaGenerator,
    NarrativeComposer,
    PriceModel,
    bathrooms_for,
    floor_to_unit,
)
from listing_seed.models import Amenity, ImageCategory, ListingType, PropertyStyle

# 1_700_000_000.125 s is exact in binary, so the millisecond suffix is "0125"
FIXED_CLOCK = lambda: 1_700_000_000.125  # noqa: E731


def scripted_rng(**methods) -> MagicMock:
    """random.Random stand-in returning scripted values."""
    rng = MagicMock(spec=random.Random)
    for name, value in methods.items():
        if isinstance(value, list):
            getattr(rng, name).side_effect = value
        else:
            getattr(rng, name).return_value = value
    return rng


class TestIdentityAllocator:
    """Tests for IdentityAllocator."""

    def test_candidate_format(self) -> None:
        gen = IdentityAllocator(clock=FIXED_CLOCK, rng=scripted_rng(randint=7))

        assert gen.candidate_username("Jane", "Doe") == "janedoe0125007"
        assert gen.candidate_email("Jane", "Doe") == "jane.doe0125007@example.com"

    def test_allocate_registers_values(self, seed: int) -> None:
        gen = IdentityAllocator(seed=seed)
        used_usernames: set[str] = set()
        used_emails: set[str] = set()

        identity = gen.allocate("Jane", "DOE", used_usernames, used_emails)

        assert identity.username in used_usernames
        assert identity.email in used_emails
        assert re.fullmatch(r"janedoe\d{7}", identity.username)
        assert re.fullmatch(r"jane\.doe\d{7}@example\.com", identity.email)

    def test_collision_redraws_suffix(self) -> None:
        gen = IdentityAllocator(clock=FIXED_CLOCK, rng=scripted_rng(randint=[1, 1, 2, 7]))
        used_usernames = {"janedoe0125001"}
        used_emails: set[str] = set()

        identity = gen.allocate("Jane", "Doe", used_usernames, used_emails)

        assert identity.username == "janedoe0125002"
        assert identity.email == "jane.doe0125007@example.com"
        assert used_usernames == {"janedoe0125001", "janedoe0125002"}

    def test_email_checked_against_its_own_set(self) -> None:
        gen = IdentityAllocator(clock=FIXED_CLOCK, rng=scripted_rng(randint=[3, 3, 4]))
        used_emails = {"jane.doe0125003@example.com"}

        identity = gen.allocate("Jane", "Doe", set(), used_emails)

        assert identity.username == "janedoe0125003"
        assert identity.email == "jane.doe0125004@example.com"

    def test_exhaustion_is_fatal(self) -> None:
        gen = IdentityAllocator(clock=FIXED_CLOCK, rng=scripted_rng(randint=5), max_attempts=3)
        used_usernames = {"janedoe0125005"}

        with pytest.raises(IdentityExhaustedError, match="after 3 attempts"):
            gen.allocate("Jane", "Doe", used_usernames, set())

        assert issubclass(IdentityExhaustedError, FatalBatchError)

    def test_many_allocations_unique(self, seed: int) -> None:
        gen = IdentityAllocator(seed=seed)
        used_usernames: set[str] = set()
        used_emails: set[str] = set()

        identities = [gen.allocate_random(used_usernames, used_emails) for _ in range(300)]

        assert len({i.username.lower() for i in identities}) == 300
        assert len({i.email.lower() for i in identities}) == 300
        assert all(i.username == i.username.lower() for i in identities)

    def test_random_name(self, seed: int) -> None:
        first, last = IdentityAllocator(seed=seed).random_name()

        assert first and last


class TestAttributeSynthesizer:
    """Tests for AttributeSynthesizer."""

    @pytest.mark.parametrize(
        "bedrooms,expected",
        [(1, 1), (2, 1), (3, 2), (4, 3), (5, 4), (6, 4)],
    )
    def test_bathrooms_for(self, bedrooms: int, expected: int) -> None:
        assert bathrooms_for(bedrooms) == expected

    def test_synthesize_invariants(self, shared: dict) -> None:
        gen = AttributeSynthesizer(**shared)

        for _ in range(300):
            attrs = gen.synthesize()

            assert 1 <= attrs.bedrooms <= 6
            assert attrs.bathrooms == max(1, round(attrs.bedrooms * 0.7))
            assert 4 <= len(attrs.amenities) <= 8
            assert len(set(attrs.amenities)) == len(attrs.amenities)
            assert all(isinstance(a, Amenity) for a in attrs.amenities)
            assert isinstance(attrs.style, PropertyStyle)
            assert isinstance(attrs.luxury, bool)

    def test_distribution_covers_range(self, shared: dict) -> None:
        gen = AttributeSynthesizer(**shared)
        samples = [gen.synthesize() for _ in range(500)]

        assert {a.bedrooms for a in samples} == {1, 2, 3, 4, 5, 6}
        assert {len(a.amenities) for a in samples} == {4, 5, 6, 7, 8}
        # Luxury is a 20% draw
        assert 50 < sum(a.luxury for a in samples) < 150

    def test_listing_level_flags(self, shared: dict) -> None:
        gen = AttributeSynthesizer(**shared)
        types = [gen.listing_type() for _ in range(500)]

        assert set(types) == {ListingType.SALE, ListingType.RENT}
        assert 120 < types.count(ListingType.SALE) < 280
        assert isinstance(gen.furnished(), bool)
        assert isinstance(gen.parking(), bool)

    def test_scripted_draws(self) -> None:
        rng = scripted_rng(random=0.1)
        gen = AttributeSynthesizer(rng=rng)

        assert gen.listing_type() == ListingType.SALE
        assert gen.furnished() is True
        assert gen.parking() is True

    def test_address_is_populated(self, shared: dict) -> None:
        attrs = AttributeSynthesizer(**shared).synthesize()

        assert re.fullmatch(r"\S+ .+, .+, [A-Z]{2} \d{5}", str(attrs.address))

    def test_same_seed_same_attributes(self, seed: int) -> None:
        a = AttributeSynthesizer(seed=seed).synthesize()
        b = AttributeSynthesizer(seed=seed).synthesize()

        assert a == b


class TestPriceModel:
    """Tests for PriceModel."""

    def test_floor_to_unit(self) -> None:
        assert floor_to_unit(600000) == 600000
        assert floor_to_unit(1999.5) == 1000
        assert floor_to_unit(999) == 0

    def test_sale_three_bedrooms(self) -> None:
        model = PriceModel(seed=1)

        assert model.regular_price(ListingType.SALE, 3, False, 500000) == 600000

    def test_luxury_multiplier(self) -> None:
        model = PriceModel(seed=1)

        assert model.regular_price(ListingType.SALE, 3, True, 500000) == 900000

    def test_one_bedroom_discounts_base(self) -> None:
        model = PriceModel(seed=1)

        assert model.regular_price(ListingType.SALE, 1, False, 250500) == 150000
        assert model.regular_price(ListingType.RENT, 1, False, 4200) == 3000

    def test_rounds_down_to_thousand(self) -> None:
        model = PriceModel(seed=1)

        assert model.regular_price(ListingType.RENT, 2, True, 1333) == 1000
        assert model.regular_price(ListingType.RENT, 4, False, 2999) == 3000
        assert model.regular_price(ListingType.RENT, 3, False, 2999) == 3000

    def test_rent_floor_clamp(self) -> None:
        model = PriceModel(seed=1)

        # 1000 - 500 = 500 would round down to 0
        assert model.regular_price(ListingType.RENT, 1, False, 1000) == 1000

    def test_quote_without_offer(self) -> None:
        model = PriceModel(rng=scripted_rng(randint=500000, random=0.99))

        quote = model.quote(ListingType.SALE, 3, False)

        assert quote.regular_price == 600000
        assert quote.discount_price == 600000
        assert quote.has_offer is False

    def test_quote_with_offer(self) -> None:
        model = PriceModel(rng=scripted_rng(randint=500000, random=0.1, uniform=0.875))

        quote = model.quote(ListingType.SALE, 3, False)

        assert quote.regular_price == 600000
        assert quote.discount_price == 525000
        assert quote.has_offer is True

    def test_offer_dropped_when_discount_rounds_to_zero(self) -> None:
        model = PriceModel(rng=scripted_rng(randint=1000, random=0.1, uniform=0.9))

        quote = model.quote(ListingType.RENT, 1, False)

        assert quote.regular_price == 1000
        assert quote.discount_price == 1000
        assert quote.has_offer is False

    def test_discount_price(self) -> None:
        assert PriceModel.discount_price(600000, 0.875) == 525000
        assert PriceModel.discount_price(1000, 0.95) is None

    @pytest.mark.parametrize("listing_type", list(ListingType))
    def test_quote_invariants(self, listing_type: ListingType, shared: dict) -> None:
        model = PriceModel(**shared)
        offers = 0

        for bedrooms in range(1, 7):
            for luxury in (False, True):
                for _ in range(40):
                    quote = model.quote(listing_type, bedrooms, luxury)
                    floor = PriceModel.RULES[listing_type].floor

                    assert quote.regular_price % 1000 == 0
                    assert quote.regular_price >= floor
                    if quote.has_offer:
                        offers += 1
                        assert quote.discount_price < quote.regular_price
                        assert quote.discount_price % 1000 == 0
                        assert quote.discount_price > 0
                    else:
                        assert quote.discount_price == quote.regular_price

        assert offers > 0


class TestNarrativeComposer:
    """Tests for NarrativeComposer."""

    AMENITIES = (Amenity.FIREPLACE, Amenity.CENTRAL_AIR, Amenity.KITCHEN_ISLAND, Amenity.DOUBLE_VANITY)

    def test_name_mentions_style(self, shared: dict) -> None:
        gen = NarrativeComposer(**shared)

        for _ in range(50):
            name = gen.compose_name(PropertyStyle.CRAFTSMAN, ListingType.RENT)
            assert "Craftsman" in name

    def test_name_suffix_follows_type(self, shared: dict) -> None:
        gen = NarrativeComposer(**shared)

        sale_names = [gen.compose_name(PropertyStyle.VICTORIAN, ListingType.SALE) for _ in range(200)]
        rent_names = [gen.compose_name(PropertyStyle.VICTORIAN, ListingType.RENT) for _ in range(200)]

        assert any(n.endswith("Victorian Estate") for n in sale_names)
        assert not any(n.endswith("Victorian Residence") for n in sale_names)
        assert any(n.endswith("Victorian Residence") for n in rent_names)
        assert not any(n.endswith("Victorian Estate") for n in rent_names)

    def test_all_templates_used(self, shared: dict) -> None:
        gen = NarrativeComposer(**shared)
        names = [gen.compose_name(PropertyStyle.TUDOR, ListingType.SALE) for _ in range(300)]

        assert any(n.startswith("The ") and " at " in n for n in names)
        assert any(n.startswith("Tudor on ") for n in names)
        assert any(n.endswith(" Tudor Living") for n in names)
        assert any(n.endswith(" Tudor Estate") for n in names)

    def test_adjectives_come_from_faker(self) -> None:
        fake = MagicMock()
        fake.word.return_value = "quiet"
        gen = NarrativeComposer(rng=scripted_rng(choice="The {adjective} {style}"), fake=fake)

        assert gen.compose_name(PropertyStyle.TUDOR, ListingType.SALE) == "The Quiet Tudor"
        fake.word.assert_called_with(part_of_speech="adjective")

    def test_long_adjective_redraws_until_length_fits(self) -> None:
        fake = MagicMock()
        fake.word.side_effect = ["environmental", "odd", "bright"]
        gen = NarrativeComposer(seed=1, fake=fake)

        assert gen.long_adjective() == "bright"
        assert fake.word.call_count == 3

    def test_long_adjective_exhausted(self) -> None:
        fake = MagicMock()
        fake.word.return_value = "significant"
        gen = NarrativeComposer(seed=1, fake=fake)

        with pytest.raises(ValueError, match="5-8 letters"):
            gen.long_adjective()

        assert fake.word.call_count == NarrativeComposer.MAX_ADJECTIVE_DRAWS

    def test_long_adjective_length(self, shared: dict) -> None:
        gen = NarrativeComposer(**shared)

        for _ in range(50):
            assert 5 <= len(gen.long_adjective()) <= 8

    def test_description_sections(self, shared: dict) -> None:
        text = NarrativeComposer(**shared).compose_description(3, PropertyStyle.VICTORIAN, self.AMENITIES)

        assert text == text.strip()
        assert "This stunning Victorian home features 3 bedrooms and showcases:" in text
        assert "Location Highlights:" in text
        assert "• Easy access to major highways" in text
        assert re.search(r"• Walking distance to .+ Park", text)
        assert re.search(r"• Near .+ Shopping Center", text)

    def test_description_amenities_in_order(self, shared: dict) -> None:
        text = NarrativeComposer(**shared).compose_description(2, PropertyStyle.MODERN, self.AMENITIES)
        bullets = [line[2:] for line in text.splitlines() if line.startswith("• ")]

        assert bullets[:4] == [a.value for a in self.AMENITIES]

    def test_description_distance(self, shared: dict) -> None:
        gen = NarrativeComposer(**shared)

        for _ in range(50):
            text = gen.compose_description(4, PropertyStyle.MODERN, self.AMENITIES)
            match = re.search(r"• (\d+\.\d) miles to .+ center", text)

            assert match
            assert 0.5 <= float(match.group(1)) <= 5.0


class TestMediaGenerator:
    """Tests for MediaGenerator."""

    def test_image_url(self) -> None:
        gen = MediaGenerator(rng=scripted_rng(randint=123))

        assert gen.image_url(ImageCategory.KITCHEN) == "https://loremflickr.com/640/480/kitchen?lock=123"

    def test_listing_images_standard(self, shared: dict) -> None:
        urls = MediaGenerator(**shared).listing_images(luxury=False)

        assert len(urls) == 4
        for url, category in zip(urls, ["house", "interior", "kitchen", "bedroom"]):
            assert f"/{category}?lock=" in url

    def test_listing_images_luxury(self, shared: dict) -> None:
        urls = MediaGenerator(**shared).listing_images(luxury=True)

        assert len(urls) == 5
        assert "/pool?lock=" in urls[-1]

    def test_avatar_url(self, shared: dict) -> None:
        url = MediaGenerator(**shared).avatar_url("janedoe0125001")

        assert url == "https://i.pravatar.cc/150?u=janedoe0125001"


class TestAddressGenerator:
    """Tests for AddressGenerator."""

    def test_generate(self, shared: dict) -> None:
        address = AddressGenerator(**shared).generate()

        assert address.number
        assert address.street
        assert address.city
        assert re.fullmatch(r"[A-Z]{2}", address.state)
        assert re.fullmatch(r"\d{5}", address.postal_code)


class TestFakerPool:
    """Tests for FakerPool."""

    SIZES = {"first_name": 5, "last_name": 5, "street": 5, "city": 5, "postcode": 5, "company": 5}

    def test_values_come_from_pool(self, seed: int) -> None:
        pool = FakerPool(seed=seed, pool_sizes=self.SIZES)

        for _ in range(20):
            assert pool.first_name() in pool._first_names
            assert pool.street() in pool._streets
            assert pool.city() in pool._cities
            assert pool.state() in pool._states

    def test_generators_use_pool(self, seed: int) -> None:
        pool = FakerPool(seed=seed, pool_sizes=self.SIZES)

        first, last = IdentityAllocator(seed=seed, pool=pool).random_name()
        address = AddressGenerator(seed=seed, pool=pool).generate()

        assert first in pool._first_names
        assert last in pool._last_names
        assert address.street in pool._streets
        assert address.postal_code in pool._postcodes

    def test_seeded_pools_match(self, seed: int) -> None:
        a = FakerPool(seed=seed, pool_sizes=self.SIZES)
        b = FakerPool(seed=seed, pool_sizes=self.SIZES)

        assert a._first_names == b._first_names
        assert [a.city() for _ in range(5)] == [b.city() for _ in range(5)]
