"""Avatar and listing photo URLs."""

from __future__ import annotations

from listing_seed.generators.base import BaseGenerator
from listing_seed.models import ImageCategory


class MediaGenerator(BaseGenerator):
    """Generate placeholder image URLs."""

    LISTING_CATEGORIES = (
        ImageCategory.HOUSE,
        ImageCategory.INTERIOR,
        ImageCategory.KITCHEN,
        ImageCategory.BEDROOM,
    )
    LUXURY_CATEGORIES = (ImageCategory.POOL,)

    PHOTO_URL = "https://loremflickr.com/{width}/{height}/"
    AVATAR_URL = "https://i.pravatar.cc/{width}"

    def image_url(self, category: ImageCategory) -> str:
        """Photo URL for a category; ``lock`` pins a specific image."""
        lock = self.rng.randint(1, 999_999)
        return self.fake.image_url(
            width=640,
            height=480,
            placeholder_url=f"{self.PHOTO_URL}{category.value}?lock={lock}",
        )

    def listing_images(self, luxury: bool) -> list[str]:
        """House, interior, kitchen and bedroom photos, plus a pool for luxury."""
        categories = self.LISTING_CATEGORIES + (self.LUXURY_CATEGORIES if luxury else ())
        return [self.image_url(category) for category in categories]

    def avatar_url(self, username: str) -> str:
        return self.fake.image_url(
            width=150,
            height=150,
            placeholder_url=f"{self.AVATAR_URL}?u={username}",
        )
