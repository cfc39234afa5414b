"""Pytest configuration and fixtures."""

import random

import pytest
from faker import Faker

from listing_seed.config import BatchConfig
from listing_seed.models import Account
from listing_seed.store import InMemoryDocumentStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def shared(seed: int) -> dict:
    """Seeded random source and Faker instance shared by generators."""
    fake = Faker("en_US")
    fake.seed_instance(seed)
    return {"rng": random.Random(seed), "fake": fake}


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Create a fresh store for each test."""
    return InMemoryDocumentStore()


@pytest.fixture
def fast_batch() -> BatchConfig:
    """Small batch with the cheapest bcrypt cost factor."""
    return BatchConfig(num_accounts=5, num_listings=20, bcrypt_rounds=4)


@pytest.fixture
def sample_account() -> Account:
    """Sample account (not yet stored)."""
    return Account(
        username="janedoe0125001",
        email="jane.doe0125001@example.com",
        password_hash="$2b$04$abcdefghijklmnopqrstuu",
        avatar_url="https://i.pravatar.cc/150?u=janedoe0125001",
    )
