"""Configuration management for listing-seed."""

import os
from dataclasses import dataclass, field

from listing_seed.exceptions import ConfigurationError

BACKENDS = ("memory", "postgres")


@dataclass
class BatchConfig:
    """Sizes and policies for one seeding run."""

    num_accounts: int = 50
    num_listings: int = 200
    password: str = "password123"
    bcrypt_rounds: int = 10
    max_account_attempts: int = 3
    account_progress_every: int = 10
    listing_progress_every: int = 20


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "listing_seed"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class SeedConfig:
    """Main configuration for listing-seed."""

    batch: BatchConfig = field(default_factory=BatchConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    backend: str = "memory"
    seed: int | None = None
    locale: str = "en_US"
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check value ranges.

        Raises
        ------
        ConfigurationError
            If a count is negative, the backend is unknown, or the
            bcrypt cost factor is outside the range bcrypt accepts.
        """
        if self.batch.num_accounts < 0:
            raise ConfigurationError(f"num_accounts must be >= 0, got {self.batch.num_accounts}")
        if self.batch.num_listings < 0:
            raise ConfigurationError(f"num_listings must be >= 0, got {self.batch.num_listings}")
        if self.batch.max_account_attempts < 1:
            raise ConfigurationError(
                f"max_account_attempts must be >= 1, got {self.batch.max_account_attempts}"
            )
        if self.batch.account_progress_every < 1 or self.batch.listing_progress_every < 1:
            raise ConfigurationError("progress intervals must be >= 1")
        if not 4 <= self.batch.bcrypt_rounds <= 31:
            raise ConfigurationError(
                f"bcrypt_rounds must be between 4 and 31, got {self.batch.bcrypt_rounds}"
            )
        if self.backend not in BACKENDS:
            raise ConfigurationError(
                f"Unknown backend {self.backend!r}, expected one of {', '.join(BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> "SeedConfig":
        """Create config from environment variables."""
        try:
            batch = BatchConfig(
                num_accounts=int(os.getenv("SEED_NUM_ACCOUNTS", "50")),
                num_listings=int(os.getenv("SEED_NUM_LISTINGS", "200")),
                password=os.getenv("SEED_PASSWORD", "password123"),
                bcrypt_rounds=int(os.getenv("SEED_BCRYPT_ROUNDS", "10")),
            )

            postgres = PostgresConfig(
                host=os.getenv("POSTGRES_HOST", "localhost"),
                port=int(os.getenv("POSTGRES_PORT", "5432")),
                database=os.getenv("POSTGRES_DB", "listing_seed"),
                user=os.getenv("POSTGRES_USER", "postgres"),
                password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            )

            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting in environment: {e}") from e

        return cls(
            batch=batch,
            postgres=postgres,
            backend=os.getenv("SEED_BACKEND", "memory"),
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
