"""PostgreSQL-backed document store (one JSONB table per record kind)."""

from __future__ import annotations

import logging

import psycopg
from psycopg import errors as pg_errors
from psycopg.types.json import Jsonb

from listing_seed.exceptions import ReferentialIntegrityError, StoreError
from listing_seed.models import Account, Listing
from listing_seed.sinks.serialization import to_document

logger = logging.getLogger(__name__)

ACCOUNTS_TABLE = "seed_accounts"
LISTINGS_TABLE = "seed_listings"

CREATE_TABLES = (
    f"""
    CREATE TABLE IF NOT EXISTS {ACCOUNTS_TABLE} (
        id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
        username text NOT NULL UNIQUE,
        email text NOT NULL UNIQUE,
        document jsonb NOT NULL,
        created_at timestamptz NOT NULL DEFAULT now()
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS {LISTINGS_TABLE} (
        id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
        user_ref uuid NOT NULL REFERENCES {ACCOUNTS_TABLE} (id) ON DELETE CASCADE,
        document jsonb NOT NULL,
        created_at timestamptz NOT NULL DEFAULT now()
    )
    """,
)


class PostgresDocumentStore:
    """Store accounts and listings as JSONB documents.

    The connection is opened on first use and released by :meth:`close`;
    a closed store reconnects transparently if used again.

    Parameters
    ----------
    connection_string : str
        libpq connection string or URL.
    create_tables : bool
        Create the document tables if they do not exist.
    """

    def __init__(self, connection_string: str, create_tables: bool = True) -> None:
        self.connection_string = connection_string
        self._create_tables = create_tables
        self._conn: psycopg.Connection | None = None

    def _connection(self) -> psycopg.Connection:
        if self._conn is None or self._conn.closed:
            try:
                self._conn = psycopg.connect(self.connection_string, autocommit=True)
            except psycopg.Error as e:
                raise StoreError(f"Could not connect to PostgreSQL: {e}") from e
            logger.info("Connected to PostgreSQL")
            if self._create_tables:
                try:
                    with self._conn.cursor() as cur:
                        for statement in CREATE_TABLES:
                            cur.execute(statement)
                except psycopg.Error as e:
                    self.close()
                    raise StoreError(f"Could not create document tables: {e}") from e
        return self._conn

    def _execute(self, query: str, params: tuple = ()) -> psycopg.Cursor:
        conn = self._connection()
        try:
            return conn.execute(query, params)
        except pg_errors.ForeignKeyViolation as e:
            raise ReferentialIntegrityError(str(e)) from e
        except psycopg.Error as e:
            raise StoreError(str(e)) from e

    def delete_all_accounts(self) -> int:
        return self._execute(f"DELETE FROM {ACCOUNTS_TABLE}").rowcount  # noqa: S608

    def delete_all_listings(self) -> int:
        return self._execute(f"DELETE FROM {LISTINGS_TABLE}").rowcount  # noqa: S608

    def create_account(self, account: Account) -> str:
        """Insert an account and return its id."""
        document = to_document(account, exclude=("account_id", "created_at"))
        row = self._execute(
            f"INSERT INTO {ACCOUNTS_TABLE} (username, email, document) "  # noqa: S608
            "VALUES (%s, %s, %s) RETURNING id, created_at",
            (account.username, account.email, Jsonb(document)),
        ).fetchone()
        account.account_id, account.created_at = str(row[0]), row[1]
        return account.account_id

    def create_listing(self, listing: Listing) -> str:
        """Insert a listing and return its id."""
        document = to_document(listing, exclude=("listing_id", "created_at"))
        row = self._execute(
            f"INSERT INTO {LISTINGS_TABLE} (user_ref, document) "  # noqa: S608
            "VALUES (%s, %s) RETURNING id, created_at",
            (listing.user_ref, Jsonb(document)),
        ).fetchone()
        listing.listing_id, listing.created_at = str(row[0]), row[1]
        return listing.listing_id

    def close(self) -> None:
        """Release the connection if one was opened."""
        if self._conn is not None and not self._conn.closed:
            self._conn.close()
            logger.info("Disconnected from PostgreSQL")
        self._conn = None
