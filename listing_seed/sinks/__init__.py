"""Output sinks for exporting seeded data."""

from listing_seed.sinks.json_file import JsonFileSink
from listing_seed.sinks.serialization import serialize_value, to_document

__all__ = ["JsonFileSink", "serialize_value", "to_document"]
