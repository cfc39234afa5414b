"""Synthetic account and property listing seeder."""

__version__ = "0.1.0"
