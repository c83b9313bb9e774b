"""E-wallet top-up service: SQLite storage, top-up limits, bank checks and a JSON API."""

__version__ = "1.0.0"