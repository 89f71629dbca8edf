"""blogkeep -- a single-user blog kept in one JSON file."""

__version__ = "0.1.0"
