"""In-memory query engine and HTTP API over geocoded building records."""

__version__ = "0.1.0"
