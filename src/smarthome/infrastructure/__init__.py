"""Infrastructure: persistence and HTTP API."""
