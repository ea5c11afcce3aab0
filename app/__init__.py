"""Entry points: interactive CLI and HTTP API."""
