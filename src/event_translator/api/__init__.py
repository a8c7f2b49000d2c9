"""HTTP API for the event translation service."""
