"""Flask integration helpers for query parameter resolution."""
