"""Adapters – bindings to third-party HTTP frameworks."""
