"""Observability – health checks and structured logging."""
