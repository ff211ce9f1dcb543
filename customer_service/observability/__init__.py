"""Logging-only observability helpers.

Request IDs + structlog contextvars, rendered as one JSON line per event on
stdout. Shipping, metrics and tracing are left to the sidecar proxy.
"""
