"""Shared infrastructure: settings, logging, observability, store connections."""
