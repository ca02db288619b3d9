"""Presentation layer for the Users context."""
