"""Infrastructure layer for the Users context."""
