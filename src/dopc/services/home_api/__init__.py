"""Home Assignment API venue sources."""
