"""Command-line interface for storage lookups."""
