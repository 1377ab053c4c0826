"""Test suite for storage lookups."""
