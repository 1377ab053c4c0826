"""Core models, configuration, and errors.

This package holds the typed models and parsing helpers shared by the
API client, the selector, the data-source adapter, and the CLI.
"""
