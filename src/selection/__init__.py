"""System-storage selection.

This package filters a fetched storage inventory and picks exactly one
record, or reports why no single record could be chosen.
"""
