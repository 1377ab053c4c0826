"""Data-source adapter layer.

This package maps host configuration maps onto typed selection requests
and turns the selected storage record into data-source state.
"""
