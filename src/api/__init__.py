"""P2PUB API access layer.

This package signs and sends system-storage list requests and converts
the JSON responses into typed storage records.
"""
