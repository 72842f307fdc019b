"""
API module - HTTP transport for the entitlement API.
"""
