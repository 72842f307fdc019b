"""
Licenses module - license records, validation and the entitlement API core.

This module handles:
- License entity and expiry rules
- License validation (exact match + expiry)
- LicenseStore port and Django ORM adapter
- Entitlement dispatch (info / get actions)
"""
