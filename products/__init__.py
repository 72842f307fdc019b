"""
Products module - the product catalog.

This module handles:
- Product entity and publication status
- ProductCatalog port
- Product infrastructure (Django ORM adapter)
"""
