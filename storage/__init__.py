"""
Storage module - signed download URLs for product files.

This module handles:
- SignedUrlProvider port
- Storage credentials (settings store)
- S3 adapter (boto3)
"""
