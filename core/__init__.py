"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- Middleware components
- Metrics, tracing and health checks
"""
