"""
Observability module.

Logging configuration, correlation ids, request middleware and the
Langfuse prompt registry.
"""
