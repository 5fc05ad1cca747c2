"""
API layer module.

FastAPI routes, request models, and the adapters that turn Result values
into HTTP responses.
"""
