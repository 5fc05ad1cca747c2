"""
Domain layer module.

This module contains the core business logic for portfolio valuation.
It is independent of the HTTP layer and reports expected failures as Result values.

Key components:
- models.py: Domain models (Pydantic-based data structures) and ApiError
- valuation.py: Holding and portfolio valuation returning Result[..., ApiError]
"""
