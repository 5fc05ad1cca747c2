"""
Shared utilities module.

This module contains common utilities used across all layers of the application,
including Result types for functional error handling and logging configuration.
"""

from promptlab.shared.result import Failure, Result, Success, UnwrapError, failure, success

__all__ = ["Success", "Failure", "Result", "UnwrapError", "success", "failure"]
