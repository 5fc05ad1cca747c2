"""Prompt Lab portfolio service built around an explicit Result type."""

__version__ = "0.1.0"
