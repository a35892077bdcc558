"""Utility modules: logging setup and error handling."""
