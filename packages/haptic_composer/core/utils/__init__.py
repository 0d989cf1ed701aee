"""Shared helpers: logging setup, formatting and math."""
