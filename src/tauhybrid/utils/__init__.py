"""Miscellaneous utilities shared across the package."""
