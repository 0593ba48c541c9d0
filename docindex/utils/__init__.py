"""Utility functions for docindex package."""

from .paths import relative_posix, encode_uri

__all__ = ["relative_posix", "encode_uri"]
