"""Data models for docindex package."""

from .record import FileRecord, Token, tokenize

__all__ = ["FileRecord", "Token", "tokenize"]
