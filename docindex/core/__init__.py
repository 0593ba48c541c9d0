"""Core functionality for docindex package."""

from .config import Config, validate_config
from .walker import walk_documents, matches_document
from .natsort import compare_tokens, compare_records, sort_records, natural_sort
from .generator import render_index, write_index
from .indexer import build_index, DocsDirectoryNotFoundError

__all__ = [
    "Config",
    "validate_config",
    "walk_documents",
    "matches_document",
    "compare_tokens",
    "compare_records",
    "sort_records",
    "natural_sort",
    "render_index",
    "write_index",
    "build_index",
    "DocsDirectoryNotFoundError",
]
