"""
docindex - 문서 디렉토리 인덱스 생성기

docs 디렉토리를 재귀적으로 탐색하여 PDF 문서 목록을 자연 정렬하고
정적 index.html 페이지로 기록하는 패키지입니다.
"""

__version__ = "0.1.0"

# Core classes and functions
from .core.config import Config, validate_config
from .core.walker import walk_documents, matches_document
from .core.natsort import compare_tokens, compare_records, sort_records, natural_sort
from .core.generator import render_index, write_index
from .core.indexer import build_index, DocsDirectoryNotFoundError

# Data models
from .models.record import FileRecord, tokenize

# Utilities
from .utils.paths import relative_posix, encode_uri

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "Config",
    "validate_config",
    # Core functions
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
    # Data models
    "FileRecord",
    "tokenize",
    # Utilities
    "relative_posix",
    "encode_uri",
]
