"""
인덱스 생성 전체 흐름
docs 디렉토리 확인, 탐색, 자연 정렬, HTML 기록을 차례로 수행합니다.
"""

import logging
from pathlib import Path

from .config import Config
from .walker import walk_documents
from .natsort import sort_records
from .generator import write_index
from ..models.record import FileRecord

# 로깅 설정
logger = logging.getLogger(__name__)


class DocsDirectoryNotFoundError(FileNotFoundError):
    """탐색할 docs 디렉토리가 없을 때 발생합니다."""


def build_index(config: Config) -> int:
    """
    docs 디렉토리를 탐색하여 index.html을 생성합니다.

    Args:
        config: 인덱스 생성 설정

    Returns:
        인덱스에 포함된 파일 수

    Raises:
        DocsDirectoryNotFoundError: 루트 디렉토리가 없는 경우
        OSError: 탐색 또는 기록 중 I/O 오류가 발생한 경우
    """
    root_dir = Path(config.root_dir)
    if not root_dir.exists():
        raise DocsDirectoryNotFoundError(
            f"docs 디렉토리를 찾을 수 없습니다: {root_dir}"
        )

    logger.info(f"문서 탐색 시작: {root_dir}")
    paths = walk_documents(root_dir)
    logger.info(f"대상 파일 {len(paths)}개를 찾았습니다.")

    records = sort_records(FileRecord.from_path(path) for path in paths)
    write_index([record.path for record in records], config)
    return len(records)
