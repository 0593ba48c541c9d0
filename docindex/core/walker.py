"""
문서 디렉토리 탐색 모듈
루트 디렉토리를 재귀적으로 탐색하여 인덱스 대상 파일의 절대 경로를 수집합니다.
"""

import os
import logging
from typing import List, Union

# 로깅 설정
logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"
JPG_SUFFIX = "jpg"


def matches_document(name: str, is_file: bool) -> bool:
    """
    디렉토리 항목이 인덱스 대상인지 판단합니다.

    ".pdf" 조건에만 일반 파일 여부가 적용되고, "jpg"로 끝나는 항목은
    종류와 관계없이 포함됩니다.

    Args:
        name: 항목 이름
        is_file: 일반 파일 여부 (심볼릭 링크는 따라가지 않음)

    Returns:
        인덱스 대상 여부
    """
    return (is_file and name.endswith(PDF_SUFFIX)) or name.endswith(JPG_SUFFIX)


def walk_documents(root_dir: Union[str, os.PathLike]) -> List[str]:
    """
    루트 디렉토리 아래의 모든 대상 파일을 수집합니다.

    각 디렉토리의 목록을 모두 읽은 뒤 하위 디렉토리로 내려갑니다.
    결과는 정렬되지 않은 탐색 순서입니다.

    Args:
        root_dir: 탐색할 루트 디렉토리

    Returns:
        대상 파일들의 절대 경로 리스트

    Raises:
        OSError: 디렉토리를 읽을 수 없는 경우
    """
    root = os.path.abspath(os.fspath(root_dir))
    logger.debug(f"디렉토리 탐색 중: {root}")

    with os.scandir(root) as iterator:
        entries = list(iterator)

    results = []
    for entry in entries:
        full_path = os.path.join(root, entry.name)
        if entry.is_dir(follow_symlinks=False):
            results.extend(walk_documents(full_path))
        elif matches_document(entry.name, entry.is_file(follow_symlinks=False)):
            results.append(full_path)
    return results
