"""
환경 설정 및 구성 관리
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

DOCS_DIR_NAME = "docs"
INDEX_FILE_NAME = "index.html"
DEFAULT_TITLE = "Michael Basman Legacy Audio Cassette Booklets"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """인덱스 생성 설정 클래스"""

    # 탐색 루트와 출력 파일
    root_dir: Path = Path(DOCS_DIR_NAME)
    output_path: Path = Path(DOCS_DIR_NAME) / INDEX_FILE_NAME

    # 페이지 제목
    title: str = DEFAULT_TITLE

    # 로깅 설정
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def __post_init__(self):
        self.root_dir = Path(self.root_dir)
        self.output_path = Path(self.output_path)

    @classmethod
    def for_directory(cls, base_dir: Union[str, os.PathLike], **kwargs) -> "Config":
        """
        지정한 디렉토리 아래의 docs 폴더를 사용하는 설정을 만듭니다.

        Args:
            base_dir: docs 디렉토리를 포함하는 디렉토리
            **kwargs: 나머지 Config 필드

        Returns:
            Config 인스턴스
        """
        root = Path(base_dir) / DOCS_DIR_NAME
        return cls(root_dir=root, output_path=root / INDEX_FILE_NAME, **kwargs)

    @property
    def log_level_known(self) -> bool:
        """LOG_LEVEL이 logging 모듈의 레벨 이름인지 여부"""
        return self.log_level.upper() in LOG_LEVELS

    @property
    def logging_level(self) -> int:
        """logging 모듈의 레벨 값. 알 수 없는 이름이면 INFO를 사용합니다."""
        if not self.log_level_known:
            return logging.INFO
        return getattr(logging, self.log_level.upper())

    def validate(self) -> List[str]:
        """설정 유효성 검사"""
        errors = []

        if not str(self.root_dir):
            errors.append("root_dir이 설정되지 않았습니다.")

        if not self.output_path.name:
            errors.append("output_path에 파일 이름이 없습니다.")

        if not self.title.strip():
            errors.append("title은 비어 있을 수 없습니다.")

        return errors


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
