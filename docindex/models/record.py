"""File record data models used for natural sorting."""

import os
import re
from typing import List, Union
from dataclasses import dataclass, field

Token = Union[int, str]

# ASCII 숫자 구간과 나머지 구간
TOKEN_PATTERN = re.compile(r"(?P<number>[0-9]+)|(?P<text>[^0-9]+)")


def tokenize(name: str) -> List[Token]:
    """
    파일 이름을 숫자 구간과 문자 구간으로 나눕니다.

    숫자 구간은 정수로, 문자 구간은 소문자로 변환됩니다.

    Args:
        name: 파일 이름 (경로가 아닌 base name)

    Returns:
        등장 순서를 유지한 토큰 리스트
    """
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(name):
        if match.group("number") is not None:
            tokens.append(int(match.group("number")))
        else:
            tokens.append(match.group("text").lower())
    return tokens


@dataclass
class FileRecord:
    """정렬용 파일 경로와 토큰 목록을 담는 데이터 클래스"""

    path: str
    tokens: List[Token] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: str) -> "FileRecord":
        """경로의 파일 이름을 토큰화하여 레코드를 생성합니다."""
        return cls(path=path, tokens=tokenize(os.path.basename(path)))
