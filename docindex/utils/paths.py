"""
인덱스 링크용 경로 변환 유틸리티
"""

import os
from urllib.parse import quote

# JavaScript encodeURI가 그대로 두는 예약 문자
URI_RESERVED = ";,/?:@&=+$!*'()#"


def relative_posix(path: str, start: str) -> str:
    """
    start 기준 상대 경로를 "/" 구분자로 반환합니다.

    Args:
        path: 대상 경로
        start: 기준 디렉토리

    Returns:
        "/"로 구분된 상대 경로. UTF-8이 아닌 파일 이름 바이트는 U+FFFD로 바뀝니다.
    """
    relative = os.path.relpath(path, start).replace(os.sep, "/")
    return os.fsencode(relative).decode("utf-8", "replace")


def encode_uri(text: str) -> str:
    """전체 URI로 쓸 수 있도록 퍼센트 인코딩합니다 (encodeURI와 동일한 범위)."""
    return quote(text, safe=URI_RESERVED)
