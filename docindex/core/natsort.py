"""
자연 정렬 (natural sort) 비교기
파일 이름에 포함된 숫자를 문자 단위가 아닌 수치로 비교합니다.
"""

from functools import cmp_to_key
from typing import Iterable, List, Sequence

from ..models.record import FileRecord, Token


def utf16_units(token: Token) -> bytes:
    """토큰 문자열을 UTF-16 코드 유닛 순서로 비교할 수 있는 바이트로 바꿉니다."""
    return str(token).encode("utf-16-be", "surrogatepass")


def compare_tokens(a: Sequence[Token], b: Sequence[Token]) -> int:
    """
    두 토큰 시퀀스를 3-way 비교합니다.

    Args:
        a: 첫 번째 토큰 시퀀스
        b: 두 번째 토큰 시퀀스

    Returns:
        a가 앞서면 음수, 뒤면 양수, 같으면 0
    """
    for i in range(max(len(a), len(b))):
        # 토큰이 없는 쪽이 항상 앞선다
        if i >= len(a):
            return -1
        if i >= len(b):
            return 1
        x, y = a[i], b[i]
        if isinstance(x, int) and isinstance(y, int):
            if x != y:
                return x - y
        elif x != y:
            return -1 if utf16_units(x) < utf16_units(y) else 1
    return 0


def compare_records(a: FileRecord, b: FileRecord) -> int:
    """두 파일 레코드를 토큰 기준으로 비교합니다."""
    return compare_tokens(a.tokens, b.tokens)


def sort_records(records: Iterable[FileRecord]) -> List[FileRecord]:
    """파일 레코드를 자연 정렬합니다. 같은 키의 상대 순서는 유지됩니다."""
    return sorted(records, key=cmp_to_key(compare_records))


def natural_sort(paths: Iterable[str]) -> List[str]:
    """
    파일 경로 리스트를 파일 이름 기준으로 자연 정렬합니다.

    Args:
        paths: 파일 경로들

    Returns:
        정렬된 경로 리스트
    """
    records = [FileRecord.from_path(path) for path in paths]
    return [record.path for record in sort_records(records)]
