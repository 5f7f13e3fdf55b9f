"""
도메인 공통: 문항/선지 ID 정규화 (외부 라이브러리 없음)

JSON 으로 들어온 id(str)와 DB 드라이버가 준 id(int)가 섞여도
같은 문항이면 같은 키가 되도록 모든 id 를 문자열 키로 맞춘다.
"""
from __future__ import annotations

from typing import Any, Optional

from .errors import MalformedAssessmentError


def normalize_id(value: Any) -> Optional[str]:
    """
    id 를 비교용 문자열 키로 정규화

    Examples:
        >>> normalize_id(5)
        '5'
        >>> normalize_id("5")
        '5'
        >>> normalize_id(5.0)
        '5'
        >>> normalize_id("")
        >>> normalize_id(None)
    """
    if value is None:
        return None

    if isinstance(value, bool):
        raise MalformedAssessmentError(f"boolean is not a valid id: {value!r}")

    if isinstance(value, float) and value.is_integer():
        value = int(value)

    key = str(value)
    return key or None
