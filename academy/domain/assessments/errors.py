"""
Assessment 도메인 오류 (순수 파이썬)
"""
from __future__ import annotations


class AssessmentDomainError(Exception):
    """Assessment 도메인 규칙 위반 등."""
    pass


class MalformedAssessmentError(AssessmentDomainError, ValueError):
    """passages / questions / choices 구조가 깨진 입력."""
    pass


class MalformedAnswerError(AssessmentDomainError, ValueError):
    """questionId 가 없는 등 학생 답안 구조가 깨진 입력."""
    pass
