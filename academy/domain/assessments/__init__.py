"""
Assessment 도메인 (순수 파이썬)

- 객관식 자동 채점: calculate_assessment_score
- 제출 전 완료 여부 확인: validate_all_questions_answered
"""
from .completeness import validate_all_questions_answered
from .entities import (
    AnswerRecord,
    Assessment,
    Choice,
    CompletenessReport,
    GradeResult,
    Passage,
    Question,
    StudentAnswer,
)
from .errors import AssessmentDomainError, MalformedAnswerError, MalformedAssessmentError
from .grading import calculate_assessment_score
from .ids import normalize_id

__all__ = [
    "calculate_assessment_score",
    "validate_all_questions_answered",
    "normalize_id",
    "Assessment",
    "Passage",
    "Question",
    "Choice",
    "StudentAnswer",
    "AnswerRecord",
    "GradeResult",
    "CompletenessReport",
    "AssessmentDomainError",
    "MalformedAssessmentError",
    "MalformedAnswerError",
]
