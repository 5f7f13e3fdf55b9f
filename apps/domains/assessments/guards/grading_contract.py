# PATH: apps/domains/assessments/guards/grading_contract.py
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, List, Optional

from django.core.exceptions import ValidationError

from academy.domain.assessments.entities import Assessment, coerce_assessment
from apps.domains.assessments.conf import grading_setting

logger = logging.getLogger(__name__)


class AssessmentGradingGuard:
    """
    Boundary guard for grading.

    목적:
    - 채점 코어 호출 전에 정답 키(answer key) 품질 확인
    - 정답 0개 / 2개 이상, 중복 문항 id 는 채점 코어가 조용히 처리해버리므로
      여기서 드러낸다
    - 기본은 경고 로그만, STRICT_ANSWER_KEY 이면 ValidationError
    """

    def __init__(self, *, strict: Optional[bool] = None):
        self.strict = strict

    def _is_strict(self, strict: Optional[bool]) -> bool:
        if strict is not None:
            return bool(strict)
        if self.strict is not None:
            return bool(self.strict)
        return bool(grading_setting("STRICT_ANSWER_KEY"))

    @staticmethod
    def find_problems(assessment: Assessment) -> List[str]:
        problems: List[str] = []

        id_counts = Counter(q.id for q in assessment.iter_questions())
        for question_id, count in id_counts.items():
            if count > 1:
                problems.append(f"question id {question_id} appears {count} times")

        for question in assessment.iter_questions():
            correct_count = sum(1 for c in question.choices if c.is_correct)
            if correct_count != 1:
                problems.append(
                    f"question {question.id} has {correct_count} correct choices (expected 1)"
                )

        return problems

    def validate_for_grading(self, assessment: Any, *, strict: Optional[bool] = None) -> List[str]:
        assessment = coerce_assessment(assessment)
        problems = self.find_problems(assessment)

        for problem in problems:
            logger.warning("[assessment_guard] assessment_id=%s %s", assessment.id, problem)

        if problems and self._is_strict(strict):
            raise ValidationError(problems)

        return problems
