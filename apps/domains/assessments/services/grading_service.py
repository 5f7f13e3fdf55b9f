# apps/domains/assessments/services/grading_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from academy.domain.assessments.completeness import validate_all_questions_answered
from academy.domain.assessments.entities import (
    AnswerRecord,
    Assessment,
    CompletenessReport,
    GradeResult,
    StudentAnswer,
    coerce_answers,
    coerce_assessment,
)
from academy.domain.assessments.grading import calculate_assessment_score

from apps.domains.assessments.conf import grading_setting
from apps.domains.assessments.exceptions import IncompleteSubmissionError
from apps.domains.assessments.guards.grading_contract import AssessmentGradingGuard
from apps.domains.assessments.serializers.assessment_input import (
    AssessmentInputSerializer,
    SubmitAnswersSerializer,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionOutcome:
    result: GradeResult
    completeness: CompletenessReport
    percentage: str
    message: str

    @property
    def score(self) -> int:
        return self.result.score

    @property
    def total_questions(self) -> int:
        return self.result.total_questions

    @property
    def answer_records(self) -> Tuple[AnswerRecord, ...]:
        return self.result.answer_records


class AssessmentGradingService:
    """
    객관식 assessment 제출 1건 채점 (queue-less, DB-less).

    Contract:
    - 저장하지 않는다. 반환값(SubmissionOutcome)을 호출 측이 submission + 답안 row 로 저장.
    - 미완료 제출도 기본적으로 채점한다 (미응답 = 오답).
      REQUIRE_COMPLETE_SUBMISSION 이면 IncompleteSubmissionError.
    - 같은 입력이면 같은 결과 (idempotent).
    """

    def __init__(
        self,
        *,
        require_complete: Optional[bool] = None,
        percentage_decimals: Optional[int] = None,
        guard: Optional[AssessmentGradingGuard] = None,
    ):
        if require_complete is None:
            require_complete = grading_setting("REQUIRE_COMPLETE_SUBMISSION")
        if percentage_decimals is None:
            percentage_decimals = grading_setting("PERCENTAGE_DECIMALS")

        self.require_complete = bool(require_complete)
        self.percentage_decimals = int(percentage_decimals)
        self.guard = guard or AssessmentGradingGuard()

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _unknown_question_ids(
        assessment: Assessment,
        answers: Tuple[StudentAnswer, ...],
    ) -> Tuple[str, ...]:
        known = {q.id for q in assessment.iter_questions()}
        return tuple(sorted({a.question_id for a in answers} - known))

    # -----------------------------
    # Public API
    # -----------------------------
    def check_completeness(self, assessment: Any, answers: Optional[Iterable[Any]]) -> CompletenessReport:
        report = validate_all_questions_answered(assessment, answers)

        if not report.is_valid:
            logger.info(
                "[assessment_grading] incomplete submission: answered=%d total=%d missing=%s",
                report.answered_questions,
                report.total_questions,
                list(report.missing_questions),
            )

        return report

    def grade(self, assessment: Any, answers: Iterable[Any]) -> SubmissionOutcome:
        assessment = coerce_assessment(assessment)
        answers = coerce_answers(answers)

        self.guard.validate_for_grading(assessment)

        completeness = self.check_completeness(assessment, answers)
        if self.require_complete and not completeness.is_valid:
            raise IncompleteSubmissionError(missing_questions=completeness.missing_questions)

        result = calculate_assessment_score(assessment, answers)

        unknown = self._unknown_question_ids(assessment, answers)
        if unknown:
            # 결과에는 드러내지 않는다 (레코드 없음)
            logger.info(
                "[assessment_grading] assessment_id=%s ignored %d answer(s) for unknown question ids %s",
                assessment.id,
                len(unknown),
                list(unknown),
            )

        percentage = result.percentage(self.percentage_decimals)
        message = f"You scored {result.score} out of {result.total_questions} ({percentage}%)"

        logger.info(
            "[assessment_grading] assessment_id=%s score=%d/%d (%s%%)",
            assessment.id,
            result.score,
            result.total_questions,
            percentage,
        )

        return SubmissionOutcome(
            result=result,
            completeness=completeness,
            percentage=percentage,
            message=message,
        )

    def grade_payload(self, assessment_data: Any, submission_data: Any) -> SubmissionOutcome:
        """
        HTTP 핸들러용: raw JSON(dict) 두 개를 serializer 로 검증한 뒤 채점.

        구조가 깨졌으면 rest_framework ValidationError (400).
        """
        assessment_serializer = AssessmentInputSerializer(data=assessment_data)
        assessment_serializer.is_valid(raise_exception=True)

        answers_serializer = SubmitAnswersSerializer(data=submission_data)
        answers_serializer.is_valid(raise_exception=True)

        return self.grade(
            assessment_serializer.to_entity(),
            answers_serializer.to_entities(),
        )
