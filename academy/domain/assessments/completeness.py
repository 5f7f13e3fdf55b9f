"""
제출 전 완료 여부 확인 (채점 없음)

답안 목록에 questionId 가 "있기만" 하면 응답한 것으로 본다.
choiceId 는 읽지 않는다 (null 이든 어떤 값이든 상관없음).
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from .entities import CompletenessReport, coerce_answered_question_ids, coerce_assessment


def validate_all_questions_answered(
    assessment: Any,
    answers: Optional[Iterable[Any]],
) -> CompletenessReport:
    assessment = coerce_assessment(assessment)

    # dict 를 순서 있는 set 으로 사용 (assessment 순서 유지)
    all_question_ids: Dict[str, None] = dict.fromkeys(
        q.id for q in assessment.iter_questions()
    )
    answered_question_ids = set(coerce_answered_question_ids(answers))

    missing = tuple(qid for qid in all_question_ids if qid not in answered_question_ids)

    return CompletenessReport(
        is_valid=not missing,
        missing_questions=missing,
        total_questions=len(all_question_ids),
        # assessment 밖의 id 도 그대로 센다 (clamp 하지 않음)
        answered_questions=len(answered_question_ids),
    )
