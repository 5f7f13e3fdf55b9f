"""
객관식 자동 채점 (순수 함수)

규칙:
- assessment 의 모든 문항마다 AnswerRecord 1개 (미응답 포함)
- 미응답(답안 없음 / choice_id None)은 오답
- id 비교는 normalize_id 로 맞춘 문자열끼리
- assessment 에 없는 questionId 답안은 무시 (레코드 없음, 에러 없음)
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .entities import (
    AnswerRecord,
    GradeResult,
    coerce_answers,
    coerce_assessment,
)


def calculate_assessment_score(assessment: Any, student_answers: Iterable[Any]) -> GradeResult:
    assessment = coerce_assessment(assessment)
    answers = coerce_answers(student_answers)

    # question_id -> 정답 choice_id (정답 표시 없으면 None)
    answer_key: Dict[str, Optional[str]] = {}
    for question in assessment.iter_questions():
        answer_key[question.id] = question.correct_choice_id()

    # question_id -> 학생이 고른 choice_id (같은 문항 중복 시 마지막 답안)
    submitted: Dict[str, Optional[str]] = {}
    for answer in answers:
        submitted[answer.question_id] = answer.choice_id

    score = 0
    records: List[AnswerRecord] = []

    for question_id, correct_choice_id in answer_key.items():
        choice_id = submitted.get(question_id)
        is_correct = choice_id is not None and choice_id == correct_choice_id

        if is_correct:
            score += 1

        records.append(
            AnswerRecord(
                question_id=question_id,
                choice_id=choice_id,
                is_correct=is_correct,
            )
        )

    return GradeResult(
        score=score,
        total_questions=len(answer_key),
        answer_records=tuple(records),
    )
