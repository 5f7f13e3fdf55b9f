# PATH: apps/domains/assessments/services/review.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from academy.domain.assessments.entities import (
    GradeResult,
    Passage,
    Question,
    coerce_assessment,
)
from apps.domains.assessments.conf import grading_setting

NOT_ANSWERED = "Not answered"


@dataclass(frozen=True)
class ReviewChoice:
    id: str
    text: str
    is_correct: bool
    is_selected: bool


@dataclass(frozen=True)
class AnswerReview:
    question_id: str
    question_text: str
    selected_choice_id: Optional[str]
    selected_choice_text: str
    is_correct: bool
    passage: Optional[Passage]
    all_choices: Tuple[ReviewChoice, ...]


@dataclass(frozen=True)
class SubmissionReview:
    assessment_id: Optional[str]
    assessment_title: str
    score: int
    total_questions: int
    percentage: str
    answers: Tuple[AnswerReview, ...]


def build_submission_review(
    assessment: Any,
    grade_result: GradeResult,
    *,
    percentage_decimals: Optional[int] = None,
) -> SubmissionReview:
    """
    제출 후 리뷰 화면 데이터

    - answer_records 순서 그대로 (= assessment 문항 순서)
    - 선택한 선지를 찾지 못하거나 그 텍스트가 비어 있으면 "Not answered"
    - 리뷰는 정답 공개 화면이므로 all_choices 에 is_correct 포함
    """
    assessment = coerce_assessment(assessment)
    if percentage_decimals is None:
        percentage_decimals = grading_setting("PERCENTAGE_DECIMALS")

    located: Dict[str, Tuple[Passage, Question]] = {}
    for passage, question in assessment.iter_questions_with_passage():
        located[question.id] = (passage, question)

    reviews = []
    for record in grade_result.answer_records:
        passage, question = located.get(record.question_id, (None, None))
        choices = question.choices if question else ()
        selected = question.find_choice(record.choice_id) if question else None

        reviews.append(
            AnswerReview(
                question_id=record.question_id,
                question_text=question.text if question else "",
                selected_choice_id=record.choice_id,
                selected_choice_text=(selected.text if selected else "") or NOT_ANSWERED,
                is_correct=record.is_correct,
                passage=passage,
                all_choices=tuple(
                    ReviewChoice(
                        id=c.id,
                        text=c.text,
                        is_correct=c.is_correct,
                        is_selected=(record.choice_id is not None and c.id == record.choice_id),
                    )
                    for c in choices
                ),
            )
        )

    return SubmissionReview(
        assessment_id=assessment.id,
        assessment_title=assessment.title,
        score=grade_result.score,
        total_questions=grade_result.total_questions,
        percentage=grade_result.percentage(percentage_decimals),
        answers=tuple(reviews),
    )
