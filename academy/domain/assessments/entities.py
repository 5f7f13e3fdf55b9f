"""
Assessment 도메인 엔티티 (순수 파이썬, Django/ORM 미사용)

채점 코어가 받는 입력 / 돌려주는 출력 값 객체.
- 모두 frozen dataclass (호출 1회 동안만 사는 값)
- 시퀀스는 tuple
- id 는 ids.normalize_id 로 정규화된 문자열

from_dict 는 wire 형식(camelCase)과 serializer validated_data(snake_case)를
둘 다 받는다.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import MalformedAnswerError, MalformedAssessmentError
from .ids import normalize_id


_MISSING = object()


def _pick(data: Mapping, *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return default


def _as_list(value: Any, *, what: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise MalformedAssessmentError(f"{what} must be a list (got={type(value).__name__})")
    return list(value)


def _as_mapping(value: Any, *, what: str, error=MalformedAssessmentError) -> Mapping:
    if not isinstance(value, Mapping):
        raise error(f"{what} must be an object (got={type(value).__name__})")
    return value


def _required_id(data: Mapping, *, what: str) -> str:
    key = normalize_id(data.get("id"))
    if key is None:
        raise MalformedAssessmentError(f"{what} has no id")
    return key


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise MalformedAssessmentError(f"expected an integer (got={value!r})") from e


@dataclass(frozen=True)
class Choice:
    id: str
    is_correct: bool = False
    text: str = ""
    order: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Choice":
        data = _as_mapping(data, what="choice")
        return cls(
            id=_required_id(data, what="choice"),
            is_correct=bool(_pick(data, "is_correct", "isCorrect", default=False)),
            text=str(_pick(data, "text", "choice_text", "choiceText", default="") or ""),
            order=_optional_int(data.get("order")),
        )


@dataclass(frozen=True)
class Question:
    id: str
    choices: Tuple[Choice, ...] = ()
    text: str = ""
    order: Optional[int] = None

    def correct_choice_id(self) -> Optional[str]:
        """정답 선지 id. 정답 표시가 없으면 None (여러 개면 첫 번째)."""
        for choice in self.choices:
            if choice.is_correct:
                return choice.id
        return None

    def find_choice(self, choice_id: Optional[str]) -> Optional[Choice]:
        if choice_id is None:
            return None
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None

    @classmethod
    def from_dict(cls, data: Any) -> "Question":
        data = _as_mapping(data, what="question")
        question_id = _required_id(data, what="question")
        choices = _as_list(data.get("choices", []), what=f"question {question_id} choices")
        return cls(
            id=question_id,
            choices=tuple(Choice.from_dict(c) for c in choices),
            text=str(_pick(data, "text", "question_text", "questionText", default="") or ""),
            order=_optional_int(data.get("order")),
        )


@dataclass(frozen=True)
class Passage:
    questions: Tuple[Question, ...] = ()
    id: Optional[str] = None
    title: str = ""
    content: str = ""
    image_url: Optional[str] = None
    order: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Passage":
        data = _as_mapping(data, what="passage")
        if "questions" not in data:
            raise MalformedAssessmentError("passage has no questions list")
        questions = _as_list(data["questions"], what="passage questions")
        return cls(
            questions=tuple(Question.from_dict(q) for q in questions),
            id=normalize_id(data.get("id")),
            title=str(data.get("title") or ""),
            content=str(data.get("content") or ""),
            image_url=_pick(data, "image_url", "imageURL") or None,
            order=_optional_int(data.get("order")),
        )


@dataclass(frozen=True)
class Assessment:
    """
    homework / test 공통 평가 정의.

    passages 순서 -> passage 내 questions 순서가 곧 채점/출력 순서.
    """
    passages: Tuple[Passage, ...] = ()
    id: Optional[str] = None
    title: str = ""
    instructions: str = ""
    duration: Optional[int] = None  # 분 단위, None 이면 untimed

    @property
    def kind(self) -> str:
        return "timed" if self.duration else "untimed"

    @property
    def question_count(self) -> int:
        return sum(len(p.questions) for p in self.passages)

    def iter_questions(self) -> Iterator[Question]:
        for passage in self.passages:
            yield from passage.questions

    def iter_questions_with_passage(self) -> Iterator[Tuple[Passage, Question]]:
        for passage in self.passages:
            for question in passage.questions:
                yield passage, question

    @classmethod
    def from_dict(cls, data: Any) -> "Assessment":
        data = _as_mapping(data, what="assessment")
        if "passages" not in data:
            raise MalformedAssessmentError("assessment has no passages list")
        passages = _as_list(data["passages"], what="assessment passages")
        return cls(
            passages=tuple(Passage.from_dict(p) for p in passages),
            id=normalize_id(data.get("id")),
            title=str(data.get("title") or ""),
            instructions=str(data.get("instructions") or ""),
            duration=_optional_int(data.get("duration")),
        )


@dataclass(frozen=True)
class StudentAnswer:
    question_id: str
    choice_id: Optional[str] = None  # None = 미응답 또는 명시적 해제

    @classmethod
    def from_dict(cls, data: Any) -> "StudentAnswer":
        data = _as_mapping(data, what="answer", error=MalformedAnswerError)
        try:
            question_id = normalize_id(_pick(data, "question_id", "questionId"))
            choice_id = normalize_id(_pick(data, "choice_id", "choiceId"))
        except MalformedAssessmentError as e:
            raise MalformedAnswerError(str(e)) from e
        if question_id is None:
            raise MalformedAnswerError("answer has no questionId")
        return cls(question_id=question_id, choice_id=choice_id)


@dataclass(frozen=True)
class AnswerRecord:
    question_id: str
    choice_id: Optional[str]
    is_correct: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_id": self.question_id,
            "choice_id": self.choice_id,
            "is_correct": self.is_correct,
        }


@dataclass(frozen=True)
class GradeResult:
    score: int
    total_questions: int
    answer_records: Tuple[AnswerRecord, ...] = field(default_factory=tuple)

    def percentage(self, decimals: int = 2) -> str:
        """정답률(%) 문자열. 문항이 0개면 0 으로 표기. 반올림은 .5 올림 (3.125 -> "3.13")."""
        ratio = Decimal(self.score) * 100 / Decimal(self.total_questions) if self.total_questions else Decimal(0)
        quantum = Decimal(1).scaleb(-int(decimals))
        return format(ratio.quantize(quantum, rounding=ROUND_HALF_UP), "f")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "total_questions": self.total_questions,
            "answer_records": [r.to_dict() for r in self.answer_records],
        }


@dataclass(frozen=True)
class CompletenessReport:
    is_valid: bool
    missing_questions: Tuple[str, ...]
    total_questions: int
    answered_questions: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "missing_questions": list(self.missing_questions),
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
        }


def coerce_assessment(assessment: Any) -> Assessment:
    if isinstance(assessment, Assessment):
        return assessment
    return Assessment.from_dict(assessment)


def coerce_answers(answers: Optional[Iterable[Any]]) -> Tuple[StudentAnswer, ...]:
    if answers is None:
        return ()
    if isinstance(answers, (str, bytes, Mapping)):
        raise MalformedAnswerError(f"answers must be a list (got={type(answers).__name__})")
    return tuple(
        a if isinstance(a, StudentAnswer) else StudentAnswer.from_dict(a)
        for a in answers
    )


def coerce_answered_question_ids(answers: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """
    완료 여부 확인용: 답안마다 questionId 만 읽는다.

    choiceId 는 보지 않으므로 값이 무엇이든 (bool 포함) 에러가 나지 않는다.
    """
    if answers is None:
        return ()
    if isinstance(answers, (str, bytes, Mapping)):
        raise MalformedAnswerError(f"answers must be a list (got={type(answers).__name__})")

    question_ids: List[str] = []
    for answer in answers:
        if isinstance(answer, StudentAnswer):
            question_ids.append(answer.question_id)
            continue
        data = _as_mapping(answer, what="answer", error=MalformedAnswerError)
        try:
            question_id = normalize_id(_pick(data, "question_id", "questionId"))
        except MalformedAssessmentError as e:
            raise MalformedAnswerError(str(e)) from e
        if question_id is None:
            raise MalformedAnswerError("answer has no questionId")
        question_ids.append(question_id)
    return tuple(question_ids)
