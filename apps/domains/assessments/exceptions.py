# ======================================================================
# PATH: apps/domains/assessments/exceptions.py
# ======================================================================
from __future__ import annotations

from typing import Iterable


class IncompleteSubmissionError(Exception):
    """
    미응답 문항이 남은 상태로 최종 채점을 요청함.

    HTTP 핸들러는 http_status / code / missing_questions 로
    "incomplete submission" 4xx 응답을 만든다.

    code:
      - submission_incomplete
    """

    def __init__(
        self,
        *,
        missing_questions: Iterable[str],
        code: str = "submission_incomplete",
        message: str = "",
        http_status: int = 400,
    ):
        self.missing_questions = tuple(str(q) for q in missing_questions)
        self.code = str(code)
        self.message = str(
            message
            or f"{len(self.missing_questions)} question(s) have not been answered"
        )
        self.http_status = int(http_status)
        super().__init__(self.message)
