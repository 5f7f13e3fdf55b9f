# PATH: apps/domains/assessments/services/student_view.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from django.utils import timezone

from academy.domain.assessments.entities import coerce_assessment
from apps.domains.assessments.serializers.student_view import StudentAssessmentSerializer


def start_message(duration: Optional[int]) -> str:
    if duration:
        return f"You have {duration} minutes to complete this assessment"
    return "Take your time to complete this assessment"


def build_student_view(assessment: Any, *, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    응시 시작 응답 payload

    - 선지의 정답 여부(isCorrect)는 제거된 상태로 내려간다
    - startedAt 은 응답 시각 (타이머 기준점)
    """
    assessment = coerce_assessment(assessment)
    started_at = now or timezone.now()

    return {
        "assessment": StudentAssessmentSerializer(assessment).data,
        "startedAt": started_at.isoformat(),
        "message": start_message(assessment.duration),
    }
