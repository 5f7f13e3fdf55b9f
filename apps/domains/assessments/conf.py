# PATH: apps/domains/assessments/conf.py
from __future__ import annotations

from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    "REQUIRE_COMPLETE_SUBMISSION": False,
    "STRICT_ANSWER_KEY": False,
    "PERCENTAGE_DECIMALS": 2,
    "CHOICES_PER_QUESTION": 4,
    "MAX_DURATION_MINUTES": 480,
}


def grading_setting(name: str) -> Any:
    """
    settings.ASSESSMENT_GRADING[name] (없으면 DEFAULTS)

    매 호출마다 settings 를 다시 읽으므로 override_settings 가 그대로 먹힌다.
    """
    if name not in DEFAULTS:
        raise KeyError(f"unknown ASSESSMENT_GRADING setting: {name}")
    configured = getattr(settings, "ASSESSMENT_GRADING", None) or {}
    return configured.get(name, DEFAULTS[name])
