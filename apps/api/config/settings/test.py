# PATH: apps/api/config/settings/test.py
from .base import *

DEBUG = False
SECRET_KEY = "test-secret-key"

# 테스트는 환경변수와 무관하게 기본 정책으로 고정
ASSESSMENT_GRADING = {
    "REQUIRE_COMPLETE_SUBMISSION": False,
    "STRICT_ANSWER_KEY": False,
    "PERCENTAGE_DECIMALS": 2,
    "CHOICES_PER_QUESTION": 4,
    "MAX_DURATION_MINUTES": 480,
}
