# PATH: apps/api/config/settings/base.py

from pathlib import Path
import os

# ==================================================
# BASE
# ==================================================

BASE_DIR = Path(__file__).resolve().parents[4]

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-key")
DEBUG = os.getenv("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h]


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ==================================================
# INSTALLED APPS
# ==================================================

INSTALLED_APPS = [
    # Django
    "django.contrib.contenttypes",
    "django.contrib.auth",

    # Domain Apps
    "apps.domains.assessments",

    # REST
    "rest_framework",
]

# ==================================================
# DATABASE
# ==================================================
# 채점 코어는 DB 를 직접 쓰지 않는다.
# 영속화는 호출 측(HTTP 핸들러 / ORM 레이어) 책임.

DATABASES = {}

# ==================================================
# GLOBAL
# ==================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"

USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ==================================================
# DRF
# ==================================================

REST_FRAMEWORK = {
    "UNAUTHENTICATED_USER": None,
}

# ==================================================
# ASSESSMENT GRADING
# ==================================================
# apps.domains.assessments.conf.grading_setting() 으로 읽는다.
# 일부 키만 override 해도 나머지는 기본값 유지.

ASSESSMENT_GRADING = {
    # 미응답 문항이 있으면 채점 대신 IncompleteSubmissionError
    "REQUIRE_COMPLETE_SUBMISSION": _env_flag("ASSESSMENT_REQUIRE_COMPLETE", False),
    # 정답 0개/2개 이상, 중복 문항 id 를 경고가 아니라 ValidationError 로
    "STRICT_ANSWER_KEY": _env_flag("ASSESSMENT_STRICT_ANSWER_KEY", False),
    "PERCENTAGE_DECIMALS": int(os.getenv("ASSESSMENT_PERCENTAGE_DECIMALS", "2")),
    # 출제(authoring) 검증
    "CHOICES_PER_QUESTION": 4,
    "MAX_DURATION_MINUTES": int(os.getenv("ASSESSMENT_MAX_DURATION_MINUTES", "480")),
}

# ==================================================
# LOGGING
# ==================================================

ASSESSMENT_LOG_LEVEL = os.getenv("ASSESSMENT_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": ASSESSMENT_LOG_LEVEL,
            "propagate": True,
        },
        "academy": {
            "handlers": ["console"],
            "level": ASSESSMENT_LOG_LEVEL,
            "propagate": True,
        },
    },
}
