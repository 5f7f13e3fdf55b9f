#!/usr/bin/env python
"""
Assessment grading 프로젝트 관리 명령 진입점.

    python manage.py check
    python manage.py shell
    ASSESSMENT_SETTINGS=test python manage.py check

DJANGO_SETTINGS_MODULE 이 이미 있으면 그대로 쓰고,
없으면 ASSESSMENT_SETTINGS (dev / test) 로 settings 모듈을 고른다.
"""
import os
import sys
from pathlib import Path

SETTINGS_PACKAGE = "apps.api.config.settings"
SETTINGS_FLAVORS = ("dev", "test")


def _settings_module() -> str:
    flavor = os.getenv("ASSESSMENT_SETTINGS", "dev")
    if flavor not in SETTINGS_FLAVORS:
        raise SystemExit(
            f"ASSESSMENT_SETTINGS must be one of {', '.join(SETTINGS_FLAVORS)} (got={flavor!r})"
        )
    return f"{SETTINGS_PACKAGE}.{flavor}"


def main():
    # apps / academy 는 네임스페이스 패키지. 루트만 sys.path 에 올린다
    root = str(Path(__file__).resolve().parent)
    if root not in sys.path:
        sys.path.insert(0, root)

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", _settings_module())

    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
