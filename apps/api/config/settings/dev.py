from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 🔴 base 설정 유지 + 로그만 자세히
LOGGING["loggers"]["apps"]["level"] = "DEBUG"
LOGGING["loggers"]["academy"]["level"] = "DEBUG"
