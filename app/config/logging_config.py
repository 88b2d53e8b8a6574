# app/config/logging_config.py
import logging
import re

from app.config.config import settings


class SensitiveDataFilter(logging.Filter):
    """로그 메시지에서 비밀번호 등 민감 정보를 가린다"""
    SENSITIVE_PATTERNS = [
        r'(password["\']?\s*[:=]\s*["\']?)([^"\'\s,}]+)',
    ]

    def filter(self, record):
        if record.msg:
            message = str(record.msg)
            for pattern in self.SENSITIVE_PATTERNS:
                message = re.sub(pattern, r'\1[REDACTED]', message, flags=re.IGNORECASE)
            record.msg = message
        return True


def setup_logging(level: str | None = None) -> logging.Logger:
    """애플리케이션 로거 설정"""
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    app_logger = logging.getLogger("app")
    app_logger.setLevel(log_level)

    # 기존 handler 제거 (재호출 시 중복 방지)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.addFilter(SensitiveDataFilter())
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    app_logger.addHandler(console_handler)
    app_logger.propagate = False

    return app_logger
