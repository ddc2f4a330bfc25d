"""로깅 설정 (Security Enhanced)"""
import logging
import os
import re
import sys


LOGGER_NAME = "serp_proxy"

# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


logger = logging.getLogger(LOGGER_NAME)


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """로거 초기화 및 설정

    앱 팩토리에서 Settings.log_level 로 한 번 호출합니다.
    여러 번 호출돼도 핸들러는 하나만 붙습니다.
    """
    level = (log_level or "INFO").upper()
    if IS_PRODUCTION and level == "DEBUG":
        level = "INFO"

    logger.setLevel(getattr(logging, level, logging.INFO))

    # 포맷터 (민감 정보 제외)
    if IS_PRODUCTION:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(getattr(logging, level, logging.INFO))
        handler.setFormatter(formatter)

    return logger


_SECRET_PATTERN = re.compile(
    r"(?i)(bearer\s+|token[=:]\s*|api_key[=:]\s*|password[=:]\s*|secret[=:]\s*)[^\s&\"',]+"
)


def sanitize_for_log(value: object, max_length: int = 100) -> str:
    """민감 정보 제거 후 로깅용 문자열 반환

    Args:
        value: 로깅할 값 (문자열이 아니면 repr 사용)
        max_length: 최대 길이

    Returns:
        마스킹/절단된 문자열
    """
    if value is None or value == "":
        return "[empty]"

    result = value if isinstance(value, str) else repr(value)
    result = _SECRET_PATTERN.sub(lambda m: f"{m.group(1)}***", result)

    # 길이 초과 시 절단
    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
