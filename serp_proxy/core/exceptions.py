"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class SerpProxyException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(SerpProxyException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})
        self.field = field
        self.reason = reason


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색 요청 (400)"""
    def __init__(self, reason: str, field: str = "query", details: Optional[dict[str, Any]] = None):
        super().__init__(field, reason, details)
        self.error_code = "INVALID_QUERY"


# 설정 관련 예외
class ConfigurationException(SerpProxyException):
    """서버 설정 오류 - 해당 요청만 실패시키고 프로세스는 유지"""
    def __init__(self, message: str, error_code: str = "CONFIGURATION_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CONFIGURATION_ERROR", details)


class MissingCredentialException(ConfigurationException):
    """업스트림 API 토큰 미설정"""
    def __init__(self, credential: str = "Bright Data API token", details: Optional[dict[str, Any]] = None):
        message = f"{credential} not configured"
        super().__init__(message, "MISSING_CREDENTIAL", details or {"credential": credential})


# 업스트림 관련 예외
class UpstreamException(SerpProxyException):
    """업스트림(Bright Data)이 2xx 가 아닌 응답을 반환"""
    def __init__(self, status: int, status_text: str = "", body: str = "", body_limit: int = 200):
        self.status = status
        self.status_text = status_text or ""
        self.body = (body or "")[:body_limit]
        message = f"Upstream request failed with status {status}"
        super().__init__(message, "UPSTREAM_ERROR",
                        {"status": status, "statusText": self.status_text, "details": self.body})


class UpstreamTimeoutException(SerpProxyException):
    """업스트림 호출 또는 요청 전체 타임아웃"""
    def __init__(self, operation: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Operation '{operation}' timed out after {timeout_s}s"
        super().__init__(message, "UPSTREAM_TIMEOUT",
                        details or {"operation": operation, "timeout_s": timeout_s})


class UpstreamConnectionException(SerpProxyException):
    """업스트림 연결 자체가 실패 (DNS, TLS, 소켓 오류 등)"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Upstream connection failed: {reason}"
        super().__init__(message, "UPSTREAM_CONNECTION_ERROR", details or {"reason": reason})


# 파싱 관련 예외
class ParsingException(SerpProxyException):
    """HTML/데이터 파싱 오류"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to parse response: {reason}"
        super().__init__(message, "PARSING_ERROR", details or {"reason": reason})


class DocumentLoadError(ParsingException):
    """마크업이 없거나 문서 트리로 만들 수 없음

    추출 엔진 내부에서만 쓰이며, Assembler 가 placeholder 결과로 변환합니다.
    """
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(reason, details)
        self.error_code = "LOAD_FAILURE"
