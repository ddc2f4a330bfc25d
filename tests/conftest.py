"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Dummy/Fake 주입 (업스트림 HTTP 클라이언트)

금지:
- 실제 Bright Data 호출
- 대형 SERP 덤프 (HTML 픽스처는 tests/fixtures 에만)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Optional

import pytest

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from serp_proxy.core.config import Settings  # noqa: E402
from serp_proxy.crawlers.http_client import HttpResponse  # noqa: E402


TEST_TOKEN = "test-token-123"


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


class FakeHttpClient:
    """업스트림 POST 를 기록하고 준비된 응답을 돌려주는 더미 클라이언트

    - async post_json 지원 (UpstreamHttpClient 와 같은 시그니처)
    - error 가 있으면 호출 시 예외 발생
    """

    def __init__(self, response: Optional[HttpResponse] = None, error: Optional[Exception] = None):
        self.response = response or HttpResponse(status=200, reason="OK", text="")
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def post_json(self, url: str, payload: dict[str, Any], *, headers=None, timeout_s: float):
        self.calls.append({"url": url, "payload": payload, "headers": headers or {}, "timeout_s": timeout_s})
        if self.error:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


def _make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {"upstream_api_token": TEST_TOKEN}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_settings():
    """토큰이 채워진 Settings 팩토리 (키워드로 개별 필드 덮어쓰기)"""
    return _make_settings


@pytest.fixture
def settings() -> Settings:
    return _make_settings()


@pytest.fixture
def settings_without_token() -> Settings:
    return _make_settings(upstream_api_token="")


@pytest.fixture
def make_http_client():
    """FakeHttpClient 팩토리

    사용:
        client = make_http_client(markup="<html>...</html>")
        client = make_http_client(status=503, reason="Service Unavailable", markup="busy")
        client = make_http_client(error=UpstreamTimeoutException(...))
    """

    def _factory(
        markup: str = "",
        status: int = 200,
        reason: str = "OK",
        error: Optional[Exception] = None,
    ) -> FakeHttpClient:
        return FakeHttpClient(HttpResponse(status=status, reason=reason, text=markup), error=error)

    return _factory
