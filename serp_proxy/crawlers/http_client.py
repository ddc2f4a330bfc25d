"""업스트림 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession 을 만들면 TLS/커넥션 오버헤드가 커지므로 앱 단위로 세션을 재사용합니다.
- 앱 팩토리가 인스턴스를 만들고, 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Dict

from curl_cffi.requests import AsyncSession

from serp_proxy.core.config import Settings
from serp_proxy.core.exceptions import UpstreamConnectionException, UpstreamTimeoutException
from serp_proxy.core.logging import logger


@dataclass
class HttpResponse:
    status: int
    reason: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def _is_timeout_error(error: Exception) -> bool:
    name = type(error).__name__.lower()
    return "timeout" in name or "timed out" in str(error).lower()


class UpstreamHttpClient:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                impersonate=self._settings.upstream_impersonate,
                max_clients=int(self._settings.upstream_max_clients),
                trust_env=False,
            )
            return self._session

    async def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout_s: float,
    ) -> HttpResponse:
        """JSON POST. 상태 코드와 무관하게 응답을 반환하고, 연결 실패만 예외로 올립니다.

        Raises:
            UpstreamTimeoutException: 타임아웃
            UpstreamConnectionException: 그 외 전송 오류
        """
        sess = await self._ensure_session()
        try:
            resp = await sess.post(url, json=payload, headers=headers, timeout=timeout_s)
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] POST failed: {type(e).__name__}: {repr(e)}")
            if _is_timeout_error(e):
                raise UpstreamTimeoutException("upstream_post", timeout_s) from e
            raise UpstreamConnectionException(type(e).__name__) from e

        status = getattr(resp, "status_code", 0) or 0
        reason = getattr(resp, "reason", "") or ""
        text = getattr(resp, "text", "") or ""
        return HttpResponse(status=status, reason=str(reason), text=text)

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.warning(f"[HTTP_CLIENT] close failed: {type(e).__name__}")
            self._session = None
