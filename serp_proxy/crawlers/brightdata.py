"""Bright Data SERP fetch

검색 URL 을 Bright Data request API 에 넘겨 Google 결과 페이지 HTML 을 그대로(raw) 받아옵니다.
재시도는 하지 않습니다. 실패는 즉시 예외로 올라가 에러 응답이 됩니다.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

from serp_proxy.core.config import Settings
from serp_proxy.core.exceptions import UpstreamException
from serp_proxy.core.logging import logger
from serp_proxy.crawlers.http_client import HttpResponse
from serp_proxy.engine.query import SearchQuery, describe_query


class JsonPoster(Protocol):
    async def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        *,
        headers: Dict[str, str] | None = None,
        timeout_s: float,
    ) -> HttpResponse: ...


class BrightDataClient:
    """Bright Data request API 호출 래퍼"""

    def __init__(self, settings: Settings, http_client: JsonPoster) -> None:
        self.settings = settings
        self.http_client = http_client

    def build_request(self, query: SearchQuery) -> Dict[str, Any]:
        return {
            "zone": self.settings.upstream_zone,
            "url": query.upstream_url(self.settings.search_base_url),
            "format": "raw",
        }

    def build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.upstream_api_token}",
            "Content-Type": "application/json",
            "User-Agent": self.settings.upstream_user_agent,
        }

    async def fetch_serp(self, query: SearchQuery) -> str:
        """검색 결과 페이지 HTML 반환

        토큰 설정 여부는 호출 전에 SearchPipeline 의 Validated 단계에서 확인합니다.

        Raises:
            UpstreamException: 2xx 가 아닌 응답
            UpstreamTimeoutException / UpstreamConnectionException: 전송 실패
        """
        logger.info(f"[UPSTREAM] POST {self.settings.upstream_endpoint} ({describe_query(query)})")
        resp = await self.http_client.post_json(
            self.settings.upstream_endpoint,
            self.build_request(query),
            headers=self.build_headers(),
            timeout_s=self.settings.upstream_timeout_s,
        )

        if not resp.ok:
            limit = self.settings.upstream_error_body_limit
            logger.error(
                f"[UPSTREAM] Bright Data API call failed. Status: {resp.status}, "
                f"Details: {(resp.text or '')[:limit]}"
            )
            raise UpstreamException(resp.status, resp.reason, resp.text, body_limit=limit)

        logger.info(f"[UPSTREAM] OK (len={len(resp.text)})")
        return resp.text
