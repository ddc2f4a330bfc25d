"""Search Pipeline - 요청 1건의 처리 흐름

Received → Validated → UpstreamCalled → Extracted (→ Responded 는 라우트에서)

- Validated 단계에서 자격 증명이 없으면 MissingCredentialException (업스트림 호출 없음)
- UpstreamCalled 단계에서 2xx 가 아니면 UpstreamException (추출 호출 없음)
- 추출 단계의 미스는 예외가 아니라 placeholder 결과로 흡수됩니다.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

from serp_proxy.core.config import Settings
from serp_proxy.core.exceptions import MissingCredentialException
from serp_proxy.core.logging import logger
from serp_proxy.engine.query import SearchQuery, describe_query
from serp_proxy.engine.result import ExtractionReport
from serp_proxy.extraction.assembler import extract_results


class PipelineStage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    UPSTREAM_CALLED = "upstream_called"
    EXTRACTED = "extracted"
    RESPONDED = "responded"


class SerpFetcher(Protocol):
    async def fetch_serp(self, query: SearchQuery) -> str: ...


Extractor = Callable[..., ExtractionReport]


@dataclass
class SearchOutcome:
    """파이프라인 실행 결과"""

    query: SearchQuery
    report: ExtractionReport
    elapsed_ms: float
    stages: list[PipelineStage] = field(default_factory=list)


class SearchPipeline:
    """검증된 SearchQuery 를 받아 업스트림 호출과 추출을 순서대로 수행

    요청 간 공유 상태는 읽기 전용 Settings 뿐입니다.
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: SerpFetcher,
        extractor: Extractor = extract_results,
    ) -> None:
        self.settings = settings
        self.fetcher = fetcher
        self.extractor = extractor

    async def run(self, query: SearchQuery) -> SearchOutcome:
        started = time.perf_counter()
        stages = [PipelineStage.RECEIVED]

        if not self.settings.has_api_token:
            logger.error("[PIPELINE] Bright Data API token not configured on server.")
            raise MissingCredentialException()
        stages.append(PipelineStage.VALIDATED)

        html = await self.fetcher.fetch_serp(query)
        stages.append(PipelineStage.UPSTREAM_CALLED)

        report = self.extractor(
            html,
            query.text,
            # 응답 결과 수 = min(num, serp_max_results, 10). num 이 10보다 작으면 그만큼만 돌려줌
            max_results=min(query.result_count, self.settings.serp_max_results),
            fallback_url=query.fallback_url(self.settings.search_base_url),
            regex_fallback=self.settings.serp_regex_fallback_enabled,
        )
        stages.append(PipelineStage.EXTRACTED)

        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            f"[PIPELINE] done: {describe_query(query)}, outcome={report.outcome.value}, "
            f"results={len(report.results)}, elapsed_ms={elapsed_ms:.1f}"
        )
        return SearchOutcome(query=query, report=report, elapsed_ms=elapsed_ms, stages=stages)
