"""Search Routes - Bright Data 프록시 엔드포인트

HTTP Layer 는 요청을 SearchQuery 로 바꿔 SearchPipeline 에 넘기고, 결과/예외를
응답 envelope 으로 바꾸는 Translator 역할만 합니다.
POST(본문) 와 GET(쿼리스트링) 은 같은 파이프라인을 사용합니다.
"""

import asyncio
import json
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from serp_proxy.api.dependencies import get_pipeline, get_settings
from serp_proxy.core.config import Settings
from serp_proxy.core.exceptions import (
    InvalidQueryException,
    MissingCredentialException,
    UpstreamConnectionException,
    UpstreamException,
    UpstreamTimeoutException,
)
from serp_proxy.core.logging import logger, sanitize_for_log
from serp_proxy.engine.pipeline import PipelineStage, SearchPipeline
from serp_proxy.engine.query import SearchQuery
from serp_proxy.engine.result import RESULT_SOURCE
from serp_proxy.schemas.search_schema import (
    ErrorResponse,
    SearchResponse,
    SearchResultItem,
    UpstreamErrorResponse,
    utc_timestamp,
)

router = APIRouter(prefix="/api", tags=["search"])


@router.post("/brightdata")
async def search_post(
    request: Request,
    settings: Settings = Depends(get_settings),
    pipeline: SearchPipeline = Depends(get_pipeline),
):
    """검색 프록시 (JSON 본문: query, num, hl, gl)"""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("[API] request body is not JSON; treating as empty body")
        body = {}

    return await _handle_search(lambda: SearchQuery.from_body(body), settings, pipeline, route="POST /api/brightdata")


@router.get("/brightdataget")
async def search_get(
    request: Request,
    settings: Settings = Depends(get_settings),
    pipeline: SearchPipeline = Depends(get_pipeline),
):
    """검색 프록시 (쿼리스트링 호환 경로: query, num, hl, gl)"""
    params = dict(request.query_params)
    return await _handle_search(lambda: SearchQuery.from_params(params), settings, pipeline, route="GET /api/brightdataget")


async def _handle_search(
    build_query: Callable[[], SearchQuery],
    settings: Settings,
    pipeline: SearchPipeline,
    route: str,
) -> JSONResponse:
    try:
        query = build_query()
    except InvalidQueryException as e:
        logger.warning(f"[API] {route} invalid input: {e.reason}")
        return _error(400, "Invalid query parameter", e.reason, e.error_code)

    logger.info(f"[API] {route} search request: query (length: {len(query.text)})")

    try:
        outcome = await asyncio.wait_for(pipeline.run(query), timeout=settings.api_search_timeout_s)
    except MissingCredentialException as e:
        return _error(500, "Configuration error", e.message, e.error_code)
    except UpstreamException as e:
        return JSONResponse(
            status_code=502,
            content=UpstreamErrorResponse(
                status=e.status,
                status_text=e.status_text,
                details=e.body,
            ).to_payload(),
        )
    except UpstreamTimeoutException as e:
        logger.error(f"[API] {route} upstream timeout: {e}")
        return _error(504, "Bright Data API timeout", e.message, e.error_code)
    except asyncio.TimeoutError:
        logger.error(f"[API] {route} timeout after {settings.api_search_timeout_s}s")
        return _error(504, "Bright Data API timeout", "Search request timed out", "UPSTREAM_TIMEOUT")
    except UpstreamConnectionException as e:
        logger.error(f"[API] {route} upstream unreachable: {e}")
        return _error(502, "Bright Data API error", e.message, e.error_code)
    except Exception as e:
        logger.error(f"[API] Unhandled error in {route}: {sanitize_for_log(str(e), 200)}", exc_info=True)
        return _error(500, "Proxy server error", str(e) or "Unknown error", "INTERNAL_ERROR")

    outcome.stages.append(PipelineStage.RESPONDED)
    report = outcome.report
    return JSONResponse(
        status_code=200,
        content=SearchResponse(
            query=query.text,
            results=[SearchResultItem(**r.to_dict()) for r in report.results],
            total_results=len(report.results),
            source=RESULT_SOURCE,
        ).to_payload(),
    )


def _error(status_code: int, error: str, message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            message=message,
            error_code=error_code,
            timestamp=utc_timestamp(),
        ).to_payload(),
    )
