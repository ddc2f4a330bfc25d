"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from serp_proxy.api import AVAILABLE_ENDPOINTS, health_router, search_router
from serp_proxy.core.config import Settings, load_settings
from serp_proxy.core.logging import logger, setup_logging
from serp_proxy.core.security import apply_security_headers, log_request
from serp_proxy.crawlers.brightdata import BrightDataClient, JsonPoster
from serp_proxy.crawlers.http_client import UpstreamHttpClient
from serp_proxy.engine.pipeline import SearchPipeline
from serp_proxy.schemas.search_schema import ErrorResponse, NotFoundResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    settings: Settings = app.state.settings
    logger.info(
        f"Starting Bright Data proxy (zone={settings.upstream_zone}, "
        f"token_configured={settings.has_api_token})"
    )
    if not settings.has_api_token:
        logger.warning("Bright Data API token not configured; search requests will fail with 500")
    yield
    logger.info("Shutting down application...")
    close = getattr(app.state.http_client, "close", None)
    if close is not None:
        try:
            await close()
        except Exception as e:
            # 종료 훅 예외는 앱 종료를 막지 않음
            logger.warning(f"HTTP client shutdown failed: {type(e).__name__}")


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[JsonPoster] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        settings: 설정 (없으면 환경 변수/.env 에서 로드)
        http_client: 업스트림 HTTP 클라이언트 (테스트에서 교체용)

    Returns:
        FastAPI 앱 인스턴스
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )

    http_client = http_client or UpstreamHttpClient(settings)
    app.state.settings = settings
    app.state.http_client = http_client
    app.state.pipeline = SearchPipeline(settings, BrightDataClient(settings, http_client))

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex or None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    @app.middleware("http")
    async def security_headers_middleware(request: Request, call_next):
        await log_request(request)
        response = await call_next(request)
        apply_security_headers(response.headers)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # 매칭되는 라우트가 없거나 메서드가 다르면 404 + 사용 가능한 엔드포인트 목록
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content=NotFoundResponse(available_endpoints=AVAILABLE_ENDPOINTS).to_payload(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).to_payload(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"[API] Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                message=str(exc) or "Unknown error",
            ).to_payload(),
        )

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(search_router)

    return app
