"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Depends

from serp_proxy import __version__
from serp_proxy.api.dependencies import get_settings
from serp_proxy.core.config import Settings
from serp_proxy.schemas.search_schema import HealthResponse, UpstreamConfigStatus

router = APIRouter(tags=["health"])

SERVICE_NAME = "Bright Data Proxy"

AVAILABLE_ENDPOINTS = [
    "GET /health",
    "POST /api/brightdata",
    "GET /api/brightdataget",
]


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 업스트림 설정 여부 (토큰 값 자체는 노출하지 않음)
    """
    return HealthResponse(
        service=SERVICE_NAME,
        version=__version__,
        bright_data_config=UpstreamConfigStatus(
            has_api_token=settings.has_api_token,
            zone=settings.upstream_zone,
            endpoint=settings.upstream_endpoint,
        ),
    ).to_payload()


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": SERVICE_NAME,
        "version": __version__,
        "endpoints": AVAILABLE_ENDPOINTS,
    }
