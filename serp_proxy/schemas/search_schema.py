"""Pydantic 스키마 정의 - 응답 envelope"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp() -> str:
    """ISO-8601 UTC 타임스탬프 (밀리초, Z 접미사)"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class SearchResultItem(BaseModel):
    """오가닉 결과 1건"""
    title: str = Field(..., description="결과 제목")
    url: str = Field(..., description="결과 URL (http/https 절대 경로)")
    snippet: str = Field(..., description="요약문")
    source: str = Field(..., description="결과 출처 라벨")


class SearchResponse(_CamelModel):
    """검색 성공 응답 (placeholder 포함)"""
    success: bool = Field(True, description="항상 true")
    query: str = Field(..., description="검색어")
    results: List[SearchResultItem] = Field(..., min_length=1, max_length=10, description="결과 목록")
    total_results: int = Field(..., alias="totalResults", ge=1, description="결과 수")
    source: str = Field(..., description="결과 출처 라벨")
    timestamp: str = Field(default_factory=utc_timestamp, description="응답 시각")


class ErrorResponse(_CamelModel):
    """에러 응답"""
    success: bool = Field(False, description="항상 false")
    error: str = Field(..., description="에러 분류")
    message: Optional[str] = Field(None, description="상세 메시지")
    error_code: Optional[str] = Field(None, alias="errorCode", description="내부 에러 코드")
    timestamp: Optional[str] = Field(None, description="응답 시각")


class UpstreamErrorResponse(_CamelModel):
    """업스트림 실패 응답 (502)"""
    success: bool = Field(False, description="항상 false")
    error: str = Field("Bright Data API error", description="에러 분류")
    status: int = Field(..., description="업스트림 HTTP 상태 코드")
    status_text: str = Field("", alias="statusText", description="업스트림 상태 문구")
    details: str = Field("", description="업스트림 응답 본문 (절단)")


class NotFoundResponse(_CamelModel):
    """404 응답"""
    success: bool = Field(False)
    error: str = Field("Endpoint not found")
    available_endpoints: List[str] = Field(..., alias="availableEndpoints")


class UpstreamConfigStatus(_CamelModel):
    """업스트림 설정 요약 (토큰 값은 노출하지 않음)"""
    has_api_token: bool = Field(..., alias="hasApiToken")
    zone: str
    endpoint: str


class HealthResponse(_CamelModel):
    """헬스 체크 응답"""
    status: str = Field("healthy", description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
    version: str = Field(..., description="버전")
    timestamp: str = Field(default_factory=utc_timestamp)
    bright_data_config: UpstreamConfigStatus = Field(..., alias="brightDataConfig")
