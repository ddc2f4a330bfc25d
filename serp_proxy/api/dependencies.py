"""FastAPI 의존성 - 앱 팩토리가 app.state 에 올려둔 객체를 꺼냅니다."""

from fastapi import Request

from serp_proxy.core.config import Settings
from serp_proxy.engine.pipeline import SearchPipeline


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pipeline(request: Request) -> SearchPipeline:
    return request.app.state.pipeline
