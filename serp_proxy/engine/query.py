"""Search Query - 요청 1건의 검색 조건

POST 본문과 GET 쿼리스트링 두 가지 전송 형태 모두 SearchQuery.create 하나로 모입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from serp_proxy.core.exceptions import InvalidQueryException
from serp_proxy.core.logging import logger
from serp_proxy.utils.url_utils import GOOGLE_SEARCH_URL, build_search_url


DEFAULT_RESULT_COUNT = 10
DEFAULT_LANGUAGE = "en"
DEFAULT_REGION = "us"
MAX_QUERY_LENGTH = 2048
MAX_LOCALE_LENGTH = 16

QUERY_ERROR_MESSAGE = "Query must be a non-empty string."


@dataclass(frozen=True)
class SearchQuery:
    """검색 조건 (불변)

    Attributes:
        text: 앞뒤 공백이 제거된 검색어
        result_count: Google 에 요청할 결과 수 (num)
        language: 인터페이스 언어 (hl)
        region: 국가 코드 (gl)
    """

    text: str
    result_count: int = DEFAULT_RESULT_COUNT
    language: str = DEFAULT_LANGUAGE
    region: str = DEFAULT_REGION

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip() or self.text != self.text.strip():
            raise InvalidQueryException(QUERY_ERROR_MESSAGE)
        if len(self.text) > MAX_QUERY_LENGTH:
            raise InvalidQueryException(f"Query must be at most {MAX_QUERY_LENGTH} characters.")
        if (
            isinstance(self.result_count, bool)
            or not isinstance(self.result_count, int)
            or self.result_count <= 0
        ):
            raise InvalidQueryException("num must be a positive integer.", field="num")
        for field_name in ("language", "region"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value or len(value) > MAX_LOCALE_LENGTH:
                raise InvalidQueryException(f"{field_name} must be a short non-empty string.", field=field_name)

    @classmethod
    def create(
        cls,
        text: Any,
        result_count: Any = None,
        language: Any = None,
        region: Any = None,
    ) -> "SearchQuery":
        """입력값을 정규화해 SearchQuery 생성

        Raises:
            InvalidQueryException: 검색어가 없거나/문자열이 아니거나/공백뿐인 경우,
                hl/gl 이 문자열이 아닌 경우 (num 은 기본값으로 대체)
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidQueryException(QUERY_ERROR_MESSAGE)

        return cls(
            text=text.strip(),
            result_count=_coerce_result_count(result_count),
            language=_coerce_locale(language, DEFAULT_LANGUAGE, "hl"),
            region=_coerce_locale(region, DEFAULT_REGION, "gl"),
        )

    @classmethod
    def from_body(cls, body: Any) -> "SearchQuery":
        """POST JSON 본문 어댑터. dict 가 아니면 빈 본문으로 취급합니다."""
        payload: Mapping[str, Any] = body if isinstance(body, Mapping) else {}
        return cls.create(
            payload.get("query"),
            payload.get("num"),
            payload.get("hl"),
            payload.get("gl"),
        )

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "SearchQuery":
        """GET 쿼리스트링 어댑터"""
        return cls.create(
            params.get("query"),
            params.get("num"),
            params.get("hl"),
            params.get("gl"),
        )

    def upstream_url(self, base_url: str = GOOGLE_SEARCH_URL) -> str:
        """업스트림이 가져올 검색 결과 페이지 URL"""
        return build_search_url(self.text, self.result_count, self.language, self.region, base_url=base_url)

    def fallback_url(self, base_url: str = GOOGLE_SEARCH_URL) -> str:
        """placeholder 결과에 넣을 검색 URL"""
        return build_search_url(self.text, base_url=base_url)


def _coerce_result_count(value: Any) -> int:
    """num 정규화. 양의 정수로 읽을 수 없으면 기본값(10)으로 대체합니다 (400 아님).

    상한은 두지 않습니다. 값은 업스트림 URL 에 그대로 실리고, 응답 결과 수는
    추출 단계에서 따로 10건으로 제한됩니다.
    """
    count: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        count = value
    elif isinstance(value, float) and value.is_integer():
        count = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        count = int(value.strip())

    if count is None or count <= 0:
        if value is not None and value != "":
            logger.debug(f"[QUERY] unusable num ({type(value).__name__}); using default {DEFAULT_RESULT_COUNT}")
        return DEFAULT_RESULT_COUNT
    return count


def _coerce_locale(value: Any, default: str, field: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidQueryException(f"{field} must be a string.", field=field)
    value = value.strip()
    return value or default


def describe_query(query: Optional[SearchQuery]) -> str:
    """로그용 요약 (검색어 원문 대신 길이만)"""
    if query is None:
        return "query=<none>"
    return f"query(len={len(query.text)}), num={query.result_count}, hl={query.language}, gl={query.region}"
