"""Extraction Result - Standardized Result Format

추출 엔진이 돌려주는 결과 항목과, 추출 1회의 요약 리포트를 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


RESULT_SOURCE = "Bright Data SERP"

# 한 번의 응답에 담는 최대 결과 수
MAX_RESULTS = 10

MIN_TITLE_LENGTH = 3
MIN_SNIPPET_LENGTH = 10

NO_RESULTS_SNIPPET = "No search results were found. Try using different keywords or check your search terms."
LOAD_FAILED_SNIPPET = "Error parsing results. Try again with different keywords."


class ExtractionOutcome(str, Enum):
    """추출 결과 상태

    LOAD_FAILED / NO_ORGANIC_RESULTS 는 오류가 아니라 placeholder 응답으로 이어집니다.
    """

    ORGANIC = "organic"  # 트리 기반 추출 성공
    REGEX_FALLBACK = "regex_fallback"  # 정규식 폴백으로 추출
    NO_ORGANIC_RESULTS = "no_organic_results"  # 문서는 읽었지만 오가닉 결과 없음
    LOAD_FAILED = "load_failed"  # 마크업 없음/파싱 실패


@dataclass(frozen=True)
class ExtractedResult:
    """오가닉 검색 결과 1건"""

    title: str
    url: str
    snippet: str
    source: str = RESULT_SOURCE

    @property
    def is_acceptable(self) -> bool:
        """최종 게이트: 제목 > 3자, 스니펫 > 10자, URL 존재"""
        return (
            len(self.title) > MIN_TITLE_LENGTH
            and len(self.snippet) > MIN_SNIPPET_LENGTH
            and bool(self.url)
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
            "source": self.source,
        }

    @classmethod
    def no_results_placeholder(cls, query: str, search_url: str) -> "ExtractedResult":
        """오가닉 결과가 하나도 없을 때 쓰는 대체 결과"""
        return cls(
            title=f'No results for "{query}"',
            url=search_url,
            snippet=NO_RESULTS_SNIPPET,
        )

    @classmethod
    def load_failed_placeholder(cls, query: str, search_url: str) -> "ExtractedResult":
        """마크업을 읽지 못했을 때 쓰는 대체 결과"""
        return cls(
            title=f'Search results for "{query}"',
            url=search_url,
            snippet=LOAD_FAILED_SNIPPET,
        )


@dataclass
class ExtractionReport:
    """추출 1회의 결과 요약

    Attributes:
        query: 검색어
        outcome: 추출 상태
        results: 결과 목록 (항상 1개 이상)
        candidates_seen: 분류까지 간 후보 블록 수
        rejected: 분류기에서 제외된 블록 수
        dropped: 필드 추출/검증에서 탈락한 블록 수
        error_message: LOAD_FAILED 일 때 원인
    """

    query: str
    outcome: ExtractionOutcome
    results: list[ExtractedResult] = field(default_factory=list)
    candidates_seen: int = 0
    rejected: int = 0
    dropped: int = 0
    error_message: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.outcome in (ExtractionOutcome.NO_ORGANIC_RESULTS, ExtractionOutcome.LOAD_FAILED)

    def to_dicts(self) -> list[dict[str, str]]:
        return [r.to_dict() for r in self.results]
