"""Engine Layer - 요청 모델과 결과 포맷

- SearchQuery: 검증된 검색 조건 (불변)
- ExtractedResult / ExtractionReport: 추출 결과 표준 포맷
- SearchPipeline 은 serp_proxy.engine.pipeline 에서 직접 import 합니다.
"""

from .query import SearchQuery
from .result import ExtractedResult, ExtractionOutcome, ExtractionReport

__all__ = [
    "SearchQuery",
    "ExtractedResult",
    "ExtractionOutcome",
    "ExtractionReport",
]
