"""Result Assembler - 로드 → 후보 탐색 → 분류 → 필드 추출 → 조립

반환 목록은 절대 비어 있지 않습니다. 추출할 것이 없으면 원인(로드 실패 / 오가닉 없음)을
설명하는 placeholder 결과 1건을 넣습니다.
"""

from __future__ import annotations

from typing import Any, Optional

from serp_proxy.core.exceptions import DocumentLoadError
from serp_proxy.core.logging import logger
from serp_proxy.engine.result import (
    MAX_RESULTS,
    RESULT_SOURCE,
    ExtractedResult,
    ExtractionOutcome,
    ExtractionReport,
)
from serp_proxy.extraction.classifier import classify
from serp_proxy.extraction.discovery import discover_candidates
from serp_proxy.extraction.extractor import extract_fields
from serp_proxy.extraction.loader import load_document
from serp_proxy.extraction.regex_fallback import extract_with_regex
from serp_proxy.utils.url_utils import build_search_url


def _placeholder_report(
    query: str,
    outcome: ExtractionOutcome,
    search_url: str,
    error_message: Optional[str] = None,
    **counts: int,
) -> ExtractionReport:
    if outcome == ExtractionOutcome.LOAD_FAILED:
        placeholder = ExtractedResult.load_failed_placeholder(query, search_url)
    else:
        placeholder = ExtractedResult.no_results_placeholder(query, search_url)
    return ExtractionReport(
        query=query,
        outcome=outcome,
        results=[placeholder],
        error_message=error_message,
        **counts,
    )


def extract_results(
    markup: Any,
    query: str,
    *,
    max_results: int = MAX_RESULTS,
    fallback_url: Optional[str] = None,
    regex_fallback: bool = False,
    source: str = RESULT_SOURCE,
) -> ExtractionReport:
    """SERP 마크업에서 오가닉 결과를 추출

    Args:
        markup: 업스트림 응답 본문
        query: 원래 검색어 (placeholder 문구에 사용)
        max_results: 최대 결과 수 (MAX_RESULTS 를 넘을 수 없음)
        fallback_url: placeholder 에 넣을 검색 URL (없으면 Google 검색 URL 생성)
        regex_fallback: 트리 기반 결과가 0건일 때 정규식 폴백 사용 여부
        source: 결과 출처 라벨

    Returns:
        ExtractionReport: results 는 항상 1~max_results 건
    """
    # 호출 측 요청 수(max_results)를 따르되 MAX_RESULTS(10)를 넘지 않음
    limit = max(1, min(max_results, MAX_RESULTS))
    search_url = fallback_url or build_search_url(query)

    try:
        tree = load_document(markup)
    except DocumentLoadError as e:
        logger.info(f"[EXTRACT] load failure: {e.message}")
        return _placeholder_report(query, ExtractionOutcome.LOAD_FAILED, search_url, e.message)

    results: list[ExtractedResult] = []
    seen_urls: set[str] = set()
    candidates_seen = rejected = dropped = 0

    try:
        for block in discover_candidates(tree):
            if len(results) >= limit:
                break
            candidates_seen += 1

            verdict = classify(block)
            if not verdict.keep:
                rejected += 1
                logger.debug(f"[EXTRACT] reject: {verdict.reason}")
                continue

            result = extract_fields(block, seen_urls, source=source)
            if result is None:
                dropped += 1
                continue

            seen_urls.add(result.url)
            results.append(result)

        outcome = ExtractionOutcome.ORGANIC
        if not results and regex_fallback:
            results = extract_with_regex(tree, seen_urls, limit, source=source)
            outcome = ExtractionOutcome.REGEX_FALLBACK
    except Exception as e:
        # 파서 내부 예외도 로드 실패와 같은 placeholder 경로로 흡수
        logger.error(f"[EXTRACT] unexpected parser error: {type(e).__name__}: {e}", exc_info=True)
        return _placeholder_report(
            query, ExtractionOutcome.LOAD_FAILED, search_url, f"{type(e).__name__}: {e}"
        )

    logger.info(
        f"[EXTRACT] candidates={candidates_seen}, rejected={rejected}, "
        f"dropped={dropped}, results={len(results)}"
    )

    if not results:
        return _placeholder_report(
            query,
            ExtractionOutcome.NO_ORGANIC_RESULTS,
            search_url,
            candidates_seen=candidates_seen,
            rejected=rejected,
            dropped=dropped,
        )

    return ExtractionReport(
        query=query,
        outcome=outcome,
        results=results,
        candidates_seen=candidates_seen,
        rejected=rejected,
        dropped=dropped,
    )
