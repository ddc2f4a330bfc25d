"""Field Extractor - 블록에서 제목/URL/스니펫 추출

제목 링크와 스니펫은 "기본 셀렉터 → 폴백" 순서의 순수 함수 목록으로 찾습니다.
어느 단계에서든 조건을 못 맞추면 None 을 돌려주며, 이는 오류가 아니라 일상적인
휴리스틱 미스입니다.
"""

from __future__ import annotations

from typing import Callable, Optional

from selectolax.parser import Node

from serp_proxy.core.logging import logger
from serp_proxy.engine.result import RESULT_SOURCE, ExtractedResult
from serp_proxy.extraction.dom import attr, closest, iter_visible_text, visible_text
from serp_proxy.utils.url_utils import clean_result_url


# 스니펫 재구성 시 조각 최소 길이 / 최대 길이
MIN_FRAGMENT_LENGTH = 15
MAX_SNIPPET_LENGTH = 350

HEADING_SELECTOR = 'h3, h2, [role="heading"]'

SNIPPET_SELECTORS: tuple[str, ...] = (
    ".VwiC3b",
    ".IsZvec",
    ".aCOpRe",
    "[data-sncf]",
    "[data-snf]",
    ".lEBKkf",
    ".yDYNvb",
    ".s3v9rd",
    ".st",
)

TitleMatch = tuple[Node, Node]  # (link, heading)
TitleMatcher = Callable[[Node], Optional[TitleMatch]]


def _has_href(link: Optional[Node]) -> bool:
    return link is not None and bool(attr(link, "href").strip())


def match_link_heading(block: Node) -> Optional[TitleMatch]:
    """기본 패턴: <a><h3>제목</h3></a>"""
    for heading in block.css("a h3"):
        link = closest(heading, "a")
        if _has_href(link):
            return link, heading
    return None


def match_heading_link(block: Node) -> Optional[TitleMatch]:
    """<h3><a>제목</a></h3>"""
    for link in block.css("h3 a"):
        heading = closest(link, "h3")
        if heading is not None and _has_href(link):
            return link, heading
    return None


def match_first_link(block: Node) -> Optional[TitleMatch]:
    """폴백: 블록의 첫 링크 + 그 안(또는 바로 옆)의 제목"""
    link = block.css_first("a[href]")
    if not _has_href(link):
        return None

    heading = link.css_first(HEADING_SELECTOR)
    if heading is None and link.parent is not None:
        heading = link.parent.css_first(HEADING_SELECTOR)
    if heading is None:
        return None
    return link, heading


TITLE_MATCHERS: tuple[TitleMatcher, ...] = (
    match_link_heading,
    match_heading_link,
    match_first_link,
)


def find_title(block: Node) -> Optional[TitleMatch]:
    for matcher in TITLE_MATCHERS:
        found = matcher(block)
        if found is not None:
            return found
    return None


def find_snippet(block: Node, exclude_ids: frozenset[int] = frozenset()) -> str:
    """알려진 스니펫 컨테이너 → 없으면 보이는 텍스트 조각으로 재구성"""
    for selector in SNIPPET_SELECTORS:
        node = block.css_first(selector)
        if node is None or node.mem_id in exclude_ids:
            continue
        text = visible_text(node)
        if text:
            return text

    return reconstruct_snippet(block, exclude_ids)


def reconstruct_snippet(block: Node, exclude_ids: frozenset[int] = frozenset()) -> str:
    """제목/링크 밖의 긴 텍스트 조각(15자 초과)을 이어 붙여 350자로 자름"""
    fragments = [
        fragment
        for fragment in iter_visible_text(block, exclude_ids)
        if len(fragment) > MIN_FRAGMENT_LENGTH
    ]
    return " ".join(fragments)[:MAX_SNIPPET_LENGTH].strip()


def extract_fields(
    block: Node,
    seen_urls: set[str],
    source: str = RESULT_SOURCE,
) -> Optional[ExtractedResult]:
    """블록 1개에서 결과 추출. 게이트를 통과하지 못하면 None

    seen_urls 는 호출 측이 관리합니다 (여기서는 조회만).
    """
    found = find_title(block)
    if found is None:
        logger.debug("[EXTRACT] drop: no title link")
        return None
    link, heading = found

    title = visible_text(heading)
    url = clean_result_url(attr(link, "href"))
    if url is None:
        logger.debug("[EXTRACT] drop: unusable url")
        return None
    if url in seen_urls:
        logger.debug("[EXTRACT] drop: duplicate url")
        return None

    snippet = find_snippet(block, frozenset({link.mem_id, heading.mem_id}))

    result = ExtractedResult(title=title, url=url, snippet=snippet, source=source)
    if not result.is_acceptable:
        logger.debug(
            f"[EXTRACT] drop: gate failed (title_len={len(title)}, snippet_len={len(snippet)})"
        )
        return None
    return result
