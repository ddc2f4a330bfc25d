"""정규식 기반 폴백 추출 (품질 저하 모드)

트리 기반 추출이 결과를 하나도 못 찾았을 때만 쓰입니다. 제목(h3.LC20lb), 외부 링크,
스니펫(.VwiC3b)을 각각 모은 뒤 순서대로 짝짓는 방식이라 정확도가 낮습니다.
광고 컨테이너는 미리 트리에서 제거한 뒤 HTML 을 다시 직렬화해서 사용합니다.
"""

from __future__ import annotations

import html as html_lib
import re

from selectolax.parser import HTMLParser

from serp_proxy.core.logging import logger
from serp_proxy.engine.result import RESULT_SOURCE, ExtractedResult
from serp_proxy.extraction.dom import normalize_space
from serp_proxy.utils.url_utils import clean_result_url


_TITLE_RE = re.compile(r'<h3[^>]*class="[^"]*LC20lb[^"]*"[^>]*>(.*?)</h3>', re.S)
_LINK_RE = re.compile(r'<a[^>]*href="([^"]*)"[^>]*>')
_SNIPPET_RE = re.compile(r'<div[^>]*class="[^"]*VwiC3b[^"]*"[^>]*>(.*?)</div>', re.S)
_TAG_RE = re.compile(r"<[^>]*>")

MIN_REGEX_SNIPPET_LENGTH = 5

# 정규식으로 훑기 전에 통째로 지우는 광고 영역
AD_REGION_SELECTORS = (
    "#tads",
    "#tadsb",
    "#bottomads",
    "div.uEierd",
    "div[data-text-ad]",
    "div.commercial-unit-desktop-top",
    "div.commercial-unit-desktop-rhs",
)


def _strip_tags(fragment: str) -> str:
    return normalize_space(html_lib.unescape(_TAG_RE.sub("", fragment)))


def _strip_ad_regions(tree: HTMLParser) -> str:
    for selector in AD_REGION_SELECTORS:
        for node in tree.css(selector):
            node.decompose()
    return tree.html or ""


def extract_with_regex(
    tree: HTMLParser,
    seen_urls: set[str],
    limit: int,
    source: str = RESULT_SOURCE,
) -> list[ExtractedResult]:
    """정규식 짝짓기 폴백. tree 는 광고 영역 제거로 변경됩니다."""
    markup = _strip_ad_regions(tree)

    titles = [t for t in (_strip_tags(m) for m in _TITLE_RE.findall(markup)) if t]

    links: list[str] = []
    for href in _LINK_RE.findall(markup):
        url = clean_result_url(html_lib.unescape(href))
        if url:
            links.append(url)

    snippets = [
        s for s in (_strip_tags(m) for m in _SNIPPET_RE.findall(markup))
        if len(s) > MIN_REGEX_SNIPPET_LENGTH
    ]

    logger.debug(
        f"[EXTRACT] regex fallback: titles={len(titles)}, links={len(links)}, snippets={len(snippets)}"
    )

    results: list[ExtractedResult] = []
    for idx in range(min(len(titles), len(links))):
        if len(results) >= limit:
            break
        url = links[idx]
        if url in seen_urls:
            continue
        snippet = snippets[idx] if idx < len(snippets) else ""
        result = ExtractedResult(title=titles[idx], url=url, snippet=snippet, source=source)
        if not result.is_acceptable:
            continue
        seen_urls.add(url)
        results.append(result)

    return results
