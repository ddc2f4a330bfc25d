"""Result Assembler 단위 테스트

핵심 보장:
- 결과는 항상 1~10건 (비어 있지 않음)
- URL 중복 없음, http(s) 절대 URL 만
- 광고/기능 영역/숨김 블록은 결과에 없음
- 추출할 것이 없으면 placeholder 1건
"""

from __future__ import annotations

import pytest

from fixtures import serp_pages as pages
from serp_proxy.engine.result import (
    LOAD_FAILED_SNIPPET,
    NO_RESULTS_SNIPPET,
    RESULT_SOURCE,
    ExtractionOutcome,
)
from serp_proxy.extraction.assembler import extract_results
from serp_proxy.utils.url_utils import build_search_url


def test_rust_programming_scenario() -> None:
    """오가닉 2건 + 상단 광고 1건 → 오가닉 2건만, 문서 순서대로"""
    report = extract_results(pages.RUST_PAGE, "rust programming")

    assert report.outcome == ExtractionOutcome.ORGANIC
    assert [r.url for r in report.results] == [
        "https://www.rust-lang.org/",
        "https://doc.rust-lang.org/book/",
    ]
    assert all(r.source == RESULT_SOURCE for r in report.results)
    assert report.rejected == 1
    assert not report.is_placeholder


def test_mixed_page_keeps_only_organic_results() -> None:
    report = extract_results(pages.MIXED_PAGE, "rust programming")

    urls = [r.url for r in report.results]
    assert urls == ["https://www.rust-lang.org/", "https://doc.rust-lang.org/book/"]
    for banned in ("bootcamp", "sponsor", "faq", "related", "youtube", "hidden", "short"):
        assert not any(banned in u for u in urls), banned


def test_no_results_page_returns_placeholder() -> None:
    query = "zzz_no_such_thing_123"
    report = extract_results(pages.NO_RESULTS_PAGE, query)

    assert report.outcome == ExtractionOutcome.NO_ORGANIC_RESULTS
    assert report.is_placeholder
    assert len(report.results) == 1

    placeholder = report.results[0]
    assert query in placeholder.title
    assert placeholder.url == build_search_url(query)
    assert placeholder.snippet == NO_RESULTS_SNIPPET


@pytest.mark.parametrize("markup", ["", "   ", None, 12345])
def test_unloadable_markup_returns_load_failed_placeholder(markup) -> None:
    report = extract_results(markup, "rust programming")

    assert report.outcome == ExtractionOutcome.LOAD_FAILED
    assert report.error_message
    assert len(report.results) == 1
    assert report.results[0].snippet == LOAD_FAILED_SNIPPET
    assert report.results[0].url.startswith("https://www.google.com/search?q=rust%20programming")


def test_placeholder_uses_given_fallback_url() -> None:
    report = extract_results("", "rust", fallback_url="https://search.example.com/?q=rust")
    assert report.results[0].url == "https://search.example.com/?q=rust"


def test_results_are_capped_at_ten() -> None:
    report = extract_results(pages.many_results_page(15), "rust")

    assert len(report.results) == 10
    assert report.candidates_seen == 10
    assert [r.title for r in report.results][:2] == ["Rust Result Number 0", "Rust Result Number 1"]


def test_top_result_in_other_container_shape_is_kept() -> None:
    """div.g 1건 뒤에 div.MjjYud 10건: 1위 결과가 잘리지 않고 맨 앞에 옴"""
    markup = pages.page(
        pages.organic_block(
            "https://site0.example.com/rust",
            "Rust Result Number 0",
            "Snippet describing Rust result number 0 in enough detail to pass.",
        ),
        *[
            pages.organic_block(
                f"https://site{i}.example.com/rust",
                f"Rust Result Number {i}",
                f"Snippet describing Rust result number {i} in enough detail to pass.",
                container="MjjYud",
            )
            for i in range(1, 11)
        ],
    )
    urls = [r.url for r in extract_results(markup, "rust").results]

    assert urls == [f"https://site{i}.example.com/rust" for i in range(10)]


def test_max_results_is_respected_but_never_exceeds_ten() -> None:
    assert len(extract_results(pages.many_results_page(15), "rust", max_results=3).results) == 3
    assert len(extract_results(pages.many_results_page(15), "rust", max_results=50).results) == 10


def test_duplicate_urls_are_collapsed() -> None:
    report = extract_results(pages.DUPLICATE_URL_PAGE, "rust")

    assert [r.url for r in report.results] == ["https://www.rust-lang.org/"]
    assert report.dropped == 1


@pytest.mark.parametrize(
    "markup",
    [pages.RUST_PAGE, pages.MIXED_PAGE, pages.DUPLICATE_URL_PAGE, pages.many_results_page(25), pages.NO_RESULTS_PAGE],
)
def test_output_invariants(markup: str) -> None:
    results = extract_results(markup, "rust").results

    assert 1 <= len(results) <= 10
    urls = [r.url for r in results]
    assert len(urls) == len(set(urls))
    assert all(u.startswith(("http://", "https://")) for u in urls)
    assert all(r.title and r.snippet and r.source for r in results)


def test_regex_fallback_is_disabled_by_default() -> None:
    report = extract_results(pages.REGEX_ONLY_PAGE, "rust")
    assert report.outcome == ExtractionOutcome.NO_ORGANIC_RESULTS


def test_regex_fallback_skips_ad_regions() -> None:
    report = extract_results(pages.REGEX_ONLY_PAGE, "rust", regex_fallback=True)

    assert report.outcome == ExtractionOutcome.REGEX_FALLBACK
    assert [r.url for r in report.results] == ["https://regex.example.com/one"]
    assert report.results[0].title == "Regex Result One"
    assert report.results[0].snippet == "Regex fallback snippet text for the first result."


def test_regex_fallback_not_used_when_tree_finds_results() -> None:
    report = extract_results(pages.RUST_PAGE, "rust", regex_fallback=True)
    assert report.outcome == ExtractionOutcome.ORGANIC


def test_same_input_gives_same_output() -> None:
    first = extract_results(pages.MIXED_PAGE, "rust").to_dicts()
    second = extract_results(pages.MIXED_PAGE, "rust").to_dicts()
    assert first == second
