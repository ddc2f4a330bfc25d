"""Document Loader / Candidate Discovery 단위 테스트"""

from __future__ import annotations

import pytest
from selectolax.parser import HTMLParser

from fixtures import serp_pages as pages
from serp_proxy.core.exceptions import DocumentLoadError
from serp_proxy.extraction.discovery import CandidatePattern, discover_candidates
from serp_proxy.extraction.dom import attr, class_tokens
from serp_proxy.extraction.loader import load_document


@pytest.mark.parametrize("markup", ["", "   \n\t  ", None, b"<html></html>", 42])
def test_load_document_rejects_unusable_input(markup) -> None:
    with pytest.raises(DocumentLoadError) as exc_info:
        load_document(markup)
    assert exc_info.value.error_code == "LOAD_FAILURE"


def test_load_document_rejects_empty_body() -> None:
    with pytest.raises(DocumentLoadError):
        load_document("<html><head><title>t</title></head><body>   </body></html>")


def test_load_document_tolerates_broken_markup() -> None:
    tree = load_document("<div class='g'><a href='https://example.com'><h3>Unclosed title")
    assert tree.css_first("h3") is not None


def test_load_document_returns_tree_for_serp() -> None:
    tree = load_document(pages.RUST_PAGE)
    assert tree.css_first("#rso") is not None


def test_discovery_keeps_outermost_container_only() -> None:
    tree = HTMLParser(pages.page(pages.RUST_OFFICIAL, pages.RUST_BOOK_WRAPPED))
    blocks = discover_candidates(tree)

    # div.g 안의 div.tF2Cxc 는 별도 후보가 아님
    assert len(blocks) == 2
    assert all("g" in class_tokens(b) for b in blocks)


def test_discovery_returns_document_order_within_pattern() -> None:
    tree = HTMLParser(pages.many_results_page(5))
    blocks = discover_candidates(tree)

    hrefs = [attr(b.css_first("a"), "href") for b in blocks]
    assert hrefs == [f"https://site{i}.example.com/rust" for i in range(5)]


def test_discovery_returns_page_order_across_patterns() -> None:
    markup = pages.page(
        pages.organic_block("https://site0.example.com/rust", "Rust Result Number 0", "First ranked snippet text."),
        *[
            pages.organic_block(
                f"https://site{i}.example.com/rust", f"Rust Result Number {i}", f"Snippet text number {i}.",
                container="MjjYud",
            )
            for i in range(1, 4)
        ],
    )
    blocks = discover_candidates(HTMLParser(markup))

    hrefs = [attr(b.css_first("a"), "href") for b in blocks]
    assert hrefs == [f"https://site{i}.example.com/rust" for i in range(4)]


def test_discovery_skips_blocks_nested_in_earlier_pattern() -> None:
    tree = HTMLParser(pages.page(pages.PEOPLE_ALSO_ASK))
    blocks = discover_candidates(tree)

    # MjjYud 가 먼저 잡히므로 안쪽 div.g 는 후보가 아님
    assert len(blocks) == 1
    assert "MjjYud" in class_tokens(blocks[0])


def test_discovery_skips_outer_wrapper_of_collected_block() -> None:
    markup = pages.page(
        """
        <div data-hveid="CAEQ" data-ved="0ah">
          <div class="g">
            <a href="https://wrapped.example.com/"><h3>Wrapped Result Title</h3></a>
            <div class="VwiC3b">Snippet text for a wrapped organic result block.</div>
          </div>
        </div>
        """
    )
    blocks = discover_candidates(HTMLParser(markup))

    assert len(blocks) == 1
    assert "g" in class_tokens(blocks[0])


def test_generic_pattern_requires_single_title() -> None:
    markup = pages.page(
        """
        <div data-hveid="CAEQ" data-ved="0ah">
          <a href="https://one.example.com/"><h3>First Generic Title</h3></a>
          <a href="https://two.example.com/"><h3>Second Generic Title</h3></a>
        </div>
        <div data-hveid="CAIQ" data-ved="0ai">
          <a href="https://three.example.com/"><h3>Only Generic Title</h3></a>
          <span>Generic container snippet with a single result title.</span>
        </div>
        """
    )
    blocks = discover_candidates(HTMLParser(markup))

    assert len(blocks) == 1
    assert attr(blocks[0], "data-hveid") == "CAIQ"


def test_discovery_with_custom_patterns() -> None:
    markup = pages.page('<section class="result"><a href="https://x.example.com"><h3>X</h3></a></section>')
    blocks = discover_candidates(HTMLParser(markup), (CandidatePattern("section.result"),))
    assert len(blocks) == 1


def test_discovery_on_page_without_results() -> None:
    assert discover_candidates(HTMLParser(pages.NO_RESULTS_PAGE)) == []
