"""Block Classifier - 후보 블록을 오가닉 결과로 볼지 판정

광고/스폰서, 오가닉이 아닌 기능 영역(답변 박스, 관련 질문, 관련 검색, 뉴스, 동영상),
숨김 요소, 텍스트가 너무 짧은 블록을 걸러냅니다. 검색엔진 마크업에 대한 경험적
지식이 모두 이 모듈에 모여 있으므로 classify() 하나만 바꾸면 교체할 수 있습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from selectolax.parser import Node

from serp_proxy.extraction.dom import (
    ancestors,
    attr,
    class_tokens,
    element_children,
    is_hidden_element,
    iter_visible_text,
    normalize_space,
    visible_text,
)


# 이보다 짧은 블록은 오가닉 결과로 보기 어려움 (경험값)
MIN_BLOCK_TEXT_LENGTH = 50

AD_CONTAINER_IDS = frozenset({"tads", "tadsb", "bottomads"})
AD_CONTAINER_CLASSES = frozenset({
    "uEierd",
    "commercial-unit-desktop-top",
    "commercial-unit-desktop-rhs",
    "ads-ad",
    "ads-fr",
    "cu-container",
})
AD_CONTAINER_ATTRS = ("data-text-ad",)
AD_ARIA_LABELS = frozenset({"ads", "ad", "sponsored", "sponsored results", "sponsored result"})

# 블록 안에 단독으로 있는 광고 표시 문구
AD_TEXT_MARKERS = frozenset({"ad", "ads", "sponsored", "sponsored result", "sponsored results"})

FEATURE_LABELS = (
    "people also ask",
    "related searches",
    "top stories",
    "videos",
    "short videos",
    "things to know",
    "images",
    "perspectives",
    "discussions and forums",
)
FEATURE_CLASSES = frozenset({
    "no-snippet",
    "related-question-pair",
    "xpdopen",
    "ifM9O",
    "kp-wholepage",
    "g-blk",
})
FEATURE_TAGS = frozenset({
    "g-accordion-expander",
    "g-expandable-container",
    "video-voyager",
    "g-scrolling-carousel",
    "g-section-with-header",
})
FEATURE_ATTRS = ("data-initq",)

# 이 요소를 만나면 섹션 제목 탐색을 멈춤 (모든 섹션을 감싸는 루트)
RESULTS_ROOT_IDS = frozenset({"rso", "search", "center_col", "main", "rcnt"})
RESULTS_ROOT_TAGS = frozenset({"body", "html"})

SECTION_HEADING_TAGS = frozenset({"h2", "h4"})


@dataclass(frozen=True)
class BlockVerdict:
    """후보 블록 판정 결과"""

    keep: bool
    is_ad: bool = False
    is_special_feature: bool = False
    is_hidden: bool = False
    text_length: int = 0
    reason: Optional[str] = None


def _strip_marker(text: str) -> str:
    return normalize_space(text).strip(" ·:•-").lower()


def _is_ad_container(node: Node) -> bool:
    if attr(node, "id") in AD_CONTAINER_IDS:
        return True
    if class_tokens(node) & AD_CONTAINER_CLASSES:
        return True
    if any(a in node.attributes for a in AD_CONTAINER_ATTRS):
        return True
    return _strip_marker(attr(node, "aria-label")) in AD_ARIA_LABELS


def _has_ad_text_marker(block: Node) -> bool:
    return any(_strip_marker(fragment) in AD_TEXT_MARKERS for fragment in iter_visible_text(block))


def _matches_feature_label(text: str) -> bool:
    return _strip_marker(text) in FEATURE_LABELS


def _is_section_heading(node: Node) -> bool:
    if node.tag in SECTION_HEADING_TAGS:
        return True
    # role=heading 이면서 aria-level=3 인 것은 결과 제목
    return attr(node, "role") == "heading" and attr(node, "aria-level") != "3"


def _is_feature_container(node: Node) -> bool:
    if node.tag in FEATURE_TAGS:
        return True
    if class_tokens(node) & FEATURE_CLASSES:
        return True
    if any(a in node.attributes for a in FEATURE_ATTRS):
        return True
    label = attr(node, "aria-label")
    if label:
        lowered = _strip_marker(label)
        if any(lowered.startswith(f) for f in FEATURE_LABELS):
            return True
    return False


def _is_results_root(node: Node) -> bool:
    return node.tag in RESULTS_ROOT_TAGS or attr(node, "id") in RESULTS_ROOT_IDS


def _has_feature_heading_child(node: Node) -> bool:
    """직계 자식/손자 중 기능 섹션 제목이 있는지"""
    for child in element_children(node):
        if _is_section_heading(child) and _matches_feature_label(visible_text(child)):
            return True
        for grandchild in element_children(child):
            if _is_section_heading(grandchild) and _matches_feature_label(visible_text(grandchild)):
                return True
    return False


def _has_feature_heading_inside(block: Node) -> bool:
    for heading in block.css('h2, h4, [role="heading"]'):
        if _is_section_heading(heading) and _matches_feature_label(visible_text(heading)):
            return True
    return False


def _is_special_feature(block: Node) -> bool:
    chain = list(ancestors(block, include_self=True))
    if any(_is_feature_container(n) for n in chain):
        return True
    if block.css_first(", ".join(sorted(FEATURE_TAGS))) is not None:
        return True
    if _has_feature_heading_inside(block):
        return True
    for node in chain[1:]:
        if _is_results_root(node):
            break
        if _has_feature_heading_child(node):
            return True
    return False


def classify(block: Node) -> BlockVerdict:
    """후보 블록 1개 판정 (keep / reject)

    블록마다 독립적으로 판정합니다. keep 이어도 필드 추출에 실패하면 결과에서 빠집니다.
    """
    chain = list(ancestors(block, include_self=True))

    if any(_is_ad_container(n) for n in chain):
        return BlockVerdict(keep=False, is_ad=True, reason="ad_container")
    if _has_ad_text_marker(block):
        return BlockVerdict(keep=False, is_ad=True, reason="ad_marker")

    if _is_special_feature(block):
        return BlockVerdict(keep=False, is_special_feature=True, reason="special_feature")

    if any(is_hidden_element(n) for n in chain):
        return BlockVerdict(keep=False, is_hidden=True, reason="hidden")

    text_length = len(visible_text(block))
    if text_length < MIN_BLOCK_TEXT_LENGTH:
        return BlockVerdict(keep=False, text_length=text_length, reason="too_short")

    return BlockVerdict(keep=True, text_length=text_length)
