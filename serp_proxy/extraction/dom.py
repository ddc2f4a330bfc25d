"""selectolax 노드 헬퍼 - 가시 텍스트, 조상 탐색, 숨김 판정"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from selectolax.parser import Node


TEXT_TAG = "-text"

# 텍스트로 치지 않는 태그
SKIP_TEXT_TAGS = frozenset({"script", "style", "noscript", "template", "svg", "head", "title", "meta", "link"})

_WS_RE = re.compile(r"\s+")
_INVISIBLE_CHARS = str.maketrans({"‍": "", "﻿": "", "​": "", "\xa0": " "})


def normalize_space(text: Optional[str]) -> str:
    if not text:
        return ""
    return _WS_RE.sub(" ", text.translate(_INVISIBLE_CHARS)).strip()


def attr(node: Optional[Node], name: str) -> str:
    if node is None:
        return ""
    return node.attributes.get(name) or ""


def class_tokens(node: Node) -> set[str]:
    return set(attr(node, "class").split())


def is_element(node: Node) -> bool:
    tag = node.tag or ""
    return bool(tag) and not tag.startswith(("-", "_", "#"))


def is_hidden_element(node: Node) -> bool:
    """display:none / visibility:hidden / hidden / aria-hidden 여부"""
    if not is_element(node):
        return False
    attrs = node.attributes
    if "hidden" in attrs:
        return True
    if (attrs.get("aria-hidden") or "").strip().lower() == "true":
        return True
    style = "".join((attrs.get("style") or "").split()).lower()
    return "display:none" in style or "visibility:hidden" in style


def ancestors(node: Node, include_self: bool = False) -> Iterator[Node]:
    """부모 방향으로 올라가며 요소 노드를 반환 (html 에서 멈춤)"""
    current = node if include_self else node.parent
    while current is not None and is_element(current):
        yield current
        if current.tag == "html":
            return
        current = current.parent


def closest(node: Optional[Node], tag: str) -> Optional[Node]:
    if node is None:
        return None
    for anc in ancestors(node, include_self=True):
        if anc.tag == tag:
            return anc
    return None


def contains(outer: Node, inner: Node) -> bool:
    return any(anc.mem_id == outer.mem_id for anc in ancestors(inner))


def iter_visible_text(node: Node, exclude_ids: frozenset[int] = frozenset()) -> Iterator[str]:
    """보이는 텍스트 조각을 문서 순서대로 반환

    script/style 류, 숨김 요소, exclude_ids 에 해당하는 서브트리는 건너뜁니다.
    """
    for child in node.iter(include_text=True):
        if child.tag == TEXT_TAG:
            text = normalize_space(child.text(deep=True))
            if text:
                yield text
            continue
        if not is_element(child) or child.tag in SKIP_TEXT_TAGS:
            continue
        if child.mem_id in exclude_ids or is_hidden_element(child):
            continue
        yield from iter_visible_text(child, exclude_ids)


def visible_text(node: Optional[Node], exclude_ids: frozenset[int] = frozenset()) -> str:
    if node is None:
        return ""
    return normalize_space(" ".join(iter_visible_text(node, exclude_ids)))


def element_children(node: Node) -> Iterator[Node]:
    for child in node.iter(include_text=False):
        if is_element(child):
            yield child
