"""Document Loader - 원본 마크업 문자열을 selectolax 트리로 변환"""

from __future__ import annotations

from typing import Any

from selectolax.parser import HTMLParser, Node

from serp_proxy.core.exceptions import DocumentLoadError
from serp_proxy.extraction.dom import TEXT_TAG, is_element


def _has_content(body: Node) -> bool:
    for child in body.iter(include_text=True):
        if child.tag == TEXT_TAG:
            if (child.text(deep=True) or "").strip():
                return True
        elif is_element(child):
            return True
    return False


def load_document(markup: Any) -> HTMLParser:
    """마크업을 문서 트리로 읽습니다.

    Raises:
        DocumentLoadError: 문자열이 아니거나, 비어 있거나, 본문이 없는 경우
    """
    if not isinstance(markup, str):
        raise DocumentLoadError(
            "markup is not a string", {"type": type(markup).__name__}
        )
    if not markup.strip():
        raise DocumentLoadError("markup is empty")

    try:
        tree = HTMLParser(markup)
    except Exception as e:
        raise DocumentLoadError(f"parser error: {type(e).__name__}") from e

    body = tree.body
    if tree.root is None or body is None:
        raise DocumentLoadError("document has no body", {"length": len(markup)})
    if not _has_content(body):
        raise DocumentLoadError("document body is empty", {"length": len(markup)})

    return tree
