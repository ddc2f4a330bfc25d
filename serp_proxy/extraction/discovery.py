"""Candidate Block Discovery - 결과 1건으로 보이는 컨테이너 노드 수집

Google 은 결과 마크업을 자주 바꾸므로 여러 구조 패턴을 순서대로(구체적인 것 먼저)
적용하고 합집합을 만듭니다. 여기서는 개수를 자르지 않습니다.
"""

from __future__ import annotations

from typing import NamedTuple

from selectolax.parser import HTMLParser, Node

from serp_proxy.extraction.dom import ancestors, contains


class CandidatePattern(NamedTuple):
    selector: str
    # 범용 패턴은 결과 여러 개를 감싼 래퍼에도 걸리므로 제목(h3)이 정확히 1개인 노드만 받습니다.
    single_title_only: bool = False


CANDIDATE_PATTERNS: tuple[CandidatePattern, ...] = (
    CandidatePattern("div.MjjYud"),
    CandidatePattern("div.g"),
    CandidatePattern("div.tF2Cxc"),
    CandidatePattern("div.N54PNb"),
    CandidatePattern("div[data-hveid][data-ved]", single_title_only=True),
    CandidatePattern("div[jscontroller][data-hveid]", single_title_only=True),
)


def _has_single_title(node: Node) -> bool:
    return len(node.css("h3")) == 1


def discover_candidates(
    tree: HTMLParser,
    patterns: tuple[CandidatePattern, ...] = CANDIDATE_PATTERNS,
) -> list[Node]:
    """후보 블록을 문서 순서로 반환 (수집은 패턴 순서대로)

    - 이미 수집한 노드(mem_id 동일)는 다시 넣지 않습니다.
    - 수집한 노드 안에 중첩된 노드는 건너뜁니다 (바깥 컨테이너가 결과를 소유).
    - 나중 패턴에서 나온 바깥 래퍼가 이미 수집한 노드를 감싸면 역시 건너뜁니다.
    """
    collected: list[Node] = []
    collected_ids: set[int] = set()
    visited: set[int] = set()

    for pattern in patterns:
        for node in tree.css(pattern.selector):
            if node.mem_id in visited:
                continue
            visited.add(node.mem_id)

            if pattern.single_title_only and not _has_single_title(node):
                continue
            if any(anc.mem_id in collected_ids for anc in ancestors(node)):
                continue
            if any(contains(node, c) for c in collected):
                continue

            collected.append(node)
            collected_ids.add(node.mem_id)

    # 패턴별로 모은 후보를 페이지 순서로 되돌림
    order = _document_order(tree)
    collected.sort(key=lambda n: order.get(n.mem_id, len(order)))
    return collected


def _document_order(tree: HTMLParser) -> dict[int, int]:
    if tree.root is None:
        return {}
    return {node.mem_id: idx for idx, node in enumerate(tree.root.traverse())}
