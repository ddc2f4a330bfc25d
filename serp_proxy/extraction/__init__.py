"""SERP 오가닉 결과 추출 엔진

Loader → Discovery → Classifier → Extractor → Assembler 순서의 순수 파싱 로직입니다.
네트워크(fetch)와 분리되어 있어 HTML 문자열만으로 테스트할 수 있습니다.
"""

from .assembler import extract_results
from .classifier import BlockVerdict, classify
from .discovery import CANDIDATE_PATTERNS, discover_candidates
from .extractor import extract_fields, find_snippet, find_title
from .loader import load_document

__all__ = [
    "extract_results",
    "BlockVerdict",
    "classify",
    "CANDIDATE_PATTERNS",
    "discover_candidates",
    "extract_fields",
    "find_snippet",
    "find_title",
    "load_document",
]
