"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (HTML 문자열과 단순 조립 함수)
- 엔진/네트워크 의존 없음
"""

from . import serp_pages

__all__ = ["serp_pages"]
