"""Bright Data SERP 프록시 + 오가닉 결과 추출 엔진"""

__version__ = "1.0.0"
