"""
보안 헤더 설정
보안 미들웨어 및 요청 로깅
"""

from fastapi import Request

from serp_proxy.core.logging import logger, sanitize_for_log


# CSP / COEP 는 프론트엔드 임베드 때문에 끕니다.
SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
}


def apply_security_headers(headers) -> None:
    """응답 헤더에 보안 헤더 추가 (이미 있으면 유지)"""
    for name, value in SECURITY_HEADERS.items():
        if name not in headers:
            headers[name] = value


async def log_request(request: Request) -> None:
    """요청 로깅 (헤더/본문 제외, 쿼리 파라미터는 마스킹)

    Args:
        request: FastAPI Request 객체
    """
    method = request.method
    path = request.url.path

    query_params = {}
    for key, value in request.query_params.items():
        query_params[key] = sanitize_for_log(str(value), max_length=50)

    if query_params:
        logger.debug(f"[API] {method} {path}?{query_params}")
    else:
        logger.debug(f"[API] {method} {path}")
