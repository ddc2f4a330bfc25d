"""URL 파싱 유틸리티 (Google 리다이렉트 해제, 내부 링크 차단, 검색 URL 생성)"""
import re
from typing import Optional
from urllib.parse import parse_qs, quote, urlencode, urlparse


GOOGLE_SEARCH_URL = "https://www.google.com/search"

# /url?q=... 중첩이 이 이상이면 비정상 링크로 보고 버립니다.
MAX_UNWRAP_DEPTH = 5

_REDIRECT_PATHS = ("/url", "/interstitial")
_REDIRECT_PARAMS = ("q", "url")

_GOOGLE_HOST_RE = re.compile(r"(^|\.)google\.[a-z]{2,3}(\.[a-z]{2})?$")

# 결과로 내보내면 안 되는 Google 내부 경로
_DENIED_GOOGLE_PATHS = (
    "/search",
    "/url",
    "/interstitial",
    "/imgres",
    "/maps",
    "/preferences",
    "/setprefs",
    "/advanced_search",
    "/policies",
    "/support",
    "/webhp",
    "/intl",
    "/sorry",
)

_DENIED_HOST_PREFIXES = (
    "accounts.google.",
    "policies.google.",
    "support.google.",
    "maps.google.",
    "translate.google.",
    "myaccount.google.",
)

_DENIED_HOSTS = (
    "webcache.googleusercontent.com",
)


def normalize_href(href: str) -> str:
    """href 앞뒤 공백을 정리하고 프로토콜-상대 URL을 https로 바꿉니다.

    - "//host/path" -> "https://host/path"
    - "http(s)://..." -> 그대로
    - "/path" 같은 상대 경로는 그대로 둡니다 (검증 단계에서 탈락)
    """
    if not href:
        return ""

    h = href.strip()
    if h.startswith("//"):
        return f"https:{h}"
    return h


def is_google_host(netloc: str) -> bool:
    host = (netloc or "").lower().split(":", 1)[0]
    return bool(host) and bool(_GOOGLE_HOST_RE.search(host))


def _redirect_target(url: str) -> Optional[str]:
    """Google 리다이렉트 래퍼(/url?q=...)면 목적지 URL을 반환"""
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if parsed.path not in _REDIRECT_PATHS:
        return None
    if parsed.netloc and not is_google_host(parsed.netloc):
        return None

    params = parse_qs(parsed.query)
    for key in _REDIRECT_PARAMS:
        values = params.get(key)
        if values and values[0].strip():
            return values[0]
    return None


def unwrap_redirect(href: str) -> str:
    """리다이렉트 래퍼 링크에서 실제 목적지를 꺼냅니다.

    Examples:
        >>> unwrap_redirect("/url?q=https://example.com/page&sa=U")
        'https://example.com/page'
        >>> unwrap_redirect("https://example.com/page")
        'https://example.com/page'

    더 이상 풀 수 없을 때까지 반복하므로 결과를 다시 넣어도 같은 값이 나옵니다.
    중첩이 MAX_UNWRAP_DEPTH 를 넘으면 빈 문자열을 반환합니다.
    """
    url = normalize_href(href)
    for _ in range(MAX_UNWRAP_DEPTH + 1):
        target = _redirect_target(url)
        if target is None:
            return url
        url = normalize_href(target)
    return ""


def is_absolute_http_url(url: str) -> bool:
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_denied_url(url: str) -> bool:
    """검색 결과로 쓸 수 없는 Google 내부/비콘텐츠 URL 여부"""
    try:
        parsed = urlparse(url)
    except ValueError:
        return True

    host = (parsed.netloc or "").lower().split(":", 1)[0]
    if host in _DENIED_HOSTS:
        return True
    if any(host.startswith(prefix) for prefix in _DENIED_HOST_PREFIXES):
        return True

    if is_google_host(host):
        path = parsed.path or "/"
        return any(path == p or path.startswith(p + "/") for p in _DENIED_GOOGLE_PATHS)

    return False


def clean_result_url(href: str) -> Optional[str]:
    """href 를 결과용 URL로 정리. 쓸 수 없는 링크면 None"""
    url = unwrap_redirect(href or "")
    if not is_absolute_http_url(url):
        return None
    if is_denied_url(url):
        return None
    return url


def build_search_url(
    query: str,
    num: Optional[int] = None,
    hl: Optional[str] = None,
    gl: Optional[str] = None,
    base_url: str = GOOGLE_SEARCH_URL,
) -> str:
    """Google 검색 URL 생성 (q/num/hl/gl 은 모두 URL 인코딩)"""
    params: list[tuple[str, str]] = [("q", query)]
    if num is not None:
        params.append(("num", str(num)))
    if hl:
        params.append(("hl", hl))
    if gl:
        params.append(("gl", gl))
    return f"{base_url}?{urlencode(params, quote_via=quote)}"
