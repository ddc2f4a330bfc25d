"""SERP HTML 픽스처 (데이터만, 로직 없음)

Google 결과 페이지 구조를 축약한 마크업입니다.
"""


def organic_block(url: str, title: str, snippet: str, container: str = "g") -> str:
    return f"""
    <div class="{container}">
      <div class="tF2Cxc">
        <div class="yuRUbf">
          <a href="{url}" data-ved="2ahUKE">
            <h3 class="LC20lb">{title}</h3>
            <cite>{url}</cite>
          </a>
        </div>
        <div class="VwiC3b"><span>{snippet}</span></div>
      </div>
    </div>
    """


def page(*blocks: str, top: str = "") -> str:
    return f"""<!DOCTYPE html>
<html><head><title>rust programming - Google Search</title>
<style>.g {{ margin: 0 }}</style></head>
<body>
  <div id="search">
    {top}
    <div id="rso">
      {''.join(blocks)}
    </div>
  </div>
</body></html>"""


RUST_OFFICIAL = organic_block(
    "https://www.rust-lang.org/",
    "Rust Programming Language",
    "A language empowering everyone to build reliable and efficient software.",
)

RUST_BOOK_WRAPPED = organic_block(
    "/url?q=https://doc.rust-lang.org/book/&sa=U&ved=2ahUKEwi",
    "The Rust Programming Language - The Rust Book",
    "by S Klabnik - This book fully embraces the potential of Rust to empower its users.",
)

RUST_AD = """
<div id="tads" aria-label="Ads">
  <div class="uEierd">
    <div class="g">
      <span class="U3A9Ac">Sponsored</span>
      <a href="https://bootcamp.example.com/rust">
        <h3 class="LC20lb">Learn Rust Fast - Online Bootcamp</h3>
      </a>
      <div class="VwiC3b">Master Rust programming in 12 weeks with expert mentors. Enroll today!</div>
    </div>
  </div>
</div>
"""

# 광고 컨테이너 없이 "Sponsored" 문구만 있는 블록
INLINE_SPONSORED = """
<div class="g">
  <div><span>Sponsored</span></div>
  <a href="https://sponsor.example.com/rust-course">
    <h3>Rust Course For Professionals</h3>
  </a>
  <div class="VwiC3b">Get certified in Rust with our professional course, now 50% off.</div>
</div>
"""

PEOPLE_ALSO_ASK = """
<div class="MjjYud">
  <div jsname="yEVEwb">
    <div role="heading" aria-level="2"><span>People also ask</span></div>
  </div>
  <div class="related-question-pair">
    <div class="g">
      <a href="https://faq.example.com/is-rust-hard">
        <h3>Is Rust hard to learn for beginners?</h3>
      </a>
      <div class="VwiC3b">Rust has a steep learning curve, but the compiler messages are very helpful.</div>
    </div>
  </div>
</div>
"""

# 섹션 래퍼의 직계 자식 h2 로만 표시된 관련 검색 영역
RELATED_SEARCHES_SECTION = """
<div>
  <h2>Related searches</h2>
  <div class="g">
    <a href="https://related.example.com/rust-vs-go">
      <h3>Rust vs Go comparison for backend services</h3>
    </a>
    <div class="VwiC3b">A detailed comparison of Rust and Go performance, safety and tooling.</div>
  </div>
</div>
"""

VIDEO_CAROUSEL = """
<div class="g">
  <video-voyager>
    <a href="https://www.youtube.com/watch?v=abc123">
      <h3>Rust Tutorial Full Course for Beginners</h3>
    </a>
    <div class="VwiC3b">Learn Rust in this complete video course covering ownership and traits.</div>
  </video-voyager>
</div>
"""

HIDDEN_BLOCK = """
<div class="g" style="display: none">
  <a href="https://hidden.example.com/rust">
    <h3>Hidden Rust Result Title</h3>
  </a>
  <div class="VwiC3b">This block is hidden with inline style and must never appear in output.</div>
</div>
"""

SHORT_BLOCK = """
<div class="g">
  <a href="https://short.example.com/"><h3>Short</h3></a>
</div>
"""

NO_RESULTS_PAGE = """<!DOCTYPE html>
<html><head><title>zzz_no_such_thing_123 - Google Search</title></head>
<body>
  <div id="main">
    <p>Your search - <b>zzz_no_such_thing_123</b> - did not match any documents.</p>
  </div>
</body></html>"""

REGEX_ONLY_PAGE = """<!DOCTYPE html>
<html><body>
  <div id="tads">
    <span>
      <a href="https://ads.example.com/promo"><h3 class="LC20lb">Promoted Rust Hosting</h3></a>
      <div class="VwiC3b">Cheap Rust hosting for your next production deployment today.</div>
    </span>
  </div>
  <div id="res">
    <span>
      <a href="https://regex.example.com/one"><h3 class="LC20lb">Regex Result One</h3></a>
      <div class="VwiC3b">Regex fallback snippet text for the first result.</div>
    </span>
  </div>
</body></html>"""

RUST_PAGE = page(RUST_OFFICIAL, RUST_BOOK_WRAPPED, top=RUST_AD)

MIXED_PAGE = page(
    PEOPLE_ALSO_ASK,
    RUST_OFFICIAL,
    INLINE_SPONSORED,
    RELATED_SEARCHES_SECTION,
    VIDEO_CAROUSEL,
    HIDDEN_BLOCK,
    SHORT_BLOCK,
    RUST_BOOK_WRAPPED,
    top=RUST_AD,
)


def many_results_page(count: int) -> str:
    return page(*[
        organic_block(
            f"https://site{i}.example.com/rust",
            f"Rust Result Number {i}",
            f"Snippet describing Rust result number {i} in enough detail to pass.",
        )
        for i in range(count)
    ])


DUPLICATE_URL_PAGE = page(
    RUST_OFFICIAL,
    organic_block(
        "/url?q=https://www.rust-lang.org/&sa=U",
        "Rust - Official Site Mirror Listing",
        "Same destination wrapped in a redirect link; must be deduplicated.",
    ),
)
