"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


DEFAULT_CORS_ORIGINS = [
    "https://coffee-cockroach-rachelle-6byahvr4.bls.dev",
    "http://localhost:3000",
    "http://localhost:8080",
]

# bls.dev / vercel / onrender 서브도메인 허용
DEFAULT_CORS_ORIGIN_REGEX = r"^https://.*\.(bls\.dev|vercel\.app|onrender\.com)$"


class Settings(BaseSettings):
    """애플리케이션 설정

    프로세스 시작 시 한 번 생성되고 이후에는 읽기 전용으로 취급합니다.
    토큰이 없어도 생성은 성공하며, 요청 시점에 설정 오류(500)로 보고됩니다.
    """

    # Bright Data (업스트림)
    upstream_api_token: str = Field(
        "",
        validation_alias=AliasChoices("upstream_api_token", "bright_data_api_token"),
    )
    upstream_zone: str = Field(
        "serp_api1",
        validation_alias=AliasChoices("upstream_zone", "bright_data_zone"),
    )
    upstream_endpoint: str = "https://api.brightdata.com/request"
    upstream_user_agent: str = "Mirror Search Proxy v1.0"
    upstream_impersonate: str = "chrome110"
    upstream_max_clients: int = 20

    # 업스트림 단일 호출 타임아웃과 요청 전체 하드 캡
    upstream_timeout_s: float = 30.0
    api_search_timeout_s: float = 45.0

    # 에러 응답에 포함할 업스트림 본문 길이
    upstream_error_body_limit: int = 200

    # SERP 파싱
    search_base_url: str = "https://www.google.com/search"
    serp_max_results: int = 10
    serp_regex_fallback_enabled: bool = False

    # 서버
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    cors_origin_regex: str = DEFAULT_CORS_ORIGIN_REGEX

    # API
    api_title: str = "Bright Data Proxy"
    api_version: str = "1.0.0"
    api_description: str = "Bright Data SERP 프록시 - Google 검색 결과에서 오가닉 결과만 추출합니다."

    # 로깅
    log_level: str = "INFO"

    @property
    def has_api_token(self) -> bool:
        return bool(self.upstream_api_token and self.upstream_api_token.strip())

    @field_validator("upstream_timeout_s", "api_search_timeout_s")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("serp_max_results", "upstream_max_clients", "upstream_error_body_limit")
    @classmethod
    def validate_positive_ints(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "INFO").upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log_level: {v}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


def load_settings() -> Settings:
    """환경 변수/.env 에서 설정을 읽어 새 Settings 인스턴스를 만듭니다."""
    return Settings()
