"""uvicorn 실행 진입점 (python -m serp_proxy / serp-proxy)"""
import uvicorn

from serp_proxy.app import create_app
from serp_proxy.core.config import load_settings
from serp_proxy.core.logging import logger


def main() -> None:
    settings = load_settings()
    logger.info(f"Bright Data Proxy Server running on port {settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
