"""업스트림 fetch 레이어 (Bright Data)."""

from .brightdata import BrightDataClient
from .http_client import HttpResponse, UpstreamHttpClient

__all__ = ["BrightDataClient", "HttpResponse", "UpstreamHttpClient"]
