from typing import Any, List

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..logging_config import get_logger
from ..models.news import Article


DEFAULT_GNEWS_BASE_URL = "https://gnews.io/api/v4"

logger = get_logger("tools.gnews")


class UpstreamError(Exception):
    """The news provider could not be reached or returned an unusable response."""


class GNewsClient:
    """Thin wrapper around the GNews ``/search`` endpoint.

    Built once at startup and handed to the dispatcher; holds no state
    beyond its credentials.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_GNEWS_BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "GNewsClient":
        return cls(
            api_key=settings.gnews_api_key,
            base_url=settings.gnews_base_url,
            timeout=settings.gnews_timeout,
        )

    def fetch(self, search_term: str, max_results: Any = 10) -> List[Article]:
        """Search GNews for ``search_term`` in English.

        ``max_results`` is forwarded untouched as the ``max`` parameter.
        Raises ``UpstreamError`` on any network, HTTP or payload failure.
        """

        if not self.api_key:
            raise UpstreamError("GNEWS_API_KEY is not configured in the environment.")

        params = {
            "q": search_term,
            "max": max_results,
            "lang": "en",
            "apikey": self.api_key,
        }

        try:
            response = httpx.get(f"{self.base_url}/search", params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            logger.warning("gnews_fetch_error", search_term=search_term, error=str(exc))
            raise UpstreamError("Error fetching articles") from exc
        except ValueError as exc:
            logger.warning("gnews_invalid_payload", search_term=search_term, error=str(exc))
            raise UpstreamError("Error fetching articles") from exc

        raw_articles = data.get("articles") if isinstance(data, dict) else None
        if not isinstance(raw_articles, list):
            logger.warning("gnews_invalid_payload", search_term=search_term, error="missing articles")
            raise UpstreamError("Error fetching articles")

        try:
            articles = [Article.model_validate(item) for item in raw_articles if isinstance(item, dict)]
        except ValidationError as exc:
            logger.warning("gnews_invalid_payload", search_term=search_term, error=str(exc))
            raise UpstreamError("Error fetching articles") from exc

        logger.info("gnews_fetched", search_term=search_term, max_results=max_results, results=len(articles))
        return articles
