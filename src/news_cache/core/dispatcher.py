from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Sequence

from ..models.news import Article
from ..tools.cache import CacheStore
from ..logging_config import get_logger
from .ranking import KEYWORD_FIELDS, rank_articles, rank_by_keyword


logger = get_logger("core.dispatcher")


class Intent(str, Enum):
    GENERAL = "general"
    TITLE = "title"
    AUTHOR = "author"
    KEYWORD = "keyword"


class ArticleFetcher(Protocol):
    def fetch(self, search_term: str, max_results: Any = 10) -> List[Article]:
        ...


def build_cache_key(intent: Intent, query: Optional[str], max_results: Any = None) -> str:
    """Build the cache key for a request.

    The intent prefix keeps each intent in its own namespace; only the
    general intent includes the result limit.
    """
    query_text = query or ""
    if intent is Intent.GENERAL:
        return f"{intent.value}:{query_text}:{max_results}"
    return f"{intent.value}:{query_text}"


class ArticleDispatcher:
    """Read-through cache in front of the upstream client.

    Each entry point checks the cache, fetches on a miss, applies the
    intent's ranking, stores the result and returns it. Upstream failures
    propagate and leave the cache untouched.
    """

    def __init__(self, client: ArticleFetcher, cache: CacheStore, default_max_results: int = 10) -> None:
        self.client = client
        self.cache = cache
        self.default_max_results = default_max_results

    def _cached(
        self,
        intent: Intent,
        key: str,
        query: str,
        max_results: Any,
        rank: Callable[[List[Article]], List[Article]],
    ) -> List[Article]:
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("articles_cache_hit", intent=intent.value, key=key, results=len(cached))
            return list(cached)

        articles = self.client.fetch(query, max_results)
        ranked = rank(articles)
        self.cache.set(key, ranked)
        logger.info(
            "articles_fetched",
            intent=intent.value,
            key=key,
            results=len(ranked),
        )
        return list(ranked)

    def search(self, query: Optional[str], max_results: Any = None) -> List[Article]:
        """General search; upstream order is preserved."""
        if max_results is None:
            max_results = self.default_max_results
        query = query or ""
        key = build_cache_key(Intent.GENERAL, query, max_results)
        return self._cached(Intent.GENERAL, key, query, max_results, lambda articles: list(articles))

    def by_title(self, query: Optional[str]) -> List[Article]:
        query = query or ""
        key = build_cache_key(Intent.TITLE, query)
        return self._cached(
            Intent.TITLE,
            key,
            query,
            self.default_max_results,
            lambda articles: rank_articles(articles, query, "title"),
        )

    def by_author(self, query: Optional[str]) -> List[Article]:
        query = query or ""
        key = build_cache_key(Intent.AUTHOR, query)
        return self._cached(
            Intent.AUTHOR,
            key,
            query,
            self.default_max_results,
            lambda articles: rank_articles(articles, query, "source.name"),
        )

    def by_keyword(self, query: Optional[str], fields: Sequence[str] = KEYWORD_FIELDS) -> List[Article]:
        query = query or ""
        key = build_cache_key(Intent.KEYWORD, query)
        return self._cached(
            Intent.KEYWORD,
            key,
            query,
            self.default_max_results,
            lambda articles: rank_by_keyword(articles, query, fields),
        )
