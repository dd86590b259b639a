"""Client-side relevance ranking for upstream search results.

GNews has no field-specific search, so title, author and keyword lookups
are all served by a plain text search whose results are re-ordered here by
how many query words appear in the field of interest.
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence

from ..models.news import Article


KEYWORD_FIELDS = ("title", "description", "content")


def tokenize(query: Optional[str]) -> List[str]:
    if not query:
        return []
    return query.lower().split()


def _lookup(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def resolve_field(article: Any, field: str) -> str:
    """Return the lowercased value at ``field`` (e.g. ``"source.name"``).

    Any missing segment along the path, or a non-string leaf, yields "".
    """
    value = article
    for part in field.split("."):
        value = _lookup(value, part)
        if value is None:
            return ""
    return value.lower() if isinstance(value, str) else ""


def match_score(value: str, tokens: Sequence[str]) -> int:
    return sum(1 for token in tokens if token in value)


def rank_articles(articles: Iterable[Article], query: Optional[str], field: str) -> List[Article]:
    """Order articles by the number of query words found in ``field``.

    The sort is stable, so equally scored articles keep their input order
    and an empty query returns the input order unchanged.
    """
    tokens = tokenize(query)
    items = list(articles)
    if not tokens:
        return items
    return sorted(items, key=lambda article: match_score(resolve_field(article, field), tokens), reverse=True)


def dedupe_merge(passes: Iterable[Iterable[Article]]) -> List[Article]:
    """Concatenate ranking passes, keeping the first article seen per title."""
    seen_titles = set()
    merged: List[Article] = []
    for ranked in passes:
        for article in ranked:
            title = _lookup(article, "title")
            if title in seen_titles:
                continue
            seen_titles.add(title)
            merged.append(article)
    return merged


def rank_by_keyword(
    articles: Iterable[Article],
    query: Optional[str],
    fields: Sequence[str] = KEYWORD_FIELDS,
) -> List[Article]:
    items = list(articles)
    return dedupe_merge(rank_articles(items, query, field) for field in fields)
