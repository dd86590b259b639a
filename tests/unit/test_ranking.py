"""Unit tests for relevance ranking and dedup-merge."""

from news_cache.core.ranking import (
    dedupe_merge,
    match_score,
    rank_articles,
    rank_by_keyword,
    resolve_field,
    tokenize,
)
from news_cache.models.news import Article, ArticleSource


def titles(articles):
    return [a.title for a in articles]


# ============================================================================
# Helpers
# ============================================================================


def test_tokenize_lowercases_and_splits_on_whitespace() -> None:
    assert tokenize("Go  RUST\tnews") == ["go", "rust", "news"]
    assert tokenize("") == []
    assert tokenize(None) == []


def test_resolve_field_direct_and_nested() -> None:
    article = Article(title="Hello World", source=ArticleSource(name="BBC News"))
    assert resolve_field(article, "title") == "hello world"
    assert resolve_field(article, "source.name") == "bbc news"


def test_resolve_field_missing_segments_are_empty() -> None:
    article = Article(title="x")
    assert resolve_field(article, "source.name") == ""
    assert resolve_field(article, "description") == ""
    assert resolve_field({"source": None}, "source.name") == ""


def test_resolve_field_non_string_is_empty() -> None:
    assert resolve_field({"title": 42}, "title") == ""


def test_match_score_counts_each_token() -> None:
    assert match_score("go and rust", ["go", "rust"]) == 2
    assert match_score("go and rust", ["go", "go"]) == 2
    assert match_score("go and rust", ["python"]) == 0


# ============================================================================
# rank_articles
# ============================================================================


def test_rank_by_title_orders_by_matches_and_is_stable() -> None:
    articles = [
        Article(title="Go news"),
        Article(title="Rust update"),
        Article(title="Go and Rust"),
    ]

    ranked = rank_articles(articles, "go rust", "title")

    assert titles(ranked) == ["Go and Rust", "Go news", "Rust update"]


def test_rank_does_not_mutate_input() -> None:
    articles = [Article(title="b"), Article(title="a match")]
    original = list(articles)

    rank_articles(articles, "match", "title")

    assert articles == original


def test_rank_by_nested_source_name() -> None:
    articles = [
        Article(title="no source"),
        Article(title="bbc", source=ArticleSource(name="BBC")),
    ]

    ranked = rank_articles(articles, "bbc", "source.name")

    assert titles(ranked) == ["bbc", "no source"]
    assert resolve_field(ranked[1], "source.name") == ""


def test_empty_query_keeps_original_order() -> None:
    articles = [Article(title="c"), Article(title="a"), Article(title="b")]

    assert titles(rank_articles(articles, "", "title")) == ["c", "a", "b"]
    assert titles(rank_articles(articles, None, "title")) == ["c", "a", "b"]


def test_rank_accepts_plain_mappings() -> None:
    articles = [{"title": "other"}, {"title": "Python tips"}]

    ranked = rank_articles(articles, "python", "title")

    assert ranked[0]["title"] == "Python tips"


# ============================================================================
# dedupe_merge / keyword ranking
# ============================================================================


def test_dedupe_merge_keeps_first_occurrence() -> None:
    a, b, c, d = (Article(title=t) for t in "ABCD")
    passes = [[a, b], [Article(title="B"), c], [Article(title="A"), d]]

    merged = dedupe_merge(passes)

    assert titles(merged) == ["A", "B", "C", "D"]
    assert merged[1] is b


def test_dedupe_merge_collapses_same_title_different_source() -> None:
    first = Article(title="Same", source=ArticleSource(name="One"))
    second = Article(title="Same", source=ArticleSource(name="Two"))

    merged = dedupe_merge([[first], [second]])

    assert merged == [first]


def test_rank_by_keyword_prioritises_title_pass() -> None:
    articles = [
        Article(title="Markets", description="climate policy", content=""),
        Article(title="Weather", description="", content="climate"),
        Article(title="Climate summit", description="", content=""),
    ]

    merged = rank_by_keyword(articles, "climate")

    # Title pass puts the title match first; everything else follows in
    # title-pass order since every article appears in that first pass.
    assert titles(merged) == ["Climate summit", "Markets", "Weather"]
    assert len(merged) == 3
