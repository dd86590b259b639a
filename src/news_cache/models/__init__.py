from .news import Article, ArticleSource  # noqa: F401
