from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Settings, settings
from ..core.dispatcher import ArticleDispatcher
from ..models.news import Article
from ..tools.cache import CacheStore
from ..tools.gnews_tool import GNewsClient, UpstreamError
from ..logging_config import get_logger


logger = get_logger("api.server")


def build_dispatcher(config: Settings) -> ArticleDispatcher:
    """Wire the upstream client and a fresh cache from configuration."""

    return ArticleDispatcher(
        client=GNewsClient.from_settings(config),
        cache=CacheStore(ttl_seconds=config.cache_ttl_seconds),
        default_max_results=config.default_max_results,
    )


def get_dispatcher(request: Request) -> ArticleDispatcher:
    return request.app.state.dispatcher


def create_app(dispatcher: Optional[ArticleDispatcher] = None) -> FastAPI:
    app = FastAPI(
        title="News Cache API",
        description="Cached, relevance-ranked news search in front of GNews",
        version="1.0.0",
    )
    app.state.dispatcher = dispatcher or build_dispatcher(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        logger.error("upstream_error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"message": str(exc)})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/articles", response_model=List[Article], response_model_exclude_unset=True)
    def get_articles(
        query: str = "",
        max: Optional[str] = None,
        dispatcher: ArticleDispatcher = Depends(get_dispatcher),
    ) -> List[Article]:
        """Plain upstream search; results keep the provider's order."""
        logger.info("articles_request", query=query, max=max)
        return dispatcher.search(query, max)

    @app.get("/articles/title", response_model=List[Article], response_model_exclude_unset=True)
    def fetch_by_title(q: str = "", dispatcher: ArticleDispatcher = Depends(get_dispatcher)) -> List[Article]:
        logger.info("articles_title_request", q=q)
        return dispatcher.by_title(q)

    @app.get("/articles/author", response_model=List[Article], response_model_exclude_unset=True)
    def fetch_by_author(q: str = "", dispatcher: ArticleDispatcher = Depends(get_dispatcher)) -> List[Article]:
        """Results ranked by how well the source name matches ``q``."""
        logger.info("articles_author_request", q=q)
        return dispatcher.by_author(q)

    @app.get("/articles/keyword", response_model=List[Article], response_model_exclude_unset=True)
    def fetch_by_keyword(q: str = "", dispatcher: ArticleDispatcher = Depends(get_dispatcher)) -> List[Article]:
        """Title matches first, then description, then content; one entry per title."""
        logger.info("articles_keyword_request", q=q)
        return dispatcher.by_keyword(q)

    return app


app = create_app()
