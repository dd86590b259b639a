from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleSource(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    name: Optional[str] = None
    url: Optional[str] = None


class Article(BaseModel):
    """A single article record as returned by the GNews search endpoint.

    Every field is optional: upstream records are passed through as-is and
    anything we do not model explicitly is kept as an extra field.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    source: Optional[ArticleSource] = None
