import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator

from llamablog.site_config import SITE


class PostFrontmatter(BaseModel):
    """Metadata block at the head of every post."""

    author: str = SITE.author
    pubDatetime: datetime.datetime
    modDatetime: Optional[datetime.datetime] = None
    title: str
    featured: bool = False
    draft: bool = False
    tags: List[str] = Field(default_factory=lambda: ["others"])
    ogImage: Optional[str] = None
    description: str
    canonicalURL: Optional[str] = None
    hideEditPost: bool = False
    timezone: Optional[str] = None

    @field_validator("pubDatetime", "modDatetime", mode="before")
    @classmethod
    def _date_to_datetime(cls, value):
        # YAML parses bare dates (2024-01-31) as date, not datetime
        if isinstance(value, datetime.date) and not isinstance(
            value, datetime.datetime
        ):
            return datetime.datetime.combine(value, datetime.time())
        return value

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return ["others"]
        if isinstance(value, str):
            value = [value]
        tags = [str(tag).strip() for tag in value if tag is not None]
        return [tag for tag in tags if tag] or ["others"]

    @model_validator(mode="after")
    def _localize_datetimes(self):
        tz = _zone(self.timezone or SITE.timezone)
        if self.pubDatetime.tzinfo is None:
            self.pubDatetime = self.pubDatetime.replace(tzinfo=tz)
        if self.modDatetime is not None and self.modDatetime.tzinfo is None:
            self.modDatetime = self.modDatetime.replace(tzinfo=tz)
        return self


def _zone(name: str) -> datetime.tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"unknown timezone: {name}")


class PostSummary(BaseModel):
    id: str
    slug: str
    path: str
    title: str
    description: str
    author: str
    pubDatetime: datetime.datetime
    modDatetime: Optional[datetime.datetime] = None
    tags: List[str] = Field(default_factory=list)
    featured: bool = False
    draft: bool = False
    readingTime: Optional[str] = None
    canonicalURL: Optional[str] = None
    ogImage: Optional[str] = None


class PostDetail(PostSummary):
    content: str


class TagSummary(BaseModel):
    tag: str
    tagName: str
    count: int


class PostPage(BaseModel):
    items: List[PostSummary]
    page: int
    totalPages: int
    totalPosts: int


class IndexPage(BaseModel):
    featured: List[PostSummary] = Field(default_factory=list)
    recent: List[PostSummary] = Field(default_factory=list)


class Redirect(BaseModel):
    source: str
    destination: str


class SlugRequest(BaseModel):
    values: List[str]


class SlugResponse(BaseModel):
    slugs: List[str]
