import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from blog.utils import calculate_reading_time

# Accepted string layouts for frontmatter dates, in priority order.
DATE_FORMATS = ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


def parse_frontmatter_date(value) -> datetime.datetime:
    """
    Normalize a frontmatter date into a naive datetime.

    YAML already turns unquoted dates into date/datetime objects; quoted
    strings are tried against DATE_FORMATS. Date-only values map to midnight.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if isinstance(value, str):
        for fmt in DATE_FORMATS:
            try:
                return datetime.datetime.strptime(value.strip(), fmt)
            except ValueError:
                continue
    raise ValueError(f"unsupported date value {value!r}")


class RelationKind(str, Enum):
    RELATED = "related"
    SEQUEL = "sequel"
    PREQUEL = "prequel"
    CONVERSATION = "conversation"

    @property
    def label(self) -> str:
        return RELATION_LABELS[self]


RELATION_LABELS = {
    RelationKind.RELATED: "Related",
    RelationKind.SEQUEL: "Sequel",
    RelationKind.PREQUEL: "Prequel",
    RelationKind.CONVERSATION: "Conversation",
}


class RelatedPostRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    relationship: RelationKind = RelationKind.RELATED

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_slug(cls, data):
        # `related_posts: [other-post]` is shorthand for a plain relation
        if isinstance(data, str):
            return {"slug": data}
        return data


class Frontmatter(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    slug: str
    date: datetime.datetime
    updated: Optional[datetime.datetime] = None
    author: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()
    category: Optional[str] = None
    template: str = "post"
    draft: bool = False
    toc: bool = False
    featured_image: Optional[str] = None
    related_posts: Tuple[RelatedPostRef, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_frontmatter_date(value)

    @field_validator("updated", mode="before")
    @classmethod
    def _parse_updated(cls, value):
        if value is None:
            return None
        return parse_frontmatter_date(value)

    @field_validator("tags", "related_posts", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return () if value is None else value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    frontmatter: Frontmatter
    raw_content: str
    file_path: str

    @property
    def title(self) -> str:
        return self.frontmatter.title

    @property
    def slug(self) -> str:
        return self.frontmatter.slug

    @property
    def date(self) -> datetime.datetime:
        return self.frontmatter.date

    @property
    def author(self) -> Optional[str]:
        return self.frontmatter.author

    @property
    def is_draft(self) -> bool:
        return self.frontmatter.draft

    @property
    def reading_time(self) -> str:
        return calculate_reading_time(self.raw_content)


class PageFrontmatter(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    slug: str
    template: str = "page"


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    slug: str
    template: str
    raw_content: str
    file_path: str


class TocEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    text: str
    id: str


class RenderedContent(BaseModel):
    html: str
    toc: Optional[str] = None


class RelatedPost(BaseModel):
    post: Post
    label: str
