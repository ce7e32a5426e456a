from typing import List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    updated: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    featuredImage: Optional[str] = None
    readingTime: Optional[str] = None
    draft: bool = False


class RelatedPostSummary(BaseModel):
    post: PostSummary
    label: str


class PostDetail(PostSummary):
    template: str = "post"
    content: str
    toc: Optional[str] = None
    explicitRelated: List[RelatedPostSummary] = Field(default_factory=list)
    similarByTags: List[PostSummary] = Field(default_factory=list)


class PostList(BaseModel):
    posts: List[PostSummary] = Field(default_factory=list)
    page: int = 1
    totalPages: int = 0
    hasNext: bool = False
    hasPrev: bool = False
    author: Optional[str] = None
    category: Optional[str] = None


class IndexResponse(BaseModel):
    posts: List[PostSummary] = Field(default_factory=list)
    featuredPost: Optional[PostSummary] = None
    featuredContent: Optional[str] = None


class PageDetail(BaseModel):
    slug: str
    title: str
    template: str = "page"
    content: str
