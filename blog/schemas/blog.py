import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class PostField(str, Enum):
    TITLE = "title"
    EXCERPT = "excerpt"
    DESCRIPTION = "description"
    KEYWORDS = "keywords"
    CONTENT = "content"
    COVER_IMAGE = "coverImage"
    DATE = "date"
    AUTHOR = "author"
    SLUG = "slug"
    DRAFT = "draft"
    TWITTER_CARD = "twitterCard"
    TWITTER_SITE = "twitterSite"
    TWITTER_TITLE = "twitterTitle"
    TWITTER_DESCRIPTION = "twitterDescription"
    TWITTER_IMAGE = "twitterImage"
    OG_TITLE = "ogTitle"
    OG_DESCRIPTION = "ogDescription"
    OG_IMAGE = "ogImage"
    OG_URL = "ogURL"
    OG_SITE_NAME = "ogSiteName"


# Default projection used by the loader and the repository.
BASIC_META_TAGS: tuple[str, ...] = (
    PostField.TITLE.value,
    PostField.EXCERPT.value,
    PostField.DESCRIPTION.value,
    PostField.KEYWORDS.value,
    PostField.CONTENT.value,
    PostField.COVER_IMAGE.value,
    PostField.DATE.value,
    PostField.AUTHOR.value,
    PostField.SLUG.value,
    PostField.TWITTER_CARD.value,
    PostField.TWITTER_SITE.value,
    PostField.TWITTER_TITLE.value,
    PostField.TWITTER_DESCRIPTION.value,
    PostField.TWITTER_IMAGE.value,
    PostField.OG_TITLE.value,
    PostField.OG_DESCRIPTION.value,
    PostField.OG_IMAGE.value,
    PostField.OG_URL.value,
    PostField.OG_SITE_NAME.value,
)

# Fields a feed entry needs on top of the basic set when drafts are filtered.
FEED_FIELDS: tuple[str, ...] = BASIC_META_TAGS + (PostField.DRAFT.value,)


class MetaTag(BaseModel):
    """A single ``<meta>`` element for an article page head."""

    attribute: str  # "name" or "itemprop"
    key: str
    content: str


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    date: Optional[Union[datetime.datetime, datetime.date, str]] = None


class PostDetail(PostSummary):
    description: Optional[str] = None
    coverImage: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    content: str = ""  # rendered HTML
    head_title: Optional[str] = None
    meta: List[MetaTag] = Field(default_factory=list)
