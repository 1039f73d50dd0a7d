from typing import Any, Dict, List, Optional

from blog.schemas.blog import MetaTag, PostField
from blog.schemas.site import SiteMetadata
from blog.utils import normalize_keywords

ARTICLE_SECTION = "Technology"
OG_TYPE = "Article"

# (attribute, key, post field)
_FIELD_TAGS = (
    ("name", "description", PostField.DESCRIPTION),
    ("name", "image", PostField.COVER_IMAGE),
    ("name", "keywords", PostField.KEYWORDS),
    ("itemprop", "name", PostField.TITLE),
    ("itemprop", "description", PostField.DESCRIPTION),
    ("itemprop", "image", PostField.COVER_IMAGE),
    ("name", "og:title", PostField.OG_TITLE),
    ("name", "og:description", PostField.OG_DESCRIPTION),
    ("name", "og:image", PostField.OG_IMAGE),
    ("name", "og:url", PostField.OG_URL),
    ("name", "og:site_name", PostField.OG_SITE_NAME),
)

_ARTICLE_TAGS = (
    ("name", "article:author", PostField.AUTHOR),
    ("name", "article:tag", PostField.KEYWORDS),
)

_TWITTER_TAGS = (
    ("name", "twitter:card", PostField.TWITTER_CARD),
    ("name", "twitter:site", PostField.TWITTER_SITE),
    ("name", "twitter:title", PostField.TWITTER_TITLE),
    ("name", "twitter:description", PostField.TWITTER_DESCRIPTION),
    ("name", "twitter:image", PostField.TWITTER_IMAGE),
)


def build_post_head(post: Dict[str, Any], site: Optional[SiteMetadata] = None) -> List[MetaTag]:
    """
    Meta tags for an article page head.

    Tags whose source field is missing from the post are left out rather than
    rendered empty. Image fields are made absolute when ``site`` is given.
    """
    tags: List[MetaTag] = []
    tags.extend(_tags_for(post, _FIELD_TAGS, site))
    tags.append(MetaTag(attribute="name", key="og:type", content=OG_TYPE))
    tags.append(MetaTag(attribute="name", key="article:section", content=ARTICLE_SECTION))
    tags.extend(_tags_for(post, _ARTICLE_TAGS, site))
    tags.extend(_tags_for(post, _TWITTER_TAGS, site))
    return tags


def _tags_for(post, table, site: Optional[SiteMetadata]) -> List[MetaTag]:
    tags = []
    for attribute, key, field in table:
        content = _meta_content(post.get(field.value), field, site)
        if content:
            tags.append(MetaTag(attribute=attribute, key=key, content=content))
    return tags


def _meta_content(value, field: PostField, site: Optional[SiteMetadata]) -> str:
    if value is None:
        return ""
    if field == PostField.KEYWORDS:
        return ", ".join(normalize_keywords(value))
    text = str(value)
    if site and field in (PostField.COVER_IMAGE, PostField.OG_IMAGE, PostField.TWITTER_IMAGE):
        return site.absolute_url(text)
    return text
