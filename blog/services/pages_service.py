import logging
from typing import Callable, List

from blog.schemas.blog import FEED_FIELDS, PostDetail, PostField, PostSummary
from blog.schemas.site import SiteMetadata
from blog.services.head_service import build_post_head
from blog.services.markdown_service import markdown_to_html
from blog.services.posts_service import (
    PostsService,
    filter_published,
    sort_posts_by_date,
)
from blog.utils import normalize_keywords

logger = logging.getLogger(__name__)

INDEX_FIELDS = (
    PostField.SLUG.value,
    PostField.TITLE.value,
    PostField.EXCERPT.value,
    PostField.AUTHOR.value,
    PostField.DATE.value,
    PostField.DRAFT.value,
)


class PagesService:
    """Build-time page data for the index and the article pages."""

    def __init__(
        self,
        posts_service: PostsService,
        site: SiteMetadata,
        render_markdown: Callable[[str], str] = markdown_to_html,
    ):
        self.posts_service = posts_service
        self.site = site
        self.render_markdown = render_markdown

    def get_index_props(self) -> List[PostSummary]:
        posts = self.posts_service.get_all_posts_with_slugs(INDEX_FIELDS)
        return [PostSummary(**p) for p in sort_posts_by_date(filter_published(posts))]

    def get_post_paths(self) -> List[str]:
        return list(self.posts_service.get_slug_index())

    def get_post_props(self, slug: str) -> PostDetail:
        post = self.posts_service.get_post_by_public_slug(slug, FEED_FIELDS)
        head = build_post_head(post, self.site)
        logger.debug(f"Rendering post {slug} with {len(head)} meta tags")
        return PostDetail(
            slug=str(post[PostField.SLUG.value]),
            title=post.get(PostField.TITLE.value),
            excerpt=post.get(PostField.EXCERPT.value),
            author=post.get(PostField.AUTHOR.value),
            date=post.get(PostField.DATE.value),
            description=post.get(PostField.DESCRIPTION.value),
            coverImage=post.get(PostField.COVER_IMAGE.value),
            keywords=normalize_keywords(post.get(PostField.KEYWORDS.value)),
            content=self.render_markdown(post.get(PostField.CONTENT.value) or ""),
            head_title=post.get(PostField.TITLE.value),
            meta=head,
        )
