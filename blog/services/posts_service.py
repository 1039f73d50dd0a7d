import datetime
import logging
from typing import Any, Dict, Iterable, List, Optional

from blog.exceptions import InvalidPostDateError, PostNotFoundError, PostStoreError
from blog.repos.posts_repo import normalize_slug
from blog.schemas.blog import BASIC_META_TAGS, PostField

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser):
        self.repo = repo
        self.parser = parser

    def get_post_slugs(self) -> List[str]:
        return self.repo.list_slugs()

    def get_post_by_slug(
        self, slug: str, fields: Iterable[str] = BASIC_META_TAGS
    ) -> Dict[str, Any]:
        real_slug = normalize_slug(slug)
        source = self.repo.read_source(real_slug)
        metadata, content = self.parser.parse(source, real_slug)
        logger.debug(f"Loaded post {real_slug} with header fields {sorted(metadata)}")
        return project_fields(metadata, content, fields)

    def get_all_posts(self, fields: Iterable[str] = BASIC_META_TAGS) -> List[Dict[str, Any]]:
        """Load every post in enumeration order. Any failing post aborts the whole load."""
        fields = tuple(fields)
        return [self.get_post_by_slug(slug, fields) for slug in self.get_post_slugs()]

    def get_all_posts_with_slugs(
        self, fields: Iterable[str] = BASIC_META_TAGS
    ) -> List[Dict[str, Any]]:
        """Like get_all_posts, but a post without a header slug takes its file identifier."""
        fields = tuple(fields)
        posts = []
        for slug in self.get_post_slugs():
            post = self.get_post_by_slug(slug, fields)
            post.setdefault(PostField.SLUG.value, slug)
            posts.append(post)
        return posts

    def get_slug_index(self) -> Dict[str, str]:
        """Public slug (header slug, else file identifier) -> file identifier."""
        index: Dict[str, str] = {}
        for file_slug in self.get_post_slugs():
            post = self.get_post_by_slug(file_slug, [PostField.SLUG.value])
            public_slug = str(post.get(PostField.SLUG.value) or file_slug)
            if public_slug in index:
                raise PostStoreError(
                    f"Posts {index[public_slug]} and {file_slug} share the slug {public_slug}"
                )
            index[public_slug] = file_slug
        return index

    def get_post_by_public_slug(
        self, slug: str, fields: Iterable[str] = BASIC_META_TAGS
    ) -> Dict[str, Any]:
        """Load a post by the slug its pages and feed items are published under."""
        public_slug = normalize_slug(slug)
        file_slug = self.get_slug_index().get(public_slug)
        if file_slug is None:
            raise PostNotFoundError(public_slug)
        post = self.get_post_by_slug(file_slug, fields)
        post.setdefault(PostField.SLUG.value, public_slug)
        return post


def project_fields(
    metadata: Dict[str, Any], content: str, fields: Iterable[str]
) -> Dict[str, Any]:
    """
    Keep only the requested fields that the header actually defines.

    ``content`` is the exception: when requested it always comes from the body.
    """
    items: Dict[str, Any] = {}
    for field in fields:
        key = field.value if isinstance(field, PostField) else field
        if key == PostField.CONTENT.value:
            items[key] = content
        elif key in metadata:
            items[key] = metadata[key]
    return items


def parse_post_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError as e:
            raise InvalidPostDateError(f"Unrecognised post date: {value!r}") from e
    raise InvalidPostDateError(f"Unrecognised post date: {value!r}")


def sort_posts_by_date(posts: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Most recent first, compared as calendar dates. Undated posts go last."""
    dated = []
    undated = []
    for post in posts:
        value = post.get(PostField.DATE.value)
        if value is None:
            undated.append(post)
        else:
            dated.append((parse_post_date(value), post))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [post for _, post in dated] + undated


def filter_published(posts: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [post for post in posts if not _is_draft(post.get(PostField.DRAFT.value))]


def _is_draft(value: Optional[Any]) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)
