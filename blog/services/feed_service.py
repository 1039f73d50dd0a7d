import datetime
import logging
import mimetypes
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

from feedgen.feed import FeedGenerator

from blog.exceptions import FeedEntryError, FeedWriteError, InvalidPostDateError
from blog.schemas.blog import PostField
from blog.schemas.site import SiteMetadata
from blog.services.markdown_service import markdown_to_html
from blog.services.posts_service import parse_post_date
from blog.utils import normalize_keywords

logger = logging.getLogger(__name__)

FEED_FORMATS = ("rss", "atom")
REQUIRED_FIELDS = (PostField.TITLE, PostField.SLUG, PostField.DATE)


def build_feed(
    posts: Sequence[Dict[str, Any]],
    site: SiteMetadata,
    *,
    feed_format: str = "rss",
    render_content: Callable[[str], str] = markdown_to_html,
) -> bytes:
    """
    Render a syndication feed for ``posts`` in the order given.

    The feed's updated timestamp is taken from the newest post, so the same
    input always renders the same bytes. Only an empty feed carries the
    generation time.
    """
    if feed_format not in FEED_FORMATS:
        raise ValueError(f"Unsupported feed format: {feed_format}")

    fg = _new_feed(site, feed_format)

    published_dates: List[datetime.datetime] = []
    for post in posts:
        published = _add_entry(fg, post, site, render_content)
        published_dates.append(published)

    if published_dates:
        fg.updated(max(published_dates))

    if feed_format == "atom":
        return fg.atom_str(pretty=True)
    return fg.rss_str(pretty=True)


def write_feed(
    posts: Sequence[Dict[str, Any]],
    site: SiteMetadata,
    path: Path | str,
    *,
    feed_format: str = "rss",
    render_content: Callable[[str], str] = markdown_to_html,
) -> Path:
    """Render the feed and overwrite ``path`` with it."""
    path = Path(path)
    document = build_feed(
        posts, site, feed_format=feed_format, render_content=render_content
    )
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(document)
    except OSError as e:
        raise FeedWriteError(f"Failed to write {feed_format} feed to {path}: {e}") from e

    logger.info(f"Wrote {feed_format} feed with {len(posts)} entries to {path}")
    return path


def to_publication_datetime(value) -> datetime.datetime:
    """Header timestamps are kept; bare dates become midnight UTC."""
    if isinstance(value, datetime.datetime):
        return value if value.tzinfo else value.replace(tzinfo=datetime.timezone.utc)
    if isinstance(value, str):
        try:
            parsed = datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidPostDateError(f"Unrecognised post date: {value!r}") from e
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=datetime.timezone.utc)
    day = parse_post_date(value)
    return datetime.datetime(day.year, day.month, day.day, tzinfo=datetime.timezone.utc)


def _new_feed(site: SiteMetadata, feed_format: str) -> FeedGenerator:
    fg = FeedGenerator()
    fg.id(site.site_url)
    fg.title(site.title)
    fg.description(site.description)
    fg.author(name=site.author, email=site.email)
    # feedgen takes the RSS channel link from the last link added
    fg.link(href=site.absolute_url(_feed_filename(site, feed_format)), rel="self")
    fg.link(href=site.site_url, rel="alternate")
    fg.language(site.language)
    if site.site_logo:
        fg.logo(site.absolute_url(site.site_logo))
    return fg


def _feed_filename(site: SiteMetadata, feed_format: str) -> str:
    if feed_format == "atom":
        return site.atom_filename
    return site.feed_filename


def _add_entry(
    fg: FeedGenerator,
    post: Dict[str, Any],
    site: SiteMetadata,
    render_content: Callable[[str], str],
) -> datetime.datetime:
    for field in REQUIRED_FIELDS:
        if not post.get(field.value):
            raise FeedEntryError(post.get(PostField.SLUG.value), field.value)

    slug = post[PostField.SLUG.value]
    url = site.post_url(slug)
    published = to_publication_datetime(post[PostField.DATE.value])

    fe = fg.add_entry(order="append")
    fe.id(url)
    fe.guid(url, permalink=True)
    fe.title(post[PostField.TITLE.value])
    fe.link(href=url, rel="alternate")
    fe.published(published)
    fe.updated(published)
    fe.author(name=post.get(PostField.AUTHOR.value) or site.author, email=site.email)

    excerpt = post.get(PostField.EXCERPT.value)
    if excerpt:
        fe.description(excerpt, isSummary=True)

    content = post.get(PostField.CONTENT.value)
    if content:
        fe.content(render_content(content), type="html")

    cover_image = post.get(PostField.COVER_IMAGE.value)
    if cover_image:
        image_url = site.absolute_url(cover_image)
        fe.enclosure(image_url, "0", _guess_image_type(image_url))

    for keyword in normalize_keywords(post.get(PostField.KEYWORDS.value)):
        fe.category(term=keyword)

    return published


def _guess_image_type(url: str) -> str:
    guessed, _ = mimetypes.guess_type(url)
    return guessed or "image/jpeg"
