import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from blog import dependencies as deps
from blog.schemas.blog import FEED_FIELDS
from blog.services.feed_service import write_feed
from blog.services.posts_service import filter_published, sort_posts_by_date
from blog.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    total: int = 0
    published: int = 0
    feeds: List[Path] = field(default_factory=list)

    @property
    def drafts(self) -> int:
        return self.total - self.published


def run_build(current_settings: Settings | None = None) -> BuildResult:
    """One pass: enumerate, drop drafts, sort, write the feed(s)."""
    current_settings = current_settings or deps.get_settings()
    service = deps.get_posts_service(current_settings)
    site = current_settings.site_metadata

    posts = service.get_all_posts_with_slugs(FEED_FIELDS)
    published = sort_posts_by_date(filter_published(posts))
    logger.info(
        f"Loaded {len(posts)} posts from {current_settings.posts_path} "
        f"({len(posts) - len(published)} drafts skipped)"
    )

    result = BuildResult(total=len(posts), published=len(published))
    result.feeds.append(write_feed(published, site, current_settings.feed_path))

    atom_path = current_settings.atom_path
    if atom_path is not None:
        result.feeds.append(write_feed(published, site, atom_path, feed_format="atom"))

    return result


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the blog feed from the posts directory.")
    parser.add_argument("--posts-dir", help="override POSTS_DIR")
    parser.add_argument("--output-dir", help="override OUTPUT_DIR")
    parser.add_argument("--atom", action="store_true", help="also write atom.xml")
    args = parser.parse_args(argv)

    overrides = {}
    if args.posts_dir:
        overrides["POSTS_DIR"] = args.posts_dir
    if args.output_dir:
        overrides["OUTPUT_DIR"] = args.output_dir
    if args.atom:
        overrides["ATOM_FILENAME"] = "atom.xml"
    current_settings = Settings(**overrides)

    configure_logging(current_settings.LOG_LEVEL)
    try:
        result = run_build(current_settings)
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return 1

    logger.info(
        f"Build completed: {result.published} published, {result.drafts} drafts, "
        f"feeds: {', '.join(str(p) for p in result.feeds)}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
