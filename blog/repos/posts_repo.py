import logging
import os
from pathlib import Path
from typing import List

from blog.exceptions import PostNotFoundError, PostStoreError
from blog.settings import settings

logger = logging.getLogger(__name__)

POST_EXTENSIONS = (".md", ".mdx")


class FilesystemPostsRepo:
    def __init__(self, posts_dir: Path | str | None = None):
        self.posts_dir = Path(posts_dir) if posts_dir is not None else settings.posts_path

    def list_slugs(self) -> List[str]:
        """Identifiers of every post file, in directory enumeration order."""
        try:
            entries = list(os.scandir(self.posts_dir))
        except OSError as e:
            raise PostStoreError(
                f"Cannot read posts directory {self.posts_dir}: {e}"
            ) from e

        slugs = []
        for entry in entries:
            base, ext = os.path.splitext(entry.name)
            if ext not in POST_EXTENSIONS or not entry.is_file():
                logger.warning(f"Skipping non-post entry in store: {entry.name}")
                continue
            if base in slugs:
                raise PostStoreError(f"Post {base} exists as both .md and .mdx in {self.posts_dir}")
            slugs.append(base)
        return slugs

    def read_source(self, slug: str) -> str:
        slug = normalize_slug(slug)
        path = self.resolve_path(slug)
        if path is None:
            raise PostNotFoundError(slug, self.posts_dir / f"{slug}.md")
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PostNotFoundError(slug, path) from e

    def resolve_path(self, slug: str) -> Path | None:
        for ext in POST_EXTENSIONS:
            candidate = self.posts_dir / f"{slug}{ext}"
            if candidate.is_file():
                return candidate
        return None


def normalize_slug(slug: str) -> str:
    """Strip a trailing post extension from an identifier."""
    for ext in POST_EXTENSIONS:
        if slug.endswith(ext):
            return slug[: -len(ext)]
    return slug
