import textwrap
from pathlib import Path

import pytest

from blog.exceptions import PostNotFoundError
from blog.schemas.site import SiteMetadata


class FakeRepo:
    """
    In-memory post store stand-in: slug -> raw post source.
    Records the order of read_source() calls.
    """

    def __init__(self, sources: dict[str, str]):
        self.sources = {
            slug: textwrap.dedent(raw).lstrip() for slug, raw in sources.items()
        }
        self.reads = []

    def list_slugs(self):
        return list(self.sources)

    def read_source(self, slug: str) -> str:
        self.reads.append(slug)
        if slug not in self.sources:
            raise PostNotFoundError(slug)
        return self.sources[slug]


def write_post(directory: Path, name: str, raw: str) -> Path:
    path = directory / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "_posts"
    directory.mkdir()
    return directory


@pytest.fixture
def site():
    return SiteMetadata(
        title="Test blog",
        author="Ada",
        description="Posts about frontend things",
        site_url="https://example.com",
        email="ada@example.com",
        site_logo="/static/images/logo.png",
    )
