from typing import Optional

from pydantic import BaseModel, field_validator


class SiteMetadata(BaseModel):
    title: str
    author: str
    description: str
    site_url: str
    email: str
    language: str = "en-us"
    site_logo: Optional[str] = None
    blog_prefix: str = "blog/"
    feed_filename: str = "feed.xml"
    atom_filename: str = "atom.xml"

    @field_validator("site_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else f"{value}/"

    def absolute_url(self, path: str) -> str:
        """Resolve a site-relative path (``/static/x.png``) against the site URL."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.site_url}{path.lstrip('/')}"

    def post_url(self, slug: str) -> str:
        return f"{self.site_url}{self.blog_prefix}{slug}"
