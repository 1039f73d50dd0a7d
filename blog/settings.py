from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from blog.schemas.site import SiteMetadata


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "_posts"
    BLOG_PREFIX: str = "blog/"

    # Output
    OUTPUT_DIR: str = "public"
    FEED_FILENAME: str = "feed.xml"
    ATOM_FILENAME: str = ""  # empty disables the Atom feed

    # Logging
    LOG_LEVEL: str = "INFO"

    # Site
    SITE_TITLE: str = "bgolebiowski blog"
    SITE_AUTHOR: str = "Bartosz Golebiowski"
    SITE_DESCRIPTION: str = (
        "Blog with articles about frontend technology, react, micro-frontends, single-spa"
    )
    SITE_LANGUAGE: str = "en-us"
    SITE_URL: str = "https://bgolebiowski.com/"
    SITE_LOGO: str = "/static/images/logo.png"
    SITE_EMAIL: str = "bartosz.golebiowski24@gmail.com"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def feed_path(self) -> Path:
        return Path(self.OUTPUT_DIR) / self.FEED_FILENAME

    @property
    def atom_path(self) -> Path | None:
        if not self.ATOM_FILENAME:
            return None
        return Path(self.OUTPUT_DIR) / self.ATOM_FILENAME

    @property
    def site_metadata(self) -> SiteMetadata:
        return SiteMetadata(
            title=self.SITE_TITLE,
            author=self.SITE_AUTHOR,
            description=self.SITE_DESCRIPTION,
            language=self.SITE_LANGUAGE,
            site_url=self.SITE_URL,
            site_logo=self.SITE_LOGO or None,
            email=self.SITE_EMAIL,
            blog_prefix=self.BLOG_PREFIX,
            feed_filename=self.FEED_FILENAME,
            atom_filename=self.ATOM_FILENAME or "atom.xml",
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
