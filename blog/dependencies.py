from blog.repos.posts_repo import FilesystemPostsRepo
from blog.services.content_parser import ContentParser
from blog.services.pages_service import PagesService
from blog.services.posts_service import PostsService
from blog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings | None = None) -> FilesystemPostsRepo:
    current_settings = current_settings or get_settings()
    return FilesystemPostsRepo(current_settings.posts_path)


def get_posts_service(current_settings: Settings | None = None) -> PostsService:
    return PostsService(repo=get_posts_repo(current_settings), parser=ContentParser())


def get_pages_service(current_settings: Settings | None = None) -> PagesService:
    current_settings = current_settings or get_settings()
    return PagesService(
        posts_service=get_posts_service(current_settings),
        site=current_settings.site_metadata,
    )
