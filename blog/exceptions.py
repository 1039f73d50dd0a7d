"""
Exceptions raised by the content and feed pipeline.

Every error here is build-fatal. Each class also derives from the matching
builtin so callers may catch either form.
"""


class BlogError(Exception):
    """Base class for all blog build errors."""

    pass


class PostNotFoundError(BlogError, FileNotFoundError):
    """Raised when a post identifier has no backing file in the store."""

    def __init__(self, slug: str, path=None):
        self.slug = slug
        self.path = path
        super().__init__(f"Post not found: {slug}")


class PostStoreError(BlogError, OSError):
    """Raised when the posts directory cannot be read."""

    pass


class MalformedFrontMatterError(BlogError, ValueError):
    """Raised when a post's metadata header cannot be parsed."""

    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Malformed front matter in post {slug}: {reason}")


class InvalidPostDateError(BlogError, ValueError):
    """Raised when a post's date value is not a recognisable calendar date."""

    pass


class FeedEntryError(BlogError, ValueError):
    """Raised when a post lacks a field the feed cannot do without."""

    def __init__(self, slug, field: str):
        self.slug = slug
        self.field = field
        super().__init__(f"Post {slug or '<unknown>'} is missing required feed field '{field}'")


class FeedWriteError(BlogError, OSError):
    """Raised when the feed document cannot be written to its output path."""

    pass
