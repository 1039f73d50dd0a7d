import logging
from typing import Any, Dict, Tuple

import frontmatter
import yaml

from blog.exceptions import MalformedFrontMatterError

logger = logging.getLogger(__name__)


class ContentParser:
    """Splits a post source into its front-matter header and markdown body."""

    def __init__(self, handlers=None):
        self.handlers = handlers if handlers is not None else frontmatter.handlers

    def parse(self, source: str, slug: str = "<unknown>") -> Tuple[Dict[str, Any], str]:
        handler = frontmatter.detect_format(source, self.handlers)
        if handler is None:
            logger.debug(f"No front matter found in post {slug}")
            return {}, source

        try:
            fm, content = handler.split(source)
            metadata = handler.load(fm)
        except (yaml.YAMLError, ValueError) as e:
            raise MalformedFrontMatterError(slug, str(e)) from e

        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise MalformedFrontMatterError(
                slug, f"expected a mapping, got {type(metadata).__name__}"
            )
        return metadata, content
