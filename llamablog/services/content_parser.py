import logging
from pathlib import Path
from typing import Optional

import frontmatter
import yaml
from pydantic import BaseModel, ValidationError

from llamablog.schemas.blog import PostFrontmatter

logger = logging.getLogger(__name__)


class ParsedPost(BaseModel):
    id: str
    file_path: str
    frontmatter: PostFrontmatter
    content: str


class ContentParser:
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def parse(
        self, path: Path, post_id: str, file_path: Optional[str] = None
    ) -> Optional[ParsedPost]:
        """Read a Markdown file and validate its front-matter."""
        try:
            text = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read post {post_id}: {e}")
            return None
        return self.parse_text(text, post_id, file_path or f"{post_id}.md")

    def parse_text(
        self, text: str, post_id: str, file_path: str
    ) -> Optional[ParsedPost]:
        try:
            parsed = frontmatter.loads(text)
        except yaml.YAMLError as e:
            logger.warning(f"Invalid front-matter YAML in post {post_id}: {e}")
            return None

        if not parsed.metadata:
            logger.warning(f"No front-matter found for post {post_id}")
            return None

        try:
            meta = PostFrontmatter(**parsed.metadata)
        except (ValidationError, TypeError) as e:
            logger.warning(f"Failed to parse post {post_id}: {e}")
            return None

        return ParsedPost(
            id=post_id,
            file_path=file_path,
            frontmatter=meta,
            content=parsed.content.strip(),
        )
