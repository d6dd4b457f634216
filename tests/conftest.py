import datetime
import textwrap
from pathlib import Path

import pytest

from llamablog.repos.posts_repo import FilesystemPostsRepo
from llamablog.schemas.blog import PostSummary
from llamablog.services.content_parser import ContentParser
from llamablog.services.posts_service import PostsService
from llamablog.site_config import SITE

FIXED_NOW = datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


def post_markdown(
    title="Hello",
    pub="2024-01-01T09:00:00Z",
    description="A post",
    body="Some words here.",
    **extra,
) -> str:
    """Render a minimal post with front-matter."""
    lines = [
        "---",
        f"title: {title}",
        f"pubDatetime: {pub}",
        f"description: {description}",
    ]
    for key, value in extra.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    lines.append(textwrap.dedent(body).strip())
    return "\n".join(lines) + "\n"


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "blog"
    root.mkdir()
    return root


@pytest.fixture
def write_post(content_dir: Path):
    def _write(relative: str, text: str) -> Path:
        path = content_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def posts_service(content_dir: Path) -> PostsService:
    return PostsService(
        repo=FilesystemPostsRepo(content_dir),
        parser=ContentParser(),
        site=SITE,
        base_path="/posts",
        clock=lambda: FIXED_NOW,
    )


def make_summary(slug: str, tags=None, featured=False, **extra) -> PostSummary:
    data = {
        "id": slug,
        "slug": slug,
        "path": f"/posts/{slug}",
        "title": slug.replace("-", " ").title(),
        "description": "desc",
        "author": SITE.author,
        "pubDatetime": FIXED_NOW,
        "tags": tags if tags is not None else ["others"],
        "featured": featured,
        "readingTime": "1 min",
    }
    data.update(extra)
    return PostSummary(**data)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, posts=None, page=None, get_post_return=None, index=None):
        self.posts = posts or []
        self.page = page
        self._get_post_return = get_post_return
        self._index = index
        self.calls = []

    def list_posts(self):
        return self.posts

    def paginate(self, page: int = 1):
        self.calls.append(("paginate", page))
        if isinstance(self.page, Exception):
            raise self.page
        return self.page

    def get_post(self, slug: str):
        self.calls.append(("get_post", slug))
        return self._get_post_return

    def index(self):
        return self._index
