from pathlib import Path

from llamablog.dependencies import (
    get_image_registry,
    get_posts_repo,
    get_posts_service,
    get_redirect_service,
    get_tags_service,
)
from llamablog.repos.posts_repo import FilesystemPostsRepo
from llamablog.services.content_parser import ContentParser
from llamablog.services.image_service import ImageRegistry
from llamablog.services.posts_service import PostsService
from llamablog.services.redirect_service import RedirectService
from llamablog.services.tags_service import TagsService
from llamablog.settings import Settings
from llamablog.site_config import SITE


def test_get_posts_repo_uses_content_dir():
    repo = get_posts_repo(current_settings=Settings(CONTENT_DIR="somewhere"))

    assert isinstance(repo, FilesystemPostsRepo)
    assert repo.content_dir == Path("somewhere")


def test_get_posts_service_constructs_service():
    class FakeRepo:
        pass

    repo = FakeRepo()
    parser = ContentParser()
    svc = get_posts_service(
        repo=repo,
        parser=parser,
        current_settings=Settings(
            SHOW_SCHEDULED=True,
            POSTS_PREFIX="/articles",
            SITE_API_URL="https://api.example.com",
        ),
    )

    assert isinstance(svc, PostsService)
    assert svc.repo is repo
    assert svc.parser is parser
    assert svc.show_scheduled is True
    assert svc.base_path == "/articles"
    assert svc.images_url == "https://api.example.com/images"


def test_get_tags_service_wraps_posts_service():
    posts_service = object()
    svc = get_tags_service(posts_service=posts_service)

    assert isinstance(svc, TagsService)
    assert svc.posts_service is posts_service


def test_get_redirect_service_uses_site_table():
    svc = get_redirect_service()

    assert isinstance(svc, RedirectService)
    assert svc.redirects == dict(SITE.redirects)


def test_get_image_registry_is_shared():
    registry = get_image_registry()

    assert isinstance(registry, ImageRegistry)
    assert registry is get_image_registry()
    assert "og-image" in registry
