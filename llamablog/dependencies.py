from fastapi import Depends

from llamablog.repos.posts_repo import FilesystemPostsRepo
from llamablog.security import get_settings
from llamablog.services.content_parser import ContentParser
from llamablog.services.image_service import ImageRegistry, default_registry
from llamablog.services.posts_service import PostsService
from llamablog.services.redirect_service import RedirectService
from llamablog.services.tags_service import TagsService
from llamablog.site_config import SITE

_image_registry = default_registry()


def get_posts_repo(current_settings=Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.content_path)


def get_content_parser():
    return ContentParser()


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
    current_settings=Depends(get_settings),
):
    return PostsService(
        repo=repo,
        parser=parser,
        site=SITE,
        show_scheduled=current_settings.SHOW_SCHEDULED,
        base_path=current_settings.POSTS_PREFIX,
        images_url=current_settings.images_url,
    )


def get_tags_service(posts_service=Depends(get_posts_service)):
    return TagsService(posts_service)


def get_redirect_service():
    return RedirectService(SITE.redirects)


def get_image_registry() -> ImageRegistry:
    return _image_registry
