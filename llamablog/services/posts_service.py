import datetime
import logging
import math
from typing import Callable, List, Optional

from llamablog.schemas.blog import (
    IndexPage,
    PostDetail,
    PostFrontmatter,
    PostPage,
    PostSummary,
)
from llamablog.services.content_parser import ParsedPost
from llamablog.services.paths import get_post_path, strip_base
from llamablog.site_config import SITE, SiteConfig
from llamablog.utils import calculate_reading_time

logger = logging.getLogger(__name__)


class PageOutOfRange(Exception):
    def __init__(self, page: int, total_pages: int):
        super().__init__(f"Page {page} is out of range (1..{total_pages})")
        self.page = page
        self.total_pages = total_pages


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class PostsService:
    def __init__(
        self,
        repo,
        parser,
        site: SiteConfig = SITE,
        show_scheduled: bool = False,
        base_path: Optional[str] = None,
        images_url: Optional[str] = None,
        clock: Callable[[], datetime.datetime] = _utcnow,
    ):
        self.repo = repo
        self.parser = parser
        self.site = site
        self.show_scheduled = show_scheduled
        self.base_path = base_path
        self.images_url = images_url
        self.clock = clock

    def load_posts(self) -> List[ParsedPost]:
        """Parse every post file, skipping the ones that fail."""
        posts = []
        for path in self.repo.list_post_files():
            post_id = self.repo.post_id(path)
            parsed = self.parser.parse(
                path, post_id, file_path=self.repo.relative_path(path)
            )
            if parsed is None:
                logger.warning(f"Skipping unparseable post {post_id}")
                continue
            posts.append(parsed)
        return posts

    def visible_posts(self) -> List[ParsedPost]:
        now = self.clock()
        posts = [
            p
            for p in self.load_posts()
            if post_filter(
                p.frontmatter,
                now,
                margin=self.site.scheduled_post_margin,
                show_scheduled=self.show_scheduled,
            )
        ]
        posts.sort(key=_sort_key, reverse=True)
        return posts

    def list_posts(self) -> List[PostSummary]:
        return [self._summary(p) for p in self.visible_posts()]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        slug = slug.strip("/")
        for post in self.visible_posts():
            if self._slug(post) == slug:
                return PostDetail(
                    **self._summary(post).model_dump(), content=post.content
                )
        return None

    def paginate(self, page: int = 1) -> PostPage:
        posts = self.list_posts()
        return paginate(posts, page, self.site.post_per_page)

    def index(self) -> IndexPage:
        posts = self.list_posts()
        featured = [p for p in posts if p.featured]
        recent = [p for p in posts if not p.featured]
        return IndexPage(
            featured=featured, recent=recent[: self.site.post_per_index]
        )

    def _path(self, post: ParsedPost) -> str:
        return get_post_path(post.id, post.file_path, base_path=self.base_path)

    def _slug(self, post: ParsedPost) -> str:
        return strip_base(self._path(post), base_path=self.base_path)

    def _summary(self, post: ParsedPost) -> PostSummary:
        meta = post.frontmatter
        return PostSummary(
            id=post.id,
            slug=self._slug(post),
            path=self._path(post),
            title=meta.title,
            description=meta.description,
            author=meta.author,
            pubDatetime=meta.pubDatetime,
            modDatetime=meta.modDatetime,
            tags=meta.tags,
            featured=meta.featured,
            draft=meta.draft,
            readingTime=calculate_reading_time(post.content),
            canonicalURL=meta.canonicalURL,
            ogImage=process_og_image(meta.ogImage, self.images_url),
        )


def post_filter(
    meta: PostFrontmatter,
    now: datetime.datetime,
    *,
    margin: datetime.timedelta = SITE.scheduled_post_margin,
    show_scheduled: bool = False,
) -> bool:
    """Drafts are never shown; future posts only once within the margin."""
    if meta.draft:
        return False
    return show_scheduled or now > meta.pubDatetime - margin


def _sort_key(post: ParsedPost) -> datetime.datetime:
    meta = post.frontmatter
    return meta.modDatetime or meta.pubDatetime


def paginate(posts: List[PostSummary], page: int, per_page: int) -> PostPage:
    total_pages = max(1, math.ceil(len(posts) / per_page))
    if page < 1 or page > total_pages:
        raise PageOutOfRange(page, total_pages)
    start = (page - 1) * per_page
    return PostPage(
        items=posts[start : start + per_page],
        page=page,
        totalPages=total_pages,
        totalPosts=len(posts),
    )


def process_og_image(
    image_path: Optional[str], images_url: Optional[str]
) -> Optional[str]:
    """
    Point front-matter images under /images/ at the image endpoint
    """
    if not image_path or not images_url:
        return image_path

    if image_path.startswith("/images/"):
        name = image_path[len("/images/") :]
        return f"{images_url.rstrip('/')}/{name}"

    return image_path
