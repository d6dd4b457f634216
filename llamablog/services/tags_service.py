from typing import Dict, List

from llamablog.schemas.blog import PostSummary, TagSummary
from llamablog.utils import slugify_all, slugify_str


def get_unique_tags(posts: List[PostSummary]) -> List[TagSummary]:
    """
    Collect the tags of ``posts`` keyed by slug.

    "C++" and "cpp" collapse into the same tag; the first spelling seen is
    kept as the display name. A post counts once per tag even if it lists
    two spellings of it.
    """
    names: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    for post in posts:
        seen = set()
        for name, slug in zip(post.tags, slugify_all(post.tags)):
            if not slug:
                continue
            names.setdefault(slug, name)
            if slug not in seen:
                counts[slug] = counts.get(slug, 0) + 1
                seen.add(slug)

    return [
        TagSummary(tag=slug, tagName=names[slug], count=counts[slug])
        for slug in sorted(names)
    ]


def get_posts_by_tag(posts: List[PostSummary], tag: str) -> List[PostSummary]:
    slug = slugify_str(tag)
    if not slug:
        return []
    return [post for post in posts if slug in slugify_all(post.tags)]


class TagsService:
    def __init__(self, posts_service):
        self.posts_service = posts_service

    def list_tags(self) -> List[TagSummary]:
        return get_unique_tags(self.posts_service.list_posts())

    def posts_for_tag(self, tag: str) -> List[PostSummary]:
        return get_posts_by_tag(self.posts_service.list_posts(), tag)
