from typing import Optional

from llamablog.settings import settings
from llamablog.utils import slugify_str


def get_post_path(
    post_id: str,
    file_path: Optional[str] = None,
    include_base: bool = True,
    base_path: Optional[str] = None,
) -> str:
    """
    Build the permalink of a post.

    Directories in ``file_path`` become slugified path segments, except those
    starting with "_" which only group files. The last segment of the post id
    is used verbatim.
    """
    segments = []
    if file_path:
        segments = [
            slugify_str(segment)
            for segment in file_path.split("/")[:-1]
            if segment and not segment.startswith("_")
        ]

    slug = post_id.split("/")[-1]
    base = (base_path if base_path is not None else settings.POSTS_PREFIX).rstrip("/")
    parts = [base] if include_base else []
    return "/".join([*parts, *segments, slug])


def strip_base(path: str, base_path: Optional[str] = None) -> str:
    base = (base_path if base_path is not None else settings.POSTS_PREFIX).rstrip("/")
    return path.removeprefix(f"{base}/").strip("/")
