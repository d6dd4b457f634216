import argparse
import logging
import sys
from collections import defaultdict
from typing import List

from llamablog.repos.posts_repo import FilesystemPostsRepo
from llamablog.services.content_parser import ContentParser
from llamablog.services.paths import get_post_path
from llamablog.services.redirect_service import RedirectService
from llamablog.settings import settings
from llamablog.site_config import SITE

logger = logging.getLogger(__name__)


def check_content(repo: FilesystemPostsRepo, parser: ContentParser) -> List[str]:
    """Return every problem found in the posts and the redirect table."""
    problems = []
    paths = defaultdict(list)

    for path in repo.list_post_files():
        post_id = repo.post_id(path)
        file_path = repo.relative_path(path)
        parsed = parser.parse(path, post_id, file_path=file_path)
        if parsed is None:
            problems.append(f"{file_path}: could not be parsed")
            continue
        paths[get_post_path(post_id, file_path)].append(file_path)

    for permalink, files in sorted(paths.items()):
        if len(files) > 1:
            problems.append(f"{permalink}: claimed by {', '.join(files)}")

    problems.extend(RedirectService(SITE.redirects).validate())
    return problems


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(description="Check blog posts and redirects")
    arg_parser.add_argument("--content-dir", default=settings.CONTENT_DIR)
    args = arg_parser.parse_args(argv)

    problems = check_content(FilesystemPostsRepo(args.content_dir), ContentParser())
    for problem in problems:
        logger.error(problem)
    if problems:
        logger.error(f"{len(problems)} problem(s) found")
        return 1
    logger.info("Content check passed.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())
