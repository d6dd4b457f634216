import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from llamablog import dependencies as deps
from llamablog.schemas.blog import IndexPage, PostDetail, PostPage
from llamablog.services.posts_service import PageOutOfRange, PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostPage)
def list_posts(
    page: int = Query(1),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get one page of published posts, newest first."""
    try:
        return service.paginate(page)
    except PageOutOfRange as e:
        raise HTTPException(status_code=404, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug:path}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by its permalink slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/index", response_model=IndexPage)
def get_index(service: PostsService = Depends(deps.get_posts_service)):
    """Featured posts plus the most recent ones for the landing page."""
    try:
        return service.index()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error building index: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
