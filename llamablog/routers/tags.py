import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from llamablog import dependencies as deps
from llamablog.schemas.blog import PostSummary, TagSummary
from llamablog.services.tags_service import TagsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags", response_model=List[TagSummary])
def list_tags(service: TagsService = Depends(deps.get_tags_service)):
    try:
        return service.list_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=List[PostSummary])
def posts_for_tag(tag: str, service: TagsService = Depends(deps.get_tags_service)):
    """Posts carrying ``tag``; any spelling that slugifies the same matches."""
    try:
        posts = service.posts_for_tag(tag)
        if not posts:
            raise HTTPException(status_code=404, detail="Tag not found")
        return posts
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tag")
