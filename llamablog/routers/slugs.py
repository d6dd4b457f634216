from fastapi import APIRouter

from llamablog.schemas.blog import SlugRequest, SlugResponse
from llamablog.utils import slugify_all

router = APIRouter()


@router.post("/slugify", response_model=SlugResponse)
def slugify(request: SlugRequest):
    return SlugResponse(slugs=slugify_all(request.values))
