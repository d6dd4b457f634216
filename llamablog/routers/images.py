import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from llamablog import dependencies as deps
from llamablog.security import get_settings
from llamablog.services.image_service import ImageRegistry, UnknownImage, read_image

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/images/{name}")
async def get_image(
    name: str,
    theme: Optional[str] = Query(None, pattern="^(light|dark)$"),
    registry: ImageRegistry = Depends(deps.get_image_registry),
    current_settings=Depends(get_settings),
):
    """
    Serve the light or dark rendition of a registered image
    """
    try:
        file_name = registry.select(name, theme)
    except UnknownImage:
        raise HTTPException(status_code=404, detail="Image not found")

    image_data, content_type = read_image(current_settings.images_path, file_name)
    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    # Set proper content length header
    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
