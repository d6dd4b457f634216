from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from llamablog import dependencies as deps
from llamablog.schemas.blog import Redirect
from llamablog.services.redirect_service import RedirectService

router = APIRouter()


@router.get("/redirects", response_model=List[Redirect])
def list_redirects(service: RedirectService = Depends(deps.get_redirect_service)):
    return service.list_redirects()


@router.get("/redirects/resolve", response_model=Redirect)
def resolve_redirect(
    path: str = Query(..., min_length=1),
    service: RedirectService = Depends(deps.get_redirect_service),
):
    destination = service.resolve(path)
    if destination is None:
        raise HTTPException(status_code=404, detail="No redirect for path")
    return Redirect(source=path, destination=destination)
