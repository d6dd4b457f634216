import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from llamablog.routers import images, posts, redirects, slugs, tags
from llamablog.security import get_api_key
from llamablog.services.redirect_service import RedirectService
from llamablog.settings import settings
from llamablog.site_config import SITE

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def check_redirects() -> list[str]:
    problems = RedirectService(SITE.redirects).validate()
    for problem in problems:
        logger.warning(f"Redirect table: {problem}")
    return problems


@asynccontextmanager
async def lifespan(app: FastAPI):
    problems = check_redirects()
    logger.info(
        f"Serving {SITE.title} from {settings.CONTENT_DIR} "
        f"({len(SITE.redirects)} redirects, {len(problems)} problems)"
    )
    yield
    logger.info("Site API shut down")


app = FastAPI(
    title="llamablog API",
    description=SITE.desc,
    lifespan=lifespan,
)

app.include_router(images.router)
app.include_router(redirects.router)
app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(tags.router, dependencies=[Depends(get_api_key)])
app.include_router(slugs.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": f"{SITE.title} API is running"}
