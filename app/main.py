import logging

from fastapi import FastAPI

from . import config
from .routers import posts
from .services.blog_service import load_blog_service


logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog")

app.include_router(posts.router)


@app.on_event("startup")
def startup() -> None:
    app.state.blog_service = load_blog_service(config.BLOG_DIR, logger)


@app.get("/health")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
