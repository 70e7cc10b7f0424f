from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from ..core.controller import NewsController
from ..core.render import render_page
from ..core.router import CATEGORIES, Category
from ..models.state import PageState
from ..tools.cache import NewsCache
from ..logging_config import get_logger


app = FastAPI(
    title="News Desk API",
    description="Headline and search front page backed by NewsAPI",
    version="1.0.0",
)
logger = get_logger("api.server")

# One cache for the whole process; controllers are per request.
_cache = NewsCache()


def get_controller() -> NewsController:
    return NewsController(cache=_cache)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/categories")
def list_categories() -> List[Category]:
    return CATEGORIES


@app.get("/news/{category_id}")
async def category_news(category_id: str) -> PageState:
    logger.info("category_request", category=category_id)
    return await get_controller().load_category(category_id)


@app.get("/search")
async def search_news(q: str = "") -> PageState:
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search term must not be empty")
    logger.info("search_request", term=q)
    return await get_controller().search(q)


@app.get("/", response_class=HTMLResponse)
async def front_page() -> str:
    state = await get_controller().load_category()
    return render_page(state)


@app.get("/page", response_class=HTMLResponse)
async def page(category: Optional[str] = None, q: Optional[str] = None) -> str:
    controller = get_controller()
    if q and q.strip():
        state = await controller.search(q)
    else:
        state = await controller.load_category(category)
    return render_page(state)
