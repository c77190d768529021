from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.redis_client import close_pool, ping
from app.routes.dashboard_api import router as dashboard_router
from app.routes.public_api import router as public_router
from app.routes.views import router as views_router
from app.routes.views import templates
from app.slug_pool import SlugPool
from app.slug_sources import LLMSlugSource
from app.words import SEED_SLUGS


@asynccontextmanager
async def lifespan(app: FastAPI):
    pool = None
    if settings.slug_strategy == "pool":
        pool = await SlugPool.create(
            SEED_SLUGS,
            LLMSlugSource(count=settings.pool_batch_size),
            low_water_mark=settings.pool_low_water_mark,
        )
        app.state.slug_pool = pool
    yield
    if pool is not None:
        await pool.shutdown()
    await close_pool()


app = FastAPI(title="Cutelinks", lifespan=lifespan)


@app.middleware("http")
async def sprinkles(request: Request, call_next):
    response: Response = await call_next(request)
    response.headers["X-Cuteness"] = "maximum"
    return response


# API routes (must be registered before view routes to avoid slug capture)
app.include_router(public_router)
app.include_router(dashboard_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "redis": await ping()}


@app.exception_handler(StarletteHTTPException)
async def custom_404(request: Request, exc: StarletteHTTPException):
    if request.url.path.startswith("/api/"):
        return JSONResponse(
            {"detail": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
    if exc.status_code == 404:
        return templates.TemplateResponse(
            request,
            "404.html",
            {"message": "Nothing cute lives here", "settings": settings},
            status_code=404,
        )
    return HTMLResponse(str(exc.detail), status_code=exc.status_code)


# View routes (catch-all slug pattern, register last)
app.include_router(views_router)
