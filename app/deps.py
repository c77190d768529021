"""FastAPI dependencies — slug supply, shortener, caller identity."""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Request

from app.config import settings
from app.shortener import NextSlug, Shortener
from app.slug_pool import SlugPool
from app.slugs import SlugGenerator
from app.state import state_manager


def get_slug_generator() -> SlugGenerator:
    return SlugGenerator(max_length=settings.max_slug_length)


def get_next_slug(
    request: Request,
    generator: SlugGenerator = Depends(get_slug_generator),
) -> NextSlug:
    """Pick the slug supply configured by ``settings.slug_strategy``."""
    if settings.slug_strategy == "pool":
        pool: SlugPool | None = getattr(request.app.state, "slug_pool", None)
        if pool is None:
            raise HTTPException(status_code=503, detail="Slug pool not ready")
        return pool.acquire

    async def next_slug() -> str:
        return generator.generate()

    return next_slug


def get_shortener(next_slug: NextSlug = Depends(get_next_slug)) -> Shortener:
    return Shortener(
        state_manager,
        next_slug,
        conflict_retries=settings.slug_conflict_retries,
    )


def get_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """Caller identity as forwarded by the upstream auth layer, if signed in."""
    return x_user_id or None


def require_user(user_id: str | None = Depends(get_user_id)) -> str:
    if not user_id:
        raise HTTPException(status_code=401, detail="Sign in to manage your links")
    return user_id
