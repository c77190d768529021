"""Public API routes — captcha, link and note creation, lookups."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.captcha import SLIDER_MAX, SLIDER_MIN, SliderCaptcha
from app.config import settings
from app.deps import get_shortener, get_slug_generator, get_user_id
from app.shortener import Shortener
from app.slugs import NoCandidateError, SlugGenerator, cuteness_score
from app.state import SlugConflictError, state_manager
from app.urls import normalize_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# --- Request models ---


class SlideRequest(BaseModel):
    value: int = Field(ge=SLIDER_MIN, le=SLIDER_MAX)


class CreateLinkRequest(BaseModel):
    url: str
    captcha_id: str = ""


class CreateNoteRequest(BaseModel):
    content: str
    title: str | None = None
    captcha_id: str = ""


# --- Captcha ---


@router.post("/captcha")
async def issue_captcha():
    captcha = SliderCaptcha.issue()
    await state_manager.save_captcha(captcha)
    return {"id": captcha.id, "target": captcha.target}


@router.post("/captcha/{captcha_id}/slide")
async def slide_captcha(captcha_id: str, request: SlideRequest):
    captcha = await _load_captcha(captcha_id)
    captcha.slide(request.value, tolerance=settings.captcha_tolerance)
    await state_manager.save_captcha(captcha)
    return {"id": captcha.id, "value": captcha.value, "verified": captcha.verified}


@router.post("/captcha/{captcha_id}/reset")
async def reset_captcha(captcha_id: str):
    captcha = await _load_captcha(captcha_id)
    captcha.reset()
    await state_manager.save_captcha(captcha)
    return {"id": captcha.id, "target": captcha.target, "verified": False}


async def _load_captcha(captcha_id: str) -> SliderCaptcha:
    captcha = await state_manager.get_captcha(captcha_id)
    if not captcha:
        raise HTTPException(status_code=404, detail="Verification expired, please retry")
    return captcha


async def _require_verified(captcha_id: str) -> SliderCaptcha:
    captcha = await state_manager.consume_captcha(captcha_id) if captcha_id else None
    if not captcha:
        raise HTTPException(
            status_code=400, detail="Please complete verification by moving the slider"
        )
    return captcha


def _creation_error(e: Exception) -> HTTPException:
    if isinstance(e, SlugConflictError):
        return HTTPException(
            status_code=409, detail="This cute combination already exists, please try again"
        )
    if isinstance(e, NoCandidateError):
        logger.error(f"Slug generation failed: {e}")
        return HTTPException(status_code=503, detail="No slug available right now")
    return HTTPException(status_code=400, detail=str(e))


# --- Links ---


@router.post("/links")
async def create_link(
    request: CreateLinkRequest,
    shortener: Shortener = Depends(get_shortener),
    user_id: str | None = Depends(get_user_id),
):
    try:
        normalize_url(request.url)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    captcha = await _require_verified(request.captcha_id)

    try:
        result = await shortener.shorten_url(request.url, user_id=user_id)
    except (ValueError, SlugConflictError, NoCandidateError) as e:
        # Nothing was created, so the challenge stays valid for a resubmit
        await state_manager.save_captcha(captcha)
        raise _creation_error(e)

    return {"ok": True, **result.model_dump()}


@router.get("/links/{slug}")
async def get_link(slug: str):
    link = await state_manager.get_link(slug)
    if not link:
        raise HTTPException(status_code=404, detail="Link not found")
    return link.model_dump()


# --- Notes ---


@router.post("/notes")
async def create_note(
    request: CreateNoteRequest,
    shortener: Shortener = Depends(get_shortener),
    user_id: str | None = Depends(get_user_id),
):
    if not request.content.strip():
        raise HTTPException(status_code=400, detail="Please enter note content")
    captcha = await _require_verified(request.captcha_id)

    try:
        result = await shortener.create_note(
            request.content, title=request.title, user_id=user_id
        )
    except (ValueError, SlugConflictError, NoCandidateError) as e:
        await state_manager.save_captcha(captcha)
        raise _creation_error(e)

    return {"ok": True, **result.model_dump()}


@router.get("/notes/{slug}")
async def get_note(slug: str):
    note = await state_manager.get_note(slug)
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return note.model_dump()


# --- Slug preview ---


@router.get("/slugs/suggest")
async def suggest_slug(generator: SlugGenerator = Depends(get_slug_generator)):
    try:
        slug = generator.generate()
    except NoCandidateError:
        raise HTTPException(status_code=503, detail="No slug available right now")
    return {"slug": slug, "cuteness": cuteness_score(slug)}
