"""HTML view routes — redirect page, note page, "go to cute link"."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.config import settings
from app.state import state_manager
from app.urls import extract_slug

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"settings": settings})


@router.get("/go")
async def go_to_cute_link(to: str = Query(default="")):
    """Resolve a typed slug or full short URL to its redirect page."""
    path = extract_slug(to)
    return RedirectResponse(f"/{path}" if path else "/", status_code=303)


@router.get("/note/{slug}", response_class=HTMLResponse)
async def note_page(request: Request, slug: str):
    note = await state_manager.record_view(slug)
    if not note:
        return _not_found(request, "Note not found")

    response = templates.TemplateResponse(
        request,
        "note.html",
        {"note": note, "settings": settings},
    )
    response.headers["Cache-Control"] = "no-store"
    return response


@router.get("/{slug}", response_class=HTMLResponse)
async def redirect_page(request: Request, slug: str):
    """Count the click, then forward after a short countdown."""
    link = await state_manager.record_click(slug)
    if not link:
        return _not_found(request, "Link not found")

    response = templates.TemplateResponse(
        request,
        "redirect.html",
        {
            "link": link,
            "countdown": settings.redirect_countdown_seconds,
            "settings": settings,
        },
    )
    response.headers["Cache-Control"] = "no-store"
    return response


def _not_found(request: Request, message: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "404.html",
        {"message": message, "settings": settings},
        status_code=404,
    )
