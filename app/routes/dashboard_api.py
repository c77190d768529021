"""Dashboard API routes — a signed-in user's links and notes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.deps import require_user
from app.state import state_manager
from app.urls import short_link, short_note_link

router = APIRouter(prefix="/api/me")


@router.get("/links")
async def list_links(user_id: str = Depends(require_user)):
    links = await state_manager.list_links(user_id)
    return {
        "links": [
            {**link.model_dump(), "short_url": short_link(link.slug)} for link in links
        ],
        "count": len(links),
        "total_clicks": sum(link.click_count for link in links),
    }


@router.get("/notes")
async def list_notes(user_id: str = Depends(require_user)):
    notes = await state_manager.list_notes(user_id)
    return {
        "notes": [
            {**note.model_dump(), "short_url": short_note_link(note.slug)} for note in notes
        ],
        "count": len(notes),
        "total_views": sum(note.click_count for note in notes),
    }


@router.delete("/links/{slug}")
async def delete_link(slug: str, user_id: str = Depends(require_user)):
    if not await state_manager.delete_link(slug, user_id):
        raise HTTPException(status_code=404, detail="Link not found")
    return {"ok": True}


@router.delete("/notes/{slug}")
async def delete_note(slug: str, user_id: str = Depends(require_user)):
    if not await state_manager.delete_note(slug, user_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return {"ok": True}
