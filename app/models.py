from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class SlugKind(StrEnum):
    LINK = "link"
    NOTE = "note"


class PoolState(StrEnum):
    SUFFICIENT = "sufficient"
    LOW = "low"


class Link(BaseModel):
    id: str
    slug: str
    original_url: str
    user_id: str | None = None
    click_count: int = 0
    created_at: str = ""


class Note(BaseModel):
    id: str
    slug: str
    title: str | None = None
    content: str
    user_id: str | None = None
    click_count: int = 0  # views
    created_at: str = ""


class ShortenResult(BaseModel):
    kind: SlugKind
    slug: str
    short_url: str
    cuteness: int
    link: Link | None = None
    note: Note | None = None
