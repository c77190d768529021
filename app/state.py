"""Link/note state manager wrapping Redis for all read/write operations."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from app.captcha import SliderCaptcha
from app.config import settings
from app.models import Link, Note, SlugKind
from app.redis_client import get_redis


class SlugConflictError(Exception):
    """The slug is already taken within its kind (link or note)."""

    def __init__(self, kind: SlugKind, slug: str) -> None:
        super().__init__(f"{kind} slug '{slug}' already exists")
        self.kind = kind
        self.slug = slug


def _prefix() -> str:
    return settings.namespace


def _key(slug: str) -> str:
    """Slugs resolve case-insensitively; the stored record keeps the issued casing."""
    return slug.lower()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class LinkStateManager:
    """Manages links, notes and captcha challenges in Redis."""

    # --- Links ---

    async def create_link(
        self, slug: str, original_url: str, user_id: str | None = None
    ) -> Link:
        created = _now()
        link = Link(
            id=str(uuid.uuid4()),
            slug=slug,
            original_url=original_url,
            user_id=user_id,
            created_at=created.isoformat(),
        )
        await self._insert(SlugKind.LINK, slug, link.model_dump_json(), user_id, created)
        return link

    async def get_link(self, slug: str) -> Link | None:
        r = get_redis()
        raw = await r.hget(f"{_prefix()}:links", _key(slug))
        if not raw:
            return None
        link = Link.model_validate_json(raw)
        link.click_count = int(await r.hget(f"{_prefix()}:links:clicks", _key(slug)) or 0)
        return link

    async def record_click(self, slug: str) -> Link | None:
        """Bump the click counter and return the link, or None if unknown."""
        link = await self.get_link(slug)
        if not link:
            return None
        r = get_redis()
        link.click_count = await r.hincrby(f"{_prefix()}:links:clicks", _key(slug), 1)
        return link

    async def list_links(self, user_id: str) -> list[Link]:
        r = get_redis()
        slugs = await r.zrevrange(f"{_prefix()}:user:{user_id}:links", 0, -1)
        links = []
        for slug in slugs:
            link = await self.get_link(slug)
            if link:
                links.append(link)
        return links

    async def delete_link(self, slug: str, user_id: str) -> bool:
        link = await self.get_link(slug)
        if not link or link.user_id != user_id:
            return False
        await self._remove(SlugKind.LINK, slug, user_id)
        return True

    # --- Notes ---

    async def create_note(
        self,
        slug: str,
        content: str,
        title: str | None = None,
        user_id: str | None = None,
    ) -> Note:
        created = _now()
        note = Note(
            id=str(uuid.uuid4()),
            slug=slug,
            title=title,
            content=content,
            user_id=user_id,
            created_at=created.isoformat(),
        )
        await self._insert(SlugKind.NOTE, slug, note.model_dump_json(), user_id, created)
        return note

    async def get_note(self, slug: str) -> Note | None:
        r = get_redis()
        raw = await r.hget(f"{_prefix()}:notes", _key(slug))
        if not raw:
            return None
        note = Note.model_validate_json(raw)
        note.click_count = int(await r.hget(f"{_prefix()}:notes:clicks", _key(slug)) or 0)
        return note

    async def record_view(self, slug: str) -> Note | None:
        note = await self.get_note(slug)
        if not note:
            return None
        r = get_redis()
        note.click_count = await r.hincrby(f"{_prefix()}:notes:clicks", _key(slug), 1)
        return note

    async def list_notes(self, user_id: str) -> list[Note]:
        r = get_redis()
        slugs = await r.zrevrange(f"{_prefix()}:user:{user_id}:notes", 0, -1)
        notes = []
        for slug in slugs:
            note = await self.get_note(slug)
            if note:
                notes.append(note)
        return notes

    async def delete_note(self, slug: str, user_id: str) -> bool:
        note = await self.get_note(slug)
        if not note or note.user_id != user_id:
            return False
        await self._remove(SlugKind.NOTE, slug, user_id)
        return True

    # --- Shared insert/remove ---

    async def _insert(
        self,
        kind: SlugKind,
        slug: str,
        payload: str,
        user_id: str | None,
        created: datetime,
    ) -> None:
        r = get_redis()
        table = f"{_prefix()}:{kind}s"
        # HSETNX is the uniqueness constraint on slug
        if not await r.hsetnx(table, _key(slug), payload):
            raise SlugConflictError(kind, slug)
        if user_id:
            await r.zadd(
                f"{_prefix()}:user:{user_id}:{kind}s", {_key(slug): created.timestamp()}
            )

    async def _remove(self, kind: SlugKind, slug: str, user_id: str) -> None:
        r = get_redis()
        await r.hdel(f"{_prefix()}:{kind}s", _key(slug))
        await r.hdel(f"{_prefix()}:{kind}s:clicks", _key(slug))
        await r.zrem(f"{_prefix()}:user:{user_id}:{kind}s", _key(slug))

    # --- Captcha challenges ---

    async def save_captcha(self, captcha: SliderCaptcha) -> None:
        r = get_redis()
        await r.set(
            f"{_prefix()}:captcha:{captcha.id}",
            captcha.model_dump_json(),
            ex=settings.captcha_ttl_seconds,
        )

    async def get_captcha(self, captcha_id: str) -> SliderCaptcha | None:
        r = get_redis()
        raw = await r.get(f"{_prefix()}:captcha:{captcha_id}")
        if raw:
            return SliderCaptcha.model_validate_json(raw)
        return None

    async def consume_captcha(self, captcha_id: str) -> SliderCaptcha | None:
        """Use up a verified challenge and return it, or None if missing or unverified.

        Callers whose submission then fails hand it back with ``save_captcha``.
        """
        captcha = await self.get_captcha(captcha_id)
        if not captcha or not captcha.verified:
            return None
        r = get_redis()
        # Only one submission may claim the challenge
        if not await r.delete(f"{_prefix()}:captcha:{captcha_id}"):
            return None
        return captcha


# Global instance
state_manager = LinkStateManager()
