"""Create links and notes behind freshly acquired cute slugs."""

from __future__ import annotations

import logging
import random
from collections.abc import Awaitable, Callable

from app.models import ShortenResult, SlugKind
from app.slugs import cuteness_score
from app.state import LinkStateManager, SlugConflictError
from app.urls import normalize_url, short_link, short_note_link

logger = logging.getLogger(__name__)

NextSlug = Callable[[], Awaitable[str]]


class Shortener:
    """Validates input, picks a slug and stores the link or note.

    A slug collision is raised to the caller as ``SlugConflictError`` unless
    ``conflict_retries`` allows regenerating a new slug that many more times.
    """

    def __init__(
        self,
        store: LinkStateManager,
        next_slug: NextSlug,
        *,
        conflict_retries: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.next_slug = next_slug
        self.conflict_retries = max(0, conflict_retries)
        self._rng = rng

    async def shorten_url(self, url: str, user_id: str | None = None) -> ShortenResult:
        full_url = normalize_url(url)

        for attempt in range(self.conflict_retries + 1):
            slug = await self.next_slug()
            try:
                link = await self.store.create_link(slug, full_url, user_id)
                break
            except SlugConflictError:
                logger.warning(f"Link slug collision on '{slug}' (attempt {attempt + 1})")
                if attempt == self.conflict_retries:
                    raise

        logger.info(f"Shortened {full_url} -> {slug}")
        return ShortenResult(
            kind=SlugKind.LINK,
            slug=slug,
            short_url=short_link(slug),
            cuteness=cuteness_score(slug, self._rng),
            link=link,
        )

    async def create_note(
        self,
        content: str,
        title: str | None = None,
        user_id: str | None = None,
    ) -> ShortenResult:
        content = content.strip()
        if not content:
            raise ValueError("Please enter note content")
        title = (title or "").strip() or None

        for attempt in range(self.conflict_retries + 1):
            slug = await self.next_slug()
            try:
                note = await self.store.create_note(slug, content, title, user_id)
                break
            except SlugConflictError:
                logger.warning(f"Note slug collision on '{slug}' (attempt {attempt + 1})")
                if attempt == self.conflict_retries:
                    raise

        logger.info(f"Created note {slug} ({len(content)} chars)")
        return ShortenResult(
            kind=SlugKind.NOTE,
            slug=slug,
            short_url=short_note_link(slug),
            cuteness=cuteness_score(slug, self._rng),
            note=note,
        )
