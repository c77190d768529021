"""In-memory pool of pre-generated slugs, refilled in the background.

The pool hands each slug out at most once. When it runs low a replenish task
is spawned and tracked on the instance; callers of ``acquire`` never wait for
it. If the pool is empty and a direct replenish brings nothing back,
``acquire`` returns ``fallback<ms timestamp>``.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from collections.abc import Awaitable, Callable, Iterable

from app.models import PoolState

logger = logging.getLogger(__name__)

SlugSource = Callable[[], Awaitable[list[str]]]

LOW_WATER_MARK = 5
FALLBACK_PREFIX = "fallback"


class SlugPool:
    def __init__(
        self,
        seed: Iterable[str],
        source: SlugSource,
        *,
        low_water_mark: int = LOW_WATER_MARK,
        rng: random.Random | None = None,
    ) -> None:
        self._available: list[str] = list(dict.fromkeys(seed))
        self._source = source
        self._low_water_mark = low_water_mark
        self._rng = rng or random.Random()
        self._lock = asyncio.Lock()
        self._replenish_task: asyncio.Task[None] | None = None

    @classmethod
    async def create(
        cls,
        seed: Iterable[str],
        source: SlugSource,
        *,
        low_water_mark: int = LOW_WATER_MARK,
        rng: random.Random | None = None,
        prewarm: bool = True,
    ) -> SlugPool:
        """Build a pool, optionally kicking off a background replenish."""
        pool = cls(seed, source, low_water_mark=low_water_mark, rng=rng)
        if prewarm:
            pool._spawn_replenish()
        return pool

    # --- Introspection ---

    def __len__(self) -> int:
        return len(self._available)

    @property
    def available(self) -> list[str]:
        return list(self._available)

    @property
    def state(self) -> PoolState:
        if len(self._available) < self._low_water_mark:
            return PoolState.LOW
        return PoolState.SUFFICIENT

    @property
    def replenish_task(self) -> asyncio.Task[None] | None:
        """Handle of the in-flight background replenish, if any."""
        return self._replenish_task

    # --- Operations ---

    async def acquire(self) -> str:
        if not self._available:
            await self.replenish()

        async with self._lock:
            if not self._available:
                logger.error("Slug pool exhausted, using fallback slug")
                return f"{FALLBACK_PREFIX}{int(time.time() * 1000)}"

            index = self._rng.randrange(len(self._available))
            slug = self._available.pop(index)
            remaining = len(self._available)

        if remaining < self._low_water_mark:
            self._spawn_replenish()

        return slug

    async def replenish(self) -> int:
        """Fetch a batch from the source and merge it in. Returns slugs added."""
        logger.info("Replenishing slug pool")
        try:
            batch = await self._source()
        except Exception as e:
            logger.warning(f"Slug source failed: {e}")
            batch = []

        async with self._lock:
            before = len(self._available)
            merged = dict.fromkeys(self._available)
            merged.update(dict.fromkeys(s for s in batch if s))
            self._available = list(merged)
            added = len(self._available) - before

        logger.info(f"Slug pool replenished: +{added}, {len(self._available)} available")
        return added

    async def shutdown(self) -> None:
        task = self._replenish_task
        self._replenish_task = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    def _spawn_replenish(self) -> None:
        # One background replenish at a time; a hung one blocks further triggers
        if self._replenish_task is not None and not self._replenish_task.done():
            return
        self._replenish_task = asyncio.create_task(self._background_replenish())

    async def _background_replenish(self) -> None:
        await self.replenish()
