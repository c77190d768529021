"""Batch slug sources used to refill the slug pool.

Supports Claude, Ollama, or a simulated batch when no LLM is configured. The
LLM source never raises: any failure is logged and replaced by a small fixed
batch.
"""

from __future__ import annotations

import json
import logging
import re

import httpx

from app.config import settings
from app.prompts import SLUG_PROMPT
from app.slugs import SlugGenerator

logger = logging.getLogger(__name__)

FALLBACK_BATCH = ["fallbackSlug1", "fallbackSlug2", "fallbackSlug3"]

SIMULATED_BATCH = [
    "glowingGlowworm", "happyHummingbird", "joyfulJaguar", "laughingLark",
    "merryMagpie", "nimbleNewt", "playfulPuppy", "quirkyQuokka",
    "radiantRobin", "smilingSparrow", "tranquilTurtle", "upbeatUrial",
    "vibrantViper", "wanderingWolf", "youthfulYak", "zippyZebra",
]

_SLUG_RE = re.compile(r"^[A-Za-z]{3,32}$")


class GeneratorSlugSource:
    """Refills from the local word lists."""

    def __init__(self, generator: SlugGenerator, batch_size: int = 16) -> None:
        self.generator = generator
        self.batch_size = batch_size

    async def __call__(self) -> list[str]:
        return self.generator.batch(self.batch_size)


class LLMSlugSource:
    """Asks the configured LLM provider for a batch of camelCase slugs."""

    def __init__(self, *, provider: str | None = None, count: int = 16) -> None:
        self.provider = provider or settings.llm_provider
        self.count = count

    async def __call__(self) -> list[str]:
        try:
            if self.provider == "none":
                return list(SIMULATED_BATCH)
            raw = await self._complete(SLUG_PROMPT.format(count=self.count))
            slugs = parse_slug_batch(raw)
            if not slugs:
                raise ValueError("LLM returned no usable slugs")
            logger.info(f"Fetched {len(slugs)} slugs from {self.provider}")
            return slugs
        except Exception as e:
            logger.warning(f"Slug generation via {self.provider} failed: {e}")
            return list(FALLBACK_BATCH)

    async def _complete(self, prompt: str) -> str:
        if self.provider == "claude":
            import anthropic

            client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key or None)
            response = await client.messages.create(
                model=settings.llm_model,
                max_tokens=400,
                temperature=1,
                messages=[{"role": "user", "content": prompt}],
            )
            return response.content[0].text

        if self.provider == "ollama":
            async with httpx.AsyncClient(timeout=120) as client:
                response = await client.post(
                    f"{settings.ollama_url}/api/generate",
                    json={"model": settings.ollama_model, "prompt": prompt, "stream": False},
                )
                response.raise_for_status()
                return response.json()["response"]

        raise ValueError(f"Unknown LLM provider: {self.provider}")


def parse_slug_batch(text: str) -> list[str]:
    """Extract a JSON array of slugs from an LLM response, handling markdown fences."""
    text = text.strip()
    if text.startswith("```"):
        text = re.sub(r"^```(?:json)?\s*", "", text)
        text = re.sub(r"\s*```$", "", text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = re.search(r"\[.*\]", text, re.DOTALL)
        if not match:
            raise
        data = json.loads(match.group())

    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of slugs")
    slugs = [s.strip() for s in data if isinstance(s, str)]
    return list(dict.fromkeys(s for s in slugs if _SLUG_RE.match(s)))
