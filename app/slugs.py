"""Cute slug generation from adjective/noun word lists."""

from __future__ import annotations

import random
from collections.abc import Sequence

from app.words import ADJECTIVES, CUTE_WORDS, NOUNS

# Shortest per-word bound tried before giving up
MIN_WORD_BOUND = 4

BASE_CUTENESS = 75


class NoCandidateError(Exception):
    """No adjective/noun pair satisfies the length constraint."""


class SlugGenerator:
    """Builds slugs like 'sweetpotato' from an adjective and a noun.

    With ``max_length`` set, the combined length of both words stays strictly
    below it; with ``max_length=None`` any pair is accepted.
    """

    def __init__(
        self,
        adjectives: Sequence[str] = ADJECTIVES,
        nouns: Sequence[str] = NOUNS,
        *,
        max_length: int | None = 10,
        rng: random.Random | None = None,
    ) -> None:
        self.adjectives = list(adjectives)
        self.nouns = list(nouns)
        self.max_length = max_length
        self._rng = rng or random.Random()

    def pick(self) -> tuple[str, str]:
        """Return the (adjective, noun) pair for the next slug."""
        if not self.adjectives or not self.nouns:
            raise NoCandidateError("Word lists are empty")

        if self.max_length is None:
            return self._rng.choice(self.adjectives), self._rng.choice(self.nouns)

        for bound in range(self.max_length - 1, MIN_WORD_BOUND - 1, -1):
            adjectives = [a for a in self.adjectives if len(a) < bound]
            nouns = [n for n in self.nouns if len(n) < bound]
            if not adjectives or not nouns:
                continue

            adjective = self._rng.choice(adjectives)
            noun = self._rng.choice(nouns)
            if len(adjective) + len(noun) < self.max_length:
                return adjective, noun

        raise NoCandidateError(
            f"No adjective/noun pair shorter than {self.max_length} characters"
        )

    def generate(self) -> str:
        adjective, noun = self.pick()
        return f"{adjective}{noun}"

    def batch(self, count: int) -> list[str]:
        """Generate up to ``count`` distinct slugs.

        Stops early when the word lists keep producing slugs already in the
        batch.
        """
        slugs: dict[str, None] = {}
        attempts = 0
        while len(slugs) < count and attempts < count * 10:
            slugs[self.generate()] = None
            attempts += 1
        return list(slugs)


def cuteness_score(slug: str, rng: random.Random | None = None) -> int:
    """Cosmetic 75-100 rating; every cute word in the slug adds 5-15 points."""
    rng = rng or random
    score = float(BASE_CUTENESS)
    lowered = slug.lower()
    for word in CUTE_WORDS:
        if word in lowered:
            score += rng.uniform(5, 15)
    score += rng.random() * 10
    return min(100, int(score))
