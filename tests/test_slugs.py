"""Tests for slug generation, batches and cuteness rating."""

from __future__ import annotations

import random

import pytest

from app.slugs import BASE_CUTENESS, NoCandidateError, SlugGenerator, cuteness_score
from app.words import ADJECTIVES, NOUNS


class TestConstrainedGenerator:
    def test_combined_length_below_limit(self):
        generator = SlugGenerator(rng=random.Random(7))
        for _ in range(500):
            adjective, noun = generator.pick()
            assert len(adjective) + len(noun) < 10

    def test_slug_is_exact_concatenation(self):
        rng_a = random.Random(42)
        rng_b = random.Random(42)
        adjective, noun = SlugGenerator(rng=rng_a).pick()
        assert SlugGenerator(rng=rng_b).generate() == f"{adjective}{noun}"

    def test_words_come_from_their_lists(self):
        generator = SlugGenerator(rng=random.Random(3))
        for _ in range(300):
            adjective, noun = generator.pick()
            assert adjective in ADJECTIVES
            assert noun in NOUNS

    def test_falls_back_to_shorter_bounds(self):
        # Only the short words can ever satisfy the limit
        generator = SlugGenerator(
            ["enormous", "tiny"], ["hippopotamus", "cat", "elephant"],
            rng=random.Random(1),
        )
        for _ in range(100):
            assert generator.generate() == "tinycat"

    def test_no_candidates_raises(self):
        generator = SlugGenerator(["sweet", "happy"], ["potato", "panda"])
        with pytest.raises(NoCandidateError):
            generator.generate()

    def test_words_too_long_for_any_bound(self):
        generator = SlugGenerator(["magnificent"], ["butterfly"])
        with pytest.raises(NoCandidateError):
            generator.generate()

    def test_empty_word_lists_raise(self):
        with pytest.raises(NoCandidateError):
            SlugGenerator([], ["cat"]).generate()
        with pytest.raises(NoCandidateError):
            SlugGenerator(["cozy"], [], max_length=None).generate()

    def test_seeded_generators_agree(self):
        a = SlugGenerator(rng=random.Random(99))
        b = SlugGenerator(rng=random.Random(99))
        assert [a.generate() for _ in range(20)] == [b.generate() for _ in range(20)]


class TestUnconstrainedGenerator:
    def test_sweet_happy_potato_panda(self):
        generator = SlugGenerator(
            ["sweet", "happy"], ["potato", "panda"],
            max_length=None,
            rng=random.Random(5),
        )
        expected = {"sweetpotato", "sweetpanda", "happypotato", "happypanda"}
        seen = {generator.generate() for _ in range(200)}
        assert seen <= expected
        assert seen == expected

    def test_long_words_allowed(self):
        generator = SlugGenerator(["magnificent"], ["butterfly"], max_length=None)
        assert generator.generate() == "magnificentbutterfly"


class TestBatch:
    def test_batch_is_distinct(self):
        generator = SlugGenerator(rng=random.Random(11))
        batch = generator.batch(30)
        assert len(batch) == 30
        assert len(set(batch)) == 30

    def test_batch_stops_when_combinations_run_out(self):
        generator = SlugGenerator(["tiny"], ["cat", "owl"], rng=random.Random(2))
        assert sorted(generator.batch(10)) == ["tinycat", "tinyowl"]

    def test_empty_batch(self):
        assert SlugGenerator().batch(0) == []


class TestCuteness:
    def test_score_in_range(self):
        rng = random.Random(0)
        for slug in ["sweetpotato", "calmbook", "fluffybunny", "zzz"]:
            score = cuteness_score(slug, rng)
            assert BASE_CUTENESS <= score <= 100

    def test_plain_words_stay_near_base(self):
        # Without cute words the score never exceeds base + noise
        rng = random.Random(4)
        for _ in range(50):
            assert cuteness_score("quickbook", rng) < BASE_CUTENESS + 10

    def test_capped_at_100(self):
        rng = random.Random(8)
        assert cuteness_score("fluffysparklybunnycupcakerainbow", rng) == 100
