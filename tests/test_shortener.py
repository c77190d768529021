"""Tests for the shortener service — validation, conflict policy, results."""

from __future__ import annotations

import random

import pytest

from app.models import SlugKind
from app.shortener import Shortener
from app.state import SlugConflictError, state_manager
from app.urls import extract_slug, normalize_url


def slug_sequence(*slugs: str):
    remaining = list(slugs)

    async def next_slug() -> str:
        return remaining.pop(0)

    return next_slug


class TestNormalizeUrl:
    def test_adds_https(self):
        assert normalize_url("example.com") == "https://example.com"

    def test_keeps_scheme(self):
        assert normalize_url("http://example.com/x?y=1") == "http://example.com/x?y=1"

    def test_strips_whitespace(self):
        assert normalize_url("  example.com/path ") == "https://example.com/path"

    def test_host_starting_with_http_gets_scheme(self):
        assert normalize_url("httpbin.org/x") == "https://httpbin.org/x"

    def test_scheme_check_ignores_case(self):
        assert normalize_url("HTTPS://Example.com") == "HTTPS://Example.com"

    @pytest.mark.parametrize("url", ["", "   ", "not a url", "ftp://example.com", "localhost"])
    def test_rejects(self, url):
        with pytest.raises(ValueError):
            normalize_url(url)


class TestExtractSlug:
    def test_plain_slug(self):
        assert extract_slug("SweetPotato") == "sweetpotato"

    def test_full_url(self):
        assert extract_slug("https://cute.link/cozyowl") == "cozyowl"

    def test_note_url_keeps_path(self):
        assert extract_slug("https://cute.link/note/cozyowl") == "note/cozyowl"

    def test_domain_only(self):
        assert extract_slug("https://cute.link") == ""


@pytest.mark.asyncio
class TestShortenUrl:
    async def test_creates_link(self, patched_redis):
        shortener = Shortener(state_manager, slug_sequence("cozyowl"), rng=random.Random(0))
        result = await shortener.shorten_url("example.com", user_id="u1")

        assert result.kind == SlugKind.LINK
        assert result.slug == "cozyowl"
        assert result.short_url == "http://test/cozyowl"
        assert 75 <= result.cuteness <= 100
        assert result.link.original_url == "https://example.com"
        assert result.link.user_id == "u1"

    async def test_invalid_url(self, patched_redis):
        shortener = Shortener(state_manager, slug_sequence("cozyowl"))
        with pytest.raises(ValueError):
            await shortener.shorten_url("nope")

    async def test_conflict_surfaces_by_default(self, patched_redis):
        await state_manager.create_link("cozyowl", "https://taken.com")
        shortener = Shortener(state_manager, slug_sequence("cozyowl", "tinycat"))
        with pytest.raises(SlugConflictError):
            await shortener.shorten_url("example.com")
        assert await state_manager.get_link("tinycat") is None

    async def test_conflict_retry_policy(self, patched_redis):
        await state_manager.create_link("cozyowl", "https://taken.com")
        shortener = Shortener(
            state_manager, slug_sequence("cozyowl", "tinycat"), conflict_retries=2
        )
        result = await shortener.shorten_url("example.com")
        assert result.slug == "tinycat"

    async def test_retries_exhausted(self, patched_redis):
        await state_manager.create_link("cozyowl", "https://taken.com")
        shortener = Shortener(
            state_manager, slug_sequence("cozyowl", "cozyowl"), conflict_retries=1
        )
        with pytest.raises(SlugConflictError):
            await shortener.shorten_url("example.com")


@pytest.mark.asyncio
class TestCreateNote:
    async def test_creates_note(self, patched_redis):
        shortener = Shortener(state_manager, slug_sequence("sunnybee"))
        result = await shortener.create_note("  hello there  ", title="  ")

        assert result.kind == SlugKind.NOTE
        assert result.short_url == "http://test/note/sunnybee"
        assert result.note.content == "hello there"
        assert result.note.title is None

    async def test_blank_content(self, patched_redis):
        shortener = Shortener(state_manager, slug_sequence("sunnybee"))
        with pytest.raises(ValueError):
            await shortener.create_note("   ")

    async def test_note_conflict_retry(self, patched_redis):
        await state_manager.create_note("sunnybee", "taken")
        shortener = Shortener(
            state_manager, slug_sequence("sunnybee", "kindfox"), conflict_retries=1
        )
        result = await shortener.create_note("mine", title="Title")
        assert result.slug == "kindfox"
        assert result.note.title == "Title"
