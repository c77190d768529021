"""Shared test fixtures — fakeredis, test client, captcha and record seeding."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import fakeredis.aioredis
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.captcha import SliderCaptcha
from app.config import settings
from app.state import state_manager


@pytest.fixture(autouse=True)
def _test_settings():
    """Ensure test-safe settings for every test."""
    original = settings.model_copy()
    settings.namespace = "test-cutelinks"
    settings.base_url = "http://test"
    settings.slug_strategy = "words"
    settings.max_slug_length = 10
    settings.slug_conflict_retries = 3  # random slugs may collide across a test
    settings.llm_provider = "none"
    settings.anthropic_api_key = ""
    yield
    for field in type(settings).model_fields:
        setattr(settings, field, getattr(original, field))


@pytest.fixture
def fake_redis():
    """Fresh fakeredis instance per test."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


@pytest.fixture
def patched_redis(fake_redis):
    """Route the state manager's Redis calls to fakeredis."""
    with (
        patch("app.state.get_redis", return_value=fake_redis),
        patch("app.redis_client.get_redis", return_value=fake_redis),
    ):
        yield fake_redis


@pytest_asyncio.fixture
async def client(patched_redis):
    """FastAPI async test client backed by fakeredis."""
    with patch("app.redis_client.close_pool", new_callable=AsyncMock):
        from app.main import app

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac

    await patched_redis.flushall()


async def verified_captcha() -> str:
    """Store a challenge that has already been solved. Returns its id."""
    captcha = SliderCaptcha.issue()
    captcha.slide(captcha.target)
    await state_manager.save_captcha(captcha)
    return captcha.id


async def solve_captcha(client: AsyncClient) -> str:
    """Solve a challenge through the API. Returns its id."""
    resp = await client.post("/api/captcha")
    assert resp.status_code == 200
    data = resp.json()
    resp = await client.post(
        f"/api/captcha/{data['id']}/slide", json={"value": data["target"]}
    )
    assert resp.json()["verified"] is True
    return data["id"]


async def create_link(client: AsyncClient, url: str, user_id: str | None = None) -> dict:
    captcha_id = await solve_captcha(client)
    headers = {"X-User-Id": user_id} if user_id else {}
    resp = await client.post(
        "/api/links", json={"url": url, "captcha_id": captcha_id}, headers=headers
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


async def create_note(
    client: AsyncClient,
    content: str,
    title: str | None = None,
    user_id: str | None = None,
) -> dict:
    captcha_id = await solve_captcha(client)
    headers = {"X-User-Id": user_id} if user_id else {}
    resp = await client.post(
        "/api/notes",
        json={"content": content, "title": title, "captcha_id": captcha_id},
        headers=headers,
    )
    assert resp.status_code == 200, resp.text
    return resp.json()
