"""URL validation and short-link helpers."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from app.config import settings

URL_PATTERN = re.compile(r"^(https?://)?([\w.-]+\.[a-z]{2,})(/.*)?$", re.IGNORECASE)
SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Validate a user-entered URL and make sure it carries a scheme.

    Raises:
        ValueError: If the URL is empty or not shaped like a web address.
    """
    url = url.strip()
    if not url:
        raise ValueError("Please enter a URL")
    if not URL_PATTERN.match(url):
        raise ValueError(
            "Please enter a valid URL (e.g., example.com or https://example.com)"
        )
    return url if SCHEME_PATTERN.match(url) else f"https://{url}"


def short_link(slug: str) -> str:
    return f"{settings.base_url.rstrip('/')}/{slug}"


def short_note_link(slug: str) -> str:
    return f"{settings.base_url.rstrip('/')}/note/{slug}"


def extract_slug(value: str) -> str:
    """Turn whatever was typed into the "go to" box into a path.

    A full URL yields its path without the leading slash; anything that does
    not parse as an absolute URL is taken to be a slug already.
    """
    value = value.strip().lower()
    parsed = urlparse(value)
    if parsed.scheme and parsed.netloc:
        return parsed.path.lstrip("/")
    return value.lstrip("/")
