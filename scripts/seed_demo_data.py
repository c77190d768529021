"""Load demo links and notes into Redis for development.

Usage:
    python -m scripts.seed_demo_data               # 10 links + 5 notes for user "demo"
    python -m scripts.seed_demo_data --links 30 --user alice
"""

from __future__ import annotations

import argparse
import asyncio
import random

from app.redis_client import close_pool
from app.slugs import SlugGenerator
from app.state import SlugConflictError, state_manager

DEMO_URLS = [
    "https://docs.python.org/3/library/asyncio.html",
    "https://fastapi.tiangolo.com/tutorial/",
    "https://redis.io/docs/latest/develop/data-types/hashes/",
    "https://en.wikipedia.org/wiki/Red_panda",
    "https://www.example.com/a/really/long/path?with=lots&of=parameters",
    "https://github.com/pydantic/pydantic",
]

DEMO_NOTES = [
    ("Grocery list", "oat milk\nstrawberries\nsourdough\nfancy cheese"),
    ("Wifi", "network: cozy-cabin\npassword: ask the cat"),
    (None, "Remember to water the basil on Tuesdays."),
    ("Haiku", "tiny link, big world\nsweet potato in the cloud\nclick and off you go"),
]


def generate_demo_links(count: int, rng: random.Random | None = None) -> list[dict]:
    rng = rng or random.Random()
    generator = SlugGenerator(rng=rng)
    return [
        {"slug": slug, "original_url": rng.choice(DEMO_URLS)}
        for slug in generator.batch(count)
    ]


def generate_demo_notes(count: int, rng: random.Random | None = None) -> list[dict]:
    rng = rng or random.Random()
    generator = SlugGenerator(rng=rng)
    notes = []
    for slug in generator.batch(count):
        title, content = rng.choice(DEMO_NOTES)
        notes.append({"slug": slug, "title": title, "content": content})
    return notes


async def load_demo_data(links: list[dict], notes: list[dict], user_id: str | None) -> None:
    created = skipped = 0
    for link in links:
        try:
            await state_manager.create_link(link["slug"], link["original_url"], user_id)
            created += 1
        except SlugConflictError:
            skipped += 1
    for note in notes:
        try:
            await state_manager.create_note(note["slug"], note["content"], note["title"], user_id)
            created += 1
        except SlugConflictError:
            skipped += 1
    print(f"  Created {created} records ({skipped} slugs already taken)")
    await close_pool()


def main():
    parser = argparse.ArgumentParser(description="Seed demo links and notes")
    parser.add_argument("--links", type=int, default=10, help="Number of links (default: 10)")
    parser.add_argument("--notes", type=int, default=5, help="Number of notes (default: 5)")
    parser.add_argument("--user", default="demo", help="Owner user id (default: demo)")
    parser.add_argument("--anonymous", action="store_true", help="Create records with no owner")
    args = parser.parse_args()

    links = generate_demo_links(args.links)
    notes = generate_demo_notes(args.notes)
    user_id = None if args.anonymous else args.user

    print(f"Loading {len(links)} links and {len(notes)} notes...")
    asyncio.run(load_demo_data(links, notes, user_id))
    print("Done!")


if __name__ == "__main__":
    main()
