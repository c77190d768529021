"""Print a batch of cute slugs with their cuteness ratings.

Usage:
    python -m scripts.generate_slugs                 # 10 length-limited slugs
    python -m scripts.generate_slugs --count 25
    python -m scripts.generate_slugs --no-limit      # any adjective + noun
    python -m scripts.generate_slugs --llm           # ask the configured LLM
"""

from __future__ import annotations

import argparse
import asyncio
import random

from app.config import settings
from app.slug_sources import GeneratorSlugSource, LLMSlugSource
from app.slugs import SlugGenerator, cuteness_score


def main():
    parser = argparse.ArgumentParser(description="Generate cute slugs")
    parser.add_argument("--count", type=int, default=10, help="Number of slugs (default: 10)")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument(
        "--no-limit",
        action="store_true",
        help="Skip the combined length limit",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help=f"Fetch from the LLM slug source (provider: {settings.llm_provider})",
    )
    args = parser.parse_args()

    rng = random.Random(args.seed)

    if args.llm:
        source = LLMSlugSource(count=args.count)
    else:
        max_length = None if args.no_limit else settings.max_slug_length
        source = GeneratorSlugSource(SlugGenerator(max_length=max_length, rng=rng), args.count)
    slugs = asyncio.run(source())

    for slug in slugs:
        print(f"{slug:<24} {cuteness_score(slug, rng):>3}% cute")


if __name__ == "__main__":
    main()
