"""Prompt templates for LLM slug generation."""

SLUG_PROMPT = """You are naming short links for a cute URL shortener.

Invent {count} adorable slugs. Each slug is one adjective followed by one animal,
written in camelCase with no spaces, digits or punctuation (e.g. "playfulPanda",
"cuddlyCat"). Alliteration is encouraged. Avoid anything rude or scary.

Output ONLY a JSON array of strings, no markdown formatting."""
