"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM reply.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip fenced code block markers and parse
    3. Parse the span from the first '{' to the last '}'

    Raises ValueError when none of these yields a JSON object.
    """
    text = (text or "").strip()

    candidates = [text]
    stripped = _strip_code_fences(text)
    if stripped != text:
        candidates.append(stripped)

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    for candidate in candidates:
        data = _extract_braces(candidate)
        if data is not None:
            return data

    raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    # Opening fence (```json, ```, etc.)
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()


def _extract_braces(text: str) -> dict | None:
    """Try to parse the object spanning the first '{' to the last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        data = json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
