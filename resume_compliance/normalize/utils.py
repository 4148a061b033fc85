from __future__ import annotations

import re

_BULLET_GLYPHS_RE = re.compile(r"[•·]")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^a-z0-9]+")
_LINE_SPLIT_RE = re.compile(r"\r?\n")

MIN_TOKEN_LENGTH = 3


def normalize_text(value: str | None) -> str:
    text = (value or "").replace("\r", "")
    text = _BULLET_GLYPHS_RE.sub("-", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def split_lines(text: str | None) -> list[str]:
    return _LINE_SPLIT_RE.split(text or "")


def non_empty_lines(text: str | None) -> list[str]:
    return [stripped for stripped in (line.strip() for line in split_lines(text)) if stripped]


def bullet_lines(text: str | None) -> list[str]:
    """Markdown "- " bullets with the marker removed."""
    bullets: list[str] = []
    for line in non_empty_lines(text):
        if not line.startswith("- "):
            continue
        content = line[2:].strip()
        if content:
            bullets.append(content)
    return bullets


def tokenize_words(value: str | None) -> list[str]:
    lowered = _NON_WORD_RE.sub(" ", (value or "").lower()).strip()
    if not lowered:
        return []
    return [word for word in lowered.split() if len(word) >= MIN_TOKEN_LENGTH]


def shingles(words: list[str], size: int) -> set[str]:
    if size <= 0 or len(words) < size:
        return set()
    return {" ".join(words[index : index + size]) for index in range(len(words) - size + 1)}
