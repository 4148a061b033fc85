from __future__ import annotations

import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

MAX_VARIANTS = 10

_WHITESPACE_RE = re.compile(r"\s+")
_DASHES_RE = re.compile(r"[–—]")

# (pattern, replacement) pairs applied to the keyword to derive brand/acronym variants.
_VARIANT_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bpowerbi\b", re.IGNORECASE), "Power BI"),
    (re.compile(r"\bpower\s*bi\b", re.IGNORECASE), "PowerBI"),
    (re.compile(r"\bgoogle\s*sheets\b", re.IGNORECASE), "Sheets"),
    (re.compile(r"\bms\s*excel\b", re.IGNORECASE), "Excel"),
    (re.compile(r"\bmicrosoft\s*excel\b", re.IGNORECASE), "Excel"),
    (re.compile(r"\bamazon\s+web\s+services\b", re.IGNORECASE), "AWS"),
    (re.compile(r"\baws\b", re.IGNORECASE), "Amazon Web Services"),
)
_BRAND_PREFIXES = ("ms ", "microsoft ")

_PRIORITY_DEFAULT = 10
_PRIORITY_LENGTH_CAP = 50
_KEYWORD_PRIORITY: dict[str, int] = {
    "excel": 0,
    "microsoft excel": 0,
    "ms excel": 0,
    "power bi": 1,
    "tableau": 1,
    "sql": 1,
    "ms sql": 1,
    "python": 1,
    "google sheets": 2,
    "sheets": 2,
    "data analysis": 2,
    "data analytics": 2,
    "project management": 3,
    "stakeholder management": 3,
}


def normalize_keyword(value: str | None) -> str:
    collapsed = _WHITESPACE_RE.sub(" ", (value or "").strip())
    return _DASHES_RE.sub("-", collapsed).strip()


def keyword_variants(keyword: str | None) -> list[str]:
    base = normalize_keyword(keyword)
    if not base:
        return []
    lowered = base.lower()

    candidates = [base]
    for prefix in _BRAND_PREFIXES:
        if lowered.startswith(prefix):
            candidates.append(base[len(prefix) :].strip())
    for pattern, replacement in _VARIANT_REWRITES:
        candidates.append(pattern.sub(replacement, base))

    variants: list[str] = []
    for candidate in candidates:
        normalized = normalize_keyword(candidate)
        if normalized and normalized not in variants:
            variants.append(normalized)
    return variants[:MAX_VARIANTS]


def _variant_pattern(variant: str) -> str:
    parts = [re.escape(part) for part in variant.split()]
    return r"\b" + r"\s+".join(parts) + r"\b"


def includes_keyword(haystack: str | None, keyword: str | None) -> bool:
    """Return True when any brand/acronym variant of ``keyword`` occurs in ``haystack``."""
    text = haystack or ""
    for variant in keyword_variants(keyword):
        try:
            pattern = re.compile(_variant_pattern(variant), re.IGNORECASE)
        except re.error as exc:
            logger.debug("keyword_pattern_fallback variant=%r error=%s", variant, exc)
            if variant.lower() in text.lower():
                return True
            continue
        if pattern.search(text):
            return True
    return False


def count_keyword_occurrences(text: str | None, keyword: str | None) -> int:
    source = text or ""
    literal = (keyword or "").strip()
    if not source or not literal:
        return 0
    pattern = re.compile(rf"(?<![A-Za-z0-9]){re.escape(literal)}(?![A-Za-z0-9])", re.IGNORECASE)
    return len(pattern.findall(source))


def dedupe_keywords(keywords: Iterable[str | None] | None) -> list[str]:
    deduped: list[str] = []
    seen: set[str] = set()
    for keyword in keywords or ():
        if not keyword:
            continue
        trimmed = keyword.strip()
        key = trimmed.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        deduped.append(trimmed)
    return deduped


def prioritize_keywords(keywords: Iterable[str | None] | None) -> list[str]:
    """Order keywords by tool priority, then brevity, then input order; drop duplicates."""
    ranked: list[tuple[int, int, int, str]] = []
    for index, keyword in enumerate(keywords or ()):
        if not keyword:
            continue
        trimmed = str(keyword).strip()
        normalized = normalize_keyword(trimmed).lower()
        priority = _KEYWORD_PRIORITY.get(normalized, _PRIORITY_DEFAULT)
        ranked.append((priority, min(_PRIORITY_LENGTH_CAP, len(normalized)), index, trimmed))
    ranked.sort()

    ordered: list[str] = []
    seen: set[str] = set()
    for _, _, _, keyword in ranked:
        normalized = normalize_keyword(keyword).lower()
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        ordered.append(keyword)
    return ordered
