"""Stylistic and structural heuristics for a rewritten resume.

Every scorer returns a float in [0, 1] (or a list of offending lines) and
falls back to a fixed neutral value when the document gives it nothing to
measure.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Mapping

from resume_compliance.keywords import BUZZWORDS, TOOL_KEYWORDS, count_keyword_occurrences, dedupe_keywords, includes_keyword
from resume_compliance.normalize import (
    REQUIRED_SECTIONS,
    bullet_lines,
    non_empty_lines,
    normalize_text,
    split_sections,
    tokenize_words,
)

ROBOTIC_THRESHOLD = 0.6
REPEATED_STARTER_MIN = 3
LONG_BULLET_WORDS = 22
LONG_DOCUMENT_CHARS = 6500
LONG_DOCUMENT_SPAN = 4000
BUZZWORD_CAP = 6
TOOL_FIRST_EXAMPLES = 10
ROLE_ALIGNMENT_JD_WORDS = 40
ROLE_ALIGNMENT_MIN_OVERLAP = 12

DEFAULT_OUTCOME_CLARITY = 0.6
DEFAULT_CONSISTENCY = 0.75
DEFAULT_SEMANTIC_MATCH = 0.8
TABLE_FORMATTING_SCORE = 0.6
CLEAN_FORMATTING_SCORE = 0.9

_STARTER_RE = re.compile(r"^([A-Za-z]{3,12})\b")
_FIRST_WORD_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.#/-]{1,20})")
_METRIC_RE = re.compile(r"\b\d+%?\b")
_PIPE_ROW_RE = re.compile(r"\|.*\|")
_PIPE_SEPARATOR_RE = re.compile(r"\n\|?\s*---")
_HTML_TABLE_RE = re.compile(r"<table|<div", re.IGNORECASE)
_OUTCOME_VERBS = (
    "increased",
    "reduced",
    "improved",
    "accelerated",
    "decreased",
    "grew",
    "saved",
    "delivered",
    "launched",
    "built",
    "optimized",
    "streamlined",
    "automated",
)
_SNIPPET_CHARS = 160


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def buzzword_count(text: str) -> int:
    return sum(count_keyword_occurrences(text, buzzword) for buzzword in BUZZWORDS)


def robotic_language_score(markdown: str) -> float:
    """Weighted blend of repeated bullet openers, buzzwords, long bullets and overall length."""
    text = normalize_text(markdown)
    if not text:
        return 0.0
    bullets = bullet_lines(markdown)

    starters = Counter()
    for bullet in bullets:
        match = _STARTER_RE.match(bullet)
        if match:
            starters[match.group(1).lower()] += 1
    repeated = sum(count for count in starters.values() if count >= REPEATED_STARTER_MIN)

    avg_words = sum(len(tokenize_words(bullet)) for bullet in bullets) / len(bullets) if bullets else 0.0
    long_bullets = max(0.0, (avg_words - LONG_BULLET_WORDS) / LONG_BULLET_WORDS)
    long_document = (len(text) - LONG_DOCUMENT_CHARS) / LONG_DOCUMENT_SPAN if len(text) > LONG_DOCUMENT_CHARS else 0.0

    raw = (
        0.15 * _clamp(repeated / max(1, len(bullets)))
        + 0.35 * _clamp(buzzword_count(text) / BUZZWORD_CAP)
        + 0.25 * _clamp(long_bullets)
        + 0.25 * _clamp(long_document)
    )
    return _clamp(raw)


def tool_first_bullets(markdown: str) -> list[str]:
    offenders: list[str] = []
    for line in non_empty_lines(markdown):
        if not line.startswith("- "):
            continue
        match = _FIRST_WORD_RE.match(line[2:].strip())
        if match and match.group(1).lower() in TOOL_KEYWORDS:
            offenders.append(line[:_SNIPPET_CHARS])
    return offenders[:TOOL_FIRST_EXAMPLES]


def outcome_clarity(markdown: str) -> float:
    bullets = bullet_lines(markdown)
    if not bullets:
        return DEFAULT_OUTCOME_CLARITY
    with_outcomes = 0
    for bullet in bullets:
        lowered = bullet.lower()
        if _METRIC_RE.search(bullet) or any(verb in lowered for verb in _OUTCOME_VERBS):
            with_outcomes += 1
    return with_outcomes / len(bullets)


def section_structure_score(markdown: str, sections: Mapping[str, str] | None = None) -> float:
    if sections is None:
        sections = split_sections(markdown)
    present = {name.upper() for name in sections}
    return sum(1 for name in REQUIRED_SECTIONS if name in present) / len(REQUIRED_SECTIONS)


def formatting_clarity_score(markdown: str) -> float:
    text = markdown or ""
    if _PIPE_ROW_RE.search(text) and _PIPE_SEPARATOR_RE.search(text):
        return TABLE_FORMATTING_SCORE
    if _HTML_TABLE_RE.search(text):
        return TABLE_FORMATTING_SCORE
    return CLEAN_FORMATTING_SCORE


def consistency_score(markdown: str) -> float:
    # Experience entries are "### Title | Company | Dates".
    headers = [line for line in non_empty_lines(markdown) if line.startswith("### ") and "|" in line]
    if not headers:
        return DEFAULT_CONSISTENCY
    complete = sum(1 for header in headers if len(header.split("|")) >= 3)
    return complete / len(headers)


def semantic_skill_match(markdown: str, target_keywords: Iterable[str]) -> float:
    keywords = dedupe_keywords(target_keywords)
    if not keywords:
        return DEFAULT_SEMANTIC_MATCH
    return sum(1 for keyword in keywords if includes_keyword(markdown, keyword)) / len(keywords)


def role_alignment(markdown: str, job_description: str, sections: Mapping[str, str] | None = None) -> float:
    if sections is None:
        sections = split_sections(markdown)
    jd_words = tokenize_words(job_description)[:ROLE_ALIGNMENT_JD_WORDS]
    summary_words = set(tokenize_words(sections.get("SUMMARY", "")))
    overlap = sum(1 for word in jd_words if word in summary_words)
    return _clamp(overlap / max(1, min(ROLE_ALIGNMENT_MIN_OVERLAP, len(jd_words))))
