from __future__ import annotations

import re
from typing import Iterable

from resume_compliance.keywords import includes_keyword
from resume_compliance.normalize import normalize_line

MUST_INCLUDE_LIMIT = 12

JD_SKILL_CANDIDATES = (
    "Excel",
    "Google Sheets",
    "Power BI",
    "Tableau",
    "SQL",
    "Python",
    "AWS",
    "Amazon Web Services",
    "Azure",
    "Microsoft Azure",
    "GCP",
    "Google Cloud Platform",
    "JavaScript",
    "TypeScript",
    "React",
    "Node",
    "Docker",
    "Kubernetes",
    "Git",
    "Jira",
    "Agile",
    "Scrum",
    "ETL",
    "CI/CD",
)

_MIN_YEARS_PATTERNS = (
    re.compile(r"\bminimum\s+of\s+(\d{1,2})\s*\+?\s*(?:years?|yrs?)\b", re.IGNORECASE),
    re.compile(r"\b(\d{1,2})\s*\+?\s*(?:years?|yrs?)\s+(?:of\s+)?experience\b", re.IGNORECASE),
    re.compile(r"\brequires?\s+(\d{1,2})\s*\+?\s*(?:years?|yrs?)\b", re.IGNORECASE),
)


def keyword_coverage(markdown: str, keywords: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split ``keywords`` into those present in ``markdown`` and those still missing."""
    present: list[str] = []
    missing: list[str] = []
    for keyword in keywords:
        if not keyword:
            continue
        (present if includes_keyword(markdown, keyword) else missing).append(keyword)
    return present, missing


def must_include_skills(resume_text: str, job_description: str) -> list[str]:
    skills: list[str] = []
    seen: set[str] = set()
    for skill in JD_SKILL_CANDIDATES:
        key = skill.lower()
        if key in seen:
            continue
        if not includes_keyword(job_description, skill) or not includes_keyword(resume_text, skill):
            continue
        seen.add(key)
        skills.append(skill)
    return skills[:MUST_INCLUDE_LIMIT]


def extract_job_min_years(job_description: str) -> int | None:
    text = normalize_line(job_description or "")
    if not text:
        return None
    for pattern in _MIN_YEARS_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        years = int(match.group(1))
        if 0 < years < 50:
            return years
    return None
