from __future__ import annotations

import math
from typing import Iterable, Mapping

from resume_compliance.keywords import dedupe_keywords
from resume_compliance.normalize import split_sections
from resume_compliance.schemas import ComplianceIssue, DualScoringReport, RiskTier, ScoreFactor

from .heuristics import (
    BUZZWORD_CAP,
    buzzword_count,
    consistency_score,
    formatting_clarity_score,
    outcome_clarity,
    robotic_language_score,
    role_alignment,
    section_structure_score,
    semantic_skill_match,
    tool_first_bullets,
)

KEYWORD_LOAD_FREE = 18
KEYWORD_LOAD_SPAN = 30
TOOL_FIRST_PENALTY = 0.15

_VERDICTS: dict[RiskTier, tuple[str, str]] = {
    "Low": ("Strong resume", "ATS-safe with high recruiter trust. No over-optimization detected."),
    "Medium": (
        "Good but needs cleanup",
        "Solid structure, but a few risk patterns need cleanup for recruiter trust.",
    ),
    "High": (
        "High risk resume",
        "Multiple compliance risks detected; rewrite required before using this resume.",
    ),
}


def _percent(value: float) -> int:
    # Half-up rounding, clamped to the 0..100 factor scale.
    return max(0, min(100, math.floor(value * 100 + 0.5)))


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def weighted_total(factors: list[ScoreFactor]) -> int:
    total = sum(factor.score * factor.weight / 100 for factor in factors)
    return max(0, min(100, math.floor(total + 0.5)))


def risk_tier(hard_count: int, recruiter_score: int) -> RiskTier:
    if hard_count >= 2 or recruiter_score < 60:
        return "High"
    if hard_count == 1 or recruiter_score < 75:
        return "Medium"
    return "Low"


def build_ats_factors(
    markdown: str,
    job_description: str,
    target_keywords: list[str],
    sections: Mapping[str, str] | None = None,
) -> list[ScoreFactor]:
    if sections is None:
        sections = split_sections(markdown)
    semantic = semantic_skill_match(markdown, target_keywords)
    return [
        ScoreFactor(factor="Semantic skill match", weight=30, score=_percent(semantic)),
        ScoreFactor(factor="Role alignment", weight=20, score=_percent(role_alignment(markdown, job_description, sections))),
        ScoreFactor(factor="Section structure", weight=15, score=_percent(section_structure_score(markdown, sections))),
        ScoreFactor(factor="Keyword presence (non-repetitive)", weight=15, score=_percent(_clamp(semantic * 0.9 + 0.1))),
        ScoreFactor(factor="Formatting clarity", weight=10, score=_percent(formatting_clarity_score(markdown))),
        ScoreFactor(factor="Consistency", weight=10, score=_percent(consistency_score(markdown))),
    ]


def build_recruiter_factors(markdown: str, keyword_count: int, hard_count: int) -> list[ScoreFactor]:
    tool_first = bool(tool_first_bullets(markdown))
    keyword_load = max(0.0, (keyword_count - KEYWORD_LOAD_FREE) / KEYWORD_LOAD_SPAN)

    credibility = 1 - min(1.0, hard_count / 4)
    readability = 1 - robotic_language_score(markdown)
    believability = 1 - min(1.0, (TOOL_FIRST_PENALTY if tool_first else 0.0) + keyword_load)
    no_buzzwords = 1 - min(1.0, buzzword_count(markdown) / BUZZWORD_CAP)
    defensibility = 1 - min(1.0, hard_count / 6)

    return [
        ScoreFactor(factor="Credibility", weight=30, score=_percent(credibility)),
        ScoreFactor(factor="Readability", weight=20, score=_percent(readability)),
        ScoreFactor(factor="Outcome clarity", weight=20, score=_percent(outcome_clarity(markdown))),
        ScoreFactor(factor="Skill believability", weight=15, score=_percent(believability)),
        ScoreFactor(factor="No buzzwords", weight=10, score=_percent(no_buzzwords)),
        ScoreFactor(factor="Interview defensibility", weight=5, score=_percent(defensibility)),
    ]


def build_dual_scoring(
    markdown: str,
    job_description: str,
    target_keywords: Iterable[str],
    issues: Iterable[ComplianceIssue],
    sections: Mapping[str, str] | None = None,
) -> DualScoringReport:
    """Aggregate heuristics into the ATS and recruiter composites plus a risk verdict."""
    keywords = dedupe_keywords(target_keywords)
    hard_count = sum(1 for issue in issues if issue.severity == "hard")

    ats_factors = build_ats_factors(markdown, job_description, keywords, sections)
    recruiter_factors = build_recruiter_factors(markdown, len(keywords), hard_count)
    ats_score = weighted_total(ats_factors)
    recruiter_score = weighted_total(recruiter_factors)

    risk = risk_tier(hard_count, recruiter_score)
    verdict, summary = _VERDICTS[risk]
    return DualScoringReport(
        ats_score=ats_score,
        recruiter_score=recruiter_score,
        ats_factors=ats_factors,
        recruiter_factors=recruiter_factors,
        verdict=verdict,
        risk=risk,
        summary=summary,
    )
