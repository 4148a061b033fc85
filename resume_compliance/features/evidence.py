from __future__ import annotations

import re
from typing import Callable

from resume_compliance.keywords import HIGH_RISK_KEYWORDS, KeywordProfile, ProofRequirement, includes_keyword
from resume_compliance.normalize import non_empty_lines, tokenize_words
from resume_compliance.schemas import ComplianceIssue

EVIDENCE_VALIDATOR = "experience_evidence"
RISKY_VALIDATOR = "remove_risky_keywords"
SNIPPET_CHARS = 160

_EXCEL_PROOF_HINTS = (
    "report",
    "reporting",
    "dashboard",
    "model",
    "modeling",
    "analysis",
    "analyzing",
    "pivot",
    "vlookup",
    "lookup",
    "forecast",
    "tracking",
)
_GENERIC_PROOF_HINTS = ("spreadsheet", "report", "dashboard", "model", "analysis", "tracking")
_OWNERSHIP_HINTS = ("owned", "accountable", "responsible for", "led", "managed", "end-to-end", "oversaw")
_INVENTORY_HINTS = (
    "inventory",
    "stock",
    "supply",
    "warehouse",
    "replenish",
    "replenishment",
    "demand planning",
    "procurement",
)
_CX_HINTS = ("customer", "client", "support", "service", "satisfaction", "nps", "csat", "complaint", "tickets", "calls")

_LARGE_NUMBER_RE = re.compile(r"\b(\d{1,3}(?:,\d{3})+|\d{4,})\b")
_SCALE_WORD_RE = re.compile(r"\b(million|billion|thousand|tb|gb|records|rows|transactions)\b", re.IGNORECASE)


def _has_any(lowered: str, hints: tuple[str, ...]) -> bool:
    return any(hint in lowered for hint in hints)


def has_excel_proof(resume_text: str) -> bool:
    lowered = (resume_text or "").lower()
    if includes_keyword(lowered, "Excel"):
        return _has_any(lowered, _EXCEL_PROOF_HINTS)
    return _has_any(lowered, _GENERIC_PROOF_HINTS)


def has_scale_proof(resume_text: str) -> bool:
    text = resume_text or ""
    return bool(_LARGE_NUMBER_RE.search(text) or _SCALE_WORD_RE.search(text))


def has_ownership_proof(resume_text: str) -> bool:
    lowered = (resume_text or "").lower()
    return _has_any(lowered, _INVENTORY_HINTS) and _has_any(lowered, _OWNERSHIP_HINTS)


def has_cx_proof(resume_text: str) -> bool:
    return _has_any((resume_text or "").lower(), _CX_HINTS)


PROOF_PREDICATES: dict[ProofRequirement, Callable[[str], bool]] = {
    "excel_proof": has_excel_proof,
    "scale_proof": has_scale_proof,
    "ownership_proof": has_ownership_proof,
    "cx_proof": has_cx_proof,
}


def proof_satisfied(keyword: str, resume_text: str) -> bool:
    """Run every proof predicate the high-risk table lists for ``keyword``.

    Keywords without a rule are treated as proven.
    """
    rule = HIGH_RISK_KEYWORDS.get((keyword or "").strip().lower())
    if rule is None:
        return True
    return all(PROOF_PREDICATES[requirement](resume_text) for requirement in rule.requires)


def check_experience_evidence(
    markdown: str,
    original_resume_text: str,
    keyword: str,
    profile: KeywordProfile,
    *,
    remove_risky_keywords: bool = False,
) -> list[ComplianceIssue]:
    if not profile.requires_proof or not includes_keyword(markdown, keyword):
        return []

    issues: list[ComplianceIssue] = []
    has_direct = includes_keyword(original_resume_text, keyword)
    satisfied = proof_satisfied(keyword, original_resume_text)
    if not has_direct and not satisfied:
        issues.append(
            ComplianceIssue(
                severity="hard",
                validator=EVIDENCE_VALIDATOR,
                message=f'"{keyword}" is used but lacks evidence in the original resume.',
                details={"keyword": keyword},
            )
        )
    if remove_risky_keywords and profile.risk_level == "high" and not satisfied:
        issues.append(
            ComplianceIssue(
                severity="hard",
                validator=RISKY_VALIDATOR,
                message=f'"{keyword}" flagged as high-risk; replace with experience-based phrasing.',
                details={"keyword": keyword, "alternative": profile.alternative},
            )
        )
    return issues


def find_evidence_snippet(resume_text: str, keyword: str) -> str:
    key = (keyword or "").strip()
    if not key:
        return ""
    lines = non_empty_lines(resume_text)
    for line in lines:
        if includes_keyword(line, key):
            return line[:SNIPPET_CHARS]
    parts = tokenize_words(key)
    if parts:
        for line in lines:
            lowered = line.lower()
            if any(part in lowered for part in parts):
                return line[:SNIPPET_CHARS]
    return ""


def find_jd_snippet(job_description: str, keyword: str) -> str:
    for line in non_empty_lines(job_description):
        if includes_keyword(line, keyword):
            return line[:SNIPPET_CHARS]
    return ""
