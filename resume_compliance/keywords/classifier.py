from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

KeywordCategory = Literal["tool", "functional", "outcome", "unknown"]
RiskLevel = Literal["low", "medium", "high"]
ProofRequirement = Literal["excel_proof", "scale_proof", "ownership_proof", "cx_proof"]

TOOL_KEYWORDS: frozenset[str] = frozenset(
    {
        "excel",
        "google sheets",
        "power bi",
        "tableau",
        "sql",
        "python",
        "aws",
        "amazon web services",
        "azure",
        "microsoft azure",
        "gcp",
        "google cloud platform",
        "javascript",
        "typescript",
        "react",
        "node",
        "docker",
        "kubernetes",
        "git",
        "jira",
    }
)

BUZZWORDS: tuple[str, ...] = (
    "synergy",
    "dynamic",
    "results-driven",
    "self-starter",
    "go-getter",
    "detail-oriented",
    "hardworking",
    "fast-paced",
    "thought leader",
    "rockstar",
    "ninja",
    "guru",
    "passionate",
)


@dataclass(frozen=True)
class HighRiskRule:
    alternative: str
    requires: tuple[ProofRequirement, ...]


HIGH_RISK_KEYWORDS: Mapping[str, HighRiskRule] = MappingProxyType(
    {
        "excel": HighRiskRule("data analysis tools", ("excel_proof",)),
        "large data sets": HighRiskRule("operational data", ("scale_proof",)),
        "inventory management": HighRiskRule("stock tracking and supply coordination", ("ownership_proof",)),
        "customer experience": HighRiskRule("customer interactions and service delivery", ("cx_proof",)),
    }
)

_OUTCOME_HINTS = (
    "improvement",
    "optimization",
    "growth",
    "reduction",
    "increase",
    "efficiency",
    "impact",
    "revenue",
    "cost",
    "conversion",
)
_FUNCTIONAL_HINTS = ("management", "strategy", "leadership", "stakeholder")


@dataclass(frozen=True)
class KeywordProfile:
    category: KeywordCategory
    risk_level: RiskLevel
    allowed_frequency: int
    requires_proof: bool
    alternative: str | None = None
    proof_requirements: tuple[ProofRequirement, ...] = field(default_factory=tuple)


def classify_keyword(keyword: str | None) -> KeywordProfile:
    key = (keyword or "").strip().lower()
    if not key:
        return KeywordProfile(category="unknown", risk_level="low", allowed_frequency=1, requires_proof=False)

    rule = HIGH_RISK_KEYWORDS.get(key)
    if rule is not None:
        is_tool = key in TOOL_KEYWORDS
        if is_tool:
            category: KeywordCategory = "tool"
        elif "management" in key:
            category = "functional"
        else:
            category = "unknown"
        return KeywordProfile(
            category=category,
            risk_level="high",
            allowed_frequency=2 if is_tool else 1,
            requires_proof=True,
            alternative=rule.alternative,
            proof_requirements=rule.requires,
        )

    if key in TOOL_KEYWORDS:
        return KeywordProfile(category="tool", risk_level="low", allowed_frequency=2, requires_proof=True)
    if any(hint in key for hint in _OUTCOME_HINTS):
        return KeywordProfile(category="outcome", risk_level="medium", allowed_frequency=1, requires_proof=True)
    if any(hint in key for hint in _FUNCTIONAL_HINTS):
        return KeywordProfile(category="functional", risk_level="medium", allowed_frequency=1, requires_proof=True)
    return KeywordProfile(category="functional", risk_level="low", allowed_frequency=1, requires_proof=True)
