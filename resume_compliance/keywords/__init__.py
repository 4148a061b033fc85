from .classifier import (
    BUZZWORDS,
    HIGH_RISK_KEYWORDS,
    TOOL_KEYWORDS,
    HighRiskRule,
    KeywordCategory,
    KeywordProfile,
    ProofRequirement,
    RiskLevel,
    classify_keyword,
)
from .matcher import (
    count_keyword_occurrences,
    dedupe_keywords,
    includes_keyword,
    keyword_variants,
    normalize_keyword,
    prioritize_keywords,
)

__all__ = [
    "BUZZWORDS",
    "HIGH_RISK_KEYWORDS",
    "TOOL_KEYWORDS",
    "HighRiskRule",
    "KeywordCategory",
    "KeywordProfile",
    "ProofRequirement",
    "RiskLevel",
    "classify_keyword",
    "count_keyword_occurrences",
    "dedupe_keywords",
    "includes_keyword",
    "keyword_variants",
    "normalize_keyword",
    "prioritize_keywords",
]
