from .compliance import (
    ComplianceIssue,
    ComplianceRequest,
    CoverageRequest,
    DualScoringReport,
    KeywordCoverageReport,
    KeywordJustification,
    KeywordListRequest,
    KeywordListResponse,
    ResumeComplianceReport,
    RiskTier,
    ScoreFactor,
    Severity,
    TextScoringRequest,
)

__all__ = [
    "ComplianceIssue",
    "ComplianceRequest",
    "CoverageRequest",
    "DualScoringReport",
    "KeywordCoverageReport",
    "KeywordJustification",
    "KeywordListRequest",
    "KeywordListResponse",
    "ResumeComplianceReport",
    "RiskTier",
    "ScoreFactor",
    "Severity",
    "TextScoringRequest",
]
