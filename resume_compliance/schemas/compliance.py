from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from resume_compliance.keywords.classifier import KeywordCategory, RiskLevel

Severity = Literal["hard", "soft"]
RiskTier = Literal["Low", "Medium", "High"]

MAX_TEXT_CHARS = 50000
MAX_KEYWORDS = 200


class ComplianceIssue(BaseModel):
    severity: Severity
    validator: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class KeywordJustification(BaseModel):
    keyword: str
    used: bool
    category: KeywordCategory
    risk_level: RiskLevel
    allowed_frequency: int = Field(ge=1)
    requires_proof: bool
    frequency: int = Field(ge=0)
    resume_evidence: str = ""
    job_description_reference: str = ""
    justification: str = ""
    reason: str | None = None
    alternative_used: str | None = None


class ScoreFactor(BaseModel):
    factor: str
    weight: int = Field(ge=0, le=100)
    score: int = Field(ge=0, le=100)


class DualScoringReport(BaseModel):
    ats_score: int = Field(ge=0, le=100)
    recruiter_score: int = Field(ge=0, le=100)
    ats_factors: list[ScoreFactor]
    recruiter_factors: list[ScoreFactor]
    verdict: str
    risk: RiskTier
    summary: str


class ResumeComplianceReport(BaseModel):
    issues: list[ComplianceIssue] = Field(default_factory=list)
    keyword_justifications: list[KeywordJustification] = Field(default_factory=list)
    scoring: DualScoringReport


class ComplianceRequest(BaseModel):
    markdown: str = Field(default="", max_length=MAX_TEXT_CHARS)
    job_description: str = Field(default="", max_length=MAX_TEXT_CHARS)
    original_resume_text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    target_keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)
    remove_risky_keywords: bool = False
    jd_mirroring_threshold: float | None = Field(default=None, gt=0.0, le=1.0)
    normalize_markdown: bool = False


class TextScoringRequest(BaseModel):
    resume_text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    job_description: str = Field(default="", max_length=MAX_TEXT_CHARS)


class KeywordListRequest(BaseModel):
    keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)


class KeywordListResponse(BaseModel):
    keywords: list[str]


class CoverageRequest(BaseModel):
    markdown: str = Field(default="", max_length=MAX_TEXT_CHARS)
    job_description: str = Field(default="", max_length=MAX_TEXT_CHARS)
    original_resume_text: str = Field(default="", max_length=MAX_TEXT_CHARS)
    target_keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)


class KeywordCoverageReport(BaseModel):
    present: list[str] = Field(default_factory=list)
    still_missing: list[str] = Field(default_factory=list)
    must_include_skills: list[str] = Field(default_factory=list)
    min_years: int | None = None
