from __future__ import annotations

import logging
from typing import Iterable

from resume_compliance.features import (
    DEFAULT_THRESHOLD,
    ROBOTIC_THRESHOLD,
    build_dual_scoring,
    check_experience_evidence,
    check_jd_mirroring,
    check_keyword_frequency,
    extract_job_min_years,
    find_evidence_snippet,
    find_jd_snippet,
    keyword_coverage,
    must_include_skills,
    proof_satisfied,
    robotic_language_score,
    tool_first_bullets,
)
from resume_compliance.keywords import (
    KeywordProfile,
    classify_keyword,
    count_keyword_occurrences,
    dedupe_keywords,
    includes_keyword,
)
from resume_compliance.normalize import split_sections
from resume_compliance.schemas import (
    ComplianceIssue,
    DualScoringReport,
    KeywordCoverageReport,
    KeywordJustification,
    ResumeComplianceReport,
)

logger = logging.getLogger(__name__)

_TEXT_SUMMARY_CHARS = 2000
_TEXT_EXPERIENCE_CHARS = 6000

_HIGH_RISK_NOTE = "High-risk term; rewrite recommended to preserve credibility and avoid over-optimization."
_ALIGNED_NOTE = "Used to support experience-based alignment. Kept within frequency limits to avoid keyword stuffing."
_NO_EVIDENCE_REASON = "No clear evidence found in resume experience"
_NOT_APPLICABLE_REASON = "Not applicable"


def _style_issues(markdown: str) -> list[ComplianceIssue]:
    issues: list[ComplianceIssue] = []
    robotic = robotic_language_score(markdown)
    if robotic >= ROBOTIC_THRESHOLD:
        issues.append(
            ComplianceIssue(
                severity="soft",
                validator="robotic_language_score",
                message=f"Language may feel templated or repetitive (score {robotic:.2f}).",
                details={"score": robotic, "threshold": ROBOTIC_THRESHOLD},
            )
        )
    offenders = tool_first_bullets(markdown)
    if offenders:
        issues.append(
            ComplianceIssue(
                severity="soft",
                validator="tool_first_sentence",
                message="Some bullets start with tools; move tools to the end of the sentence.",
                details={"examples": offenders},
            )
        )
    return issues


def _justify(
    keyword: str,
    profile: KeywordProfile,
    *,
    markdown: str,
    job_description: str,
    original_resume_text: str,
) -> KeywordJustification:
    jd_reference = find_jd_snippet(job_description, keyword)
    if not includes_keyword(markdown, keyword):
        return KeywordJustification(
            keyword=keyword,
            used=False,
            category=profile.category,
            risk_level=profile.risk_level,
            allowed_frequency=profile.allowed_frequency,
            requires_proof=profile.requires_proof,
            frequency=0,
            job_description_reference=jd_reference,
            reason=_NO_EVIDENCE_REASON if profile.requires_proof else _NOT_APPLICABLE_REASON,
            alternative_used=profile.alternative,
        )

    unproven_high_risk = profile.risk_level == "high" and not proof_satisfied(keyword, original_resume_text)
    return KeywordJustification(
        keyword=keyword,
        used=True,
        category=profile.category,
        risk_level=profile.risk_level,
        allowed_frequency=profile.allowed_frequency,
        requires_proof=profile.requires_proof,
        frequency=count_keyword_occurrences(markdown, keyword),
        resume_evidence=find_evidence_snippet(original_resume_text, keyword),
        job_description_reference=jd_reference,
        justification=_HIGH_RISK_NOTE if unproven_high_risk else _ALIGNED_NOTE,
    )


def validate_resume_markdown(
    markdown: str | None,
    job_description: str | None,
    original_resume_text: str | None,
    target_keywords: Iterable[str] | None,
    *,
    remove_risky_keywords: bool = False,
    jd_mirroring_threshold: float | None = None,
) -> ResumeComplianceReport:
    """Check a rewritten resume against its source resume and the target job.

    Produces hard issues for keyword stuffing, unsupported claims and job
    description mirroring, soft issues for stylistic problems, one
    justification per distinct target keyword, and the ATS/recruiter dual
    score. Inputs are never modified and malformed input never raises.
    """
    markdown = markdown or ""
    job_description = job_description or ""
    original_resume_text = original_resume_text or ""
    threshold = DEFAULT_THRESHOLD if jd_mirroring_threshold is None else float(jd_mirroring_threshold)

    keywords = dedupe_keywords(target_keywords)
    profiles = {keyword.lower(): classify_keyword(keyword) for keyword in keywords}
    sections = split_sections(markdown)

    issues: list[ComplianceIssue] = []
    for keyword in keywords:
        issues.extend(check_keyword_frequency(markdown, sections, keyword, profiles[keyword.lower()]))
    for keyword in keywords:
        issues.extend(
            check_experience_evidence(
                markdown,
                original_resume_text,
                keyword,
                profiles[keyword.lower()],
                remove_risky_keywords=remove_risky_keywords,
            )
        )
    mirroring = check_jd_mirroring(job_description, markdown, threshold)
    if mirroring is not None:
        issues.append(mirroring)
    issues.extend(_style_issues(markdown))

    justifications = [
        _justify(
            keyword,
            profiles[keyword.lower()],
            markdown=markdown,
            job_description=job_description,
            original_resume_text=original_resume_text,
        )
        for keyword in keywords
    ]
    scoring = build_dual_scoring(markdown, job_description, keywords, issues, sections)

    logger.info(
        "resume_compliance_report keywords=%s hard=%s soft=%s ats=%s recruiter=%s risk=%s",
        len(keywords),
        sum(1 for issue in issues if issue.severity == "hard"),
        sum(1 for issue in issues if issue.severity == "soft"),
        scoring.ats_score,
        scoring.recruiter_score,
        scoring.risk,
    )
    return ResumeComplianceReport(issues=issues, keyword_justifications=justifications, scoring=scoring)


def build_dual_scoring_from_text(resume_text: str | None, job_description: str | None) -> DualScoringReport:
    """Score plain resume text by wrapping it in the four standard sections."""
    text = resume_text or ""
    markdown = (
        f"## SUMMARY\n{text[:_TEXT_SUMMARY_CHARS]}\n\n"
        f"## EXPERIENCE\n{text[_TEXT_SUMMARY_CHARS:_TEXT_EXPERIENCE_CHARS]}\n\n"
        "## SKILLS\n\n"
        "## EDUCATION\n"
    )
    report = validate_resume_markdown(markdown, job_description or "", text, [])
    return report.scoring


def build_keyword_coverage(
    markdown: str | None,
    job_description: str | None,
    original_resume_text: str | None,
    target_keywords: Iterable[str] | None,
) -> KeywordCoverageReport:
    """Report which target keywords the rewrite covers and what the job asks for.

    Must-include skills come from the original resume when one is given,
    otherwise from the rewrite itself.
    """
    markdown = markdown or ""
    job_description = job_description or ""
    source_text = original_resume_text or markdown

    present, still_missing = keyword_coverage(markdown, dedupe_keywords(target_keywords))
    report = KeywordCoverageReport(
        present=present,
        still_missing=still_missing,
        must_include_skills=must_include_skills(source_text, job_description),
        min_years=extract_job_min_years(job_description),
    )
    logger.info(
        "keyword_coverage_report present=%s missing=%s must_include=%s min_years=%s",
        len(report.present),
        len(report.still_missing),
        len(report.must_include_skills),
        report.min_years,
    )
    return report
