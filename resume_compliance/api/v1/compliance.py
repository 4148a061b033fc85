import logging

from fastapi import APIRouter, Depends, Header, Request

from resume_compliance.core.config import settings
from resume_compliance.core.rate_limit import rate_limit
from resume_compliance.core.security import check_api_key
from resume_compliance.keywords import prioritize_keywords
from resume_compliance.normalize import normalize_ats_resume_markdown
from resume_compliance.schemas import (
    ComplianceRequest,
    CoverageRequest,
    DualScoringReport,
    KeywordCoverageReport,
    KeywordListRequest,
    KeywordListResponse,
    ResumeComplianceReport,
    TextScoringRequest,
)
from resume_compliance.services.compliance_service import (
    build_dual_scoring_from_text,
    build_keyword_coverage,
    validate_resume_markdown,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    accept_language: str | None = Header(default=None, alias="Accept-Language"),
):
    check_api_key(x_api_key, accept_language)


def _clip(text: str) -> str:
    return text[: settings.max_text_chars]


@router.post("/compliance/validate", response_model=ResumeComplianceReport)
@rate_limit()
def compliance_validate(request: Request, payload: ComplianceRequest, _: None = Depends(_auth)):
    markdown = _clip(payload.markdown)
    if payload.normalize_markdown:
        markdown = normalize_ats_resume_markdown(markdown)
    threshold = payload.jd_mirroring_threshold
    if threshold is None:
        threshold = settings.jd_mirroring_threshold
    logger.debug(
        "compliance_validate_request path=%s keywords=%s normalize=%s",
        request.url.path,
        len(payload.target_keywords),
        payload.normalize_markdown,
    )
    return validate_resume_markdown(
        markdown,
        _clip(payload.job_description),
        _clip(payload.original_resume_text),
        payload.target_keywords,
        remove_risky_keywords=payload.remove_risky_keywords,
        jd_mirroring_threshold=threshold,
    )


@router.post("/compliance/score-text", response_model=DualScoringReport)
@rate_limit()
def compliance_score_text(request: Request, payload: TextScoringRequest, _: None = Depends(_auth)):
    _ = request
    return build_dual_scoring_from_text(_clip(payload.resume_text), _clip(payload.job_description))


@router.post("/compliance/keywords/prioritize", response_model=KeywordListResponse)
@rate_limit()
def compliance_prioritize_keywords(request: Request, payload: KeywordListRequest, _: None = Depends(_auth)):
    _ = request
    return KeywordListResponse(keywords=prioritize_keywords(payload.keywords))


@router.post("/compliance/coverage", response_model=KeywordCoverageReport)
@rate_limit()
def compliance_keyword_coverage(request: Request, payload: CoverageRequest, _: None = Depends(_auth)):
    _ = request
    return build_keyword_coverage(
        _clip(payload.markdown),
        _clip(payload.job_description),
        _clip(payload.original_resume_text),
        payload.target_keywords,
    )
