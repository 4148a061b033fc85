from .coverage import extract_job_min_years, keyword_coverage, must_include_skills
from .evidence import (
    check_experience_evidence,
    find_evidence_snippet,
    find_jd_snippet,
    has_cx_proof,
    has_excel_proof,
    has_ownership_proof,
    has_scale_proof,
    proof_satisfied,
)
from .frequency import check_keyword_frequency
from .heuristics import (
    ROBOTIC_THRESHOLD,
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
from .mirroring import DEFAULT_THRESHOLD, ShingleSimilarity, check_jd_mirroring, shingle_similarity
from .scoring import build_dual_scoring, risk_tier, weighted_total

__all__ = [
    "extract_job_min_years",
    "keyword_coverage",
    "must_include_skills",
    "check_experience_evidence",
    "find_evidence_snippet",
    "find_jd_snippet",
    "has_cx_proof",
    "has_excel_proof",
    "has_ownership_proof",
    "has_scale_proof",
    "proof_satisfied",
    "check_keyword_frequency",
    "ROBOTIC_THRESHOLD",
    "buzzword_count",
    "consistency_score",
    "formatting_clarity_score",
    "outcome_clarity",
    "robotic_language_score",
    "role_alignment",
    "section_structure_score",
    "semantic_skill_match",
    "tool_first_bullets",
    "DEFAULT_THRESHOLD",
    "ShingleSimilarity",
    "check_jd_mirroring",
    "shingle_similarity",
    "build_dual_scoring",
    "risk_tier",
    "weighted_total",
]
