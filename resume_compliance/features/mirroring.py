from __future__ import annotations

from dataclasses import dataclass

from resume_compliance.normalize import shingles, tokenize_words
from resume_compliance.schemas import ComplianceIssue

VALIDATOR = "jd_phrase_mirroring"
DEFAULT_THRESHOLD = 0.75
SHINGLE_SIZE = 7
TOKEN_CAP = 1600


@dataclass(frozen=True, slots=True)
class ShingleSimilarity:
    similarity: float
    intersection: int
    a_size: int
    b_size: int


def shingle_similarity(a: str, b: str, size: int = SHINGLE_SIZE, cap: int = TOKEN_CAP) -> ShingleSimilarity:
    """Share of common ``size``-word shingles, relative to the smaller shingle set."""
    a_words = tokenize_words(a)[:cap]
    b_words = tokenize_words(b)[:cap]
    if len(a_words) < size or len(b_words) < size:
        return ShingleSimilarity(similarity=0.0, intersection=0, a_size=0, b_size=0)

    a_set = shingles(a_words, size)
    b_set = shingles(b_words, size)
    intersection = len(a_set & b_set)
    denominator = max(1, min(len(a_set), len(b_set)))
    return ShingleSimilarity(
        similarity=intersection / denominator,
        intersection=intersection,
        a_size=len(a_set),
        b_size=len(b_set),
    )


def check_jd_mirroring(job_description: str, markdown: str, threshold: float = DEFAULT_THRESHOLD) -> ComplianceIssue | None:
    result = shingle_similarity(job_description, markdown)
    if result.similarity < threshold or result.intersection <= 0:
        return None
    return ComplianceIssue(
        severity="hard",
        validator=VALIDATOR,
        message=f"Detected likely JD phrase mirroring (similarity {result.similarity * 100:.0f}%).",
        details={
            "similarity": result.similarity,
            "threshold": threshold,
            "intersection": result.intersection,
            "n": SHINGLE_SIZE,
        },
    )
