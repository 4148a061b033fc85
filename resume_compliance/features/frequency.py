from __future__ import annotations

from typing import Mapping

from resume_compliance.keywords import KeywordProfile, count_keyword_occurrences
from resume_compliance.normalize import DEFAULT_SECTION
from resume_compliance.schemas import ComplianceIssue

VALIDATOR = "keyword_frequency"
MAX_PER_SECTION = 1


def check_keyword_frequency(
    markdown: str,
    sections: Mapping[str, str],
    keyword: str,
    profile: KeywordProfile,
) -> list[ComplianceIssue]:
    issues: list[ComplianceIssue] = []
    allowed = profile.allowed_frequency

    global_count = count_keyword_occurrences(markdown, keyword)
    if global_count > allowed:
        issues.append(
            ComplianceIssue(
                severity="hard",
                validator=VALIDATOR,
                message=f'"{keyword}" appears {global_count} times (max {allowed}).',
                details={"keyword": keyword, "count": global_count, "max": allowed},
            )
        )

    for section, body in sections.items():
        if section == DEFAULT_SECTION:
            continue
        section_count = count_keyword_occurrences(body, keyword)
        if section_count > MAX_PER_SECTION:
            issues.append(
                ComplianceIssue(
                    severity="hard",
                    validator=VALIDATOR,
                    message=f'"{keyword}" repeats in {section} ({section_count} times).',
                    details={"keyword": keyword, "section": section, "count": section_count, "max": MAX_PER_SECTION},
                )
            )
    return issues
