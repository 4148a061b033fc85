from .markdown import normalize_ats_resume_markdown
from .sections import DEFAULT_SECTION, REQUIRED_SECTIONS, split_sections
from .utils import (
    bullet_lines,
    non_empty_lines,
    normalize_line,
    normalize_text,
    shingles,
    split_lines,
    tokenize_words,
)

__all__ = [
    "DEFAULT_SECTION",
    "REQUIRED_SECTIONS",
    "split_sections",
    "normalize_ats_resume_markdown",
    "bullet_lines",
    "non_empty_lines",
    "normalize_line",
    "normalize_text",
    "shingles",
    "split_lines",
    "tokenize_words",
]
