from __future__ import annotations

import re

_RECOGNIZED_SECTIONS = frozenset({"summary", "experience", "skills", "education"})
_LEADING_HASHES_RE = re.compile(r"^#+\s*")
_TITLE_RE = re.compile(r"^#\s+")
_CANONICAL_HEADINGS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^##[ \t]+(summary)[ \t]*$", re.IGNORECASE | re.MULTILINE), "SUMMARY"),
    (re.compile(r"^##[ \t]+(experiences?)[ \t]*$", re.IGNORECASE | re.MULTILINE), "EXPERIENCE"),
    (re.compile(r"^##[ \t]+(experices)[ \t]*$", re.IGNORECASE | re.MULTILINE), "EXPERIENCE"),
    (re.compile(r"^##[ \t]+(skills?)[ \t]*$", re.IGNORECASE | re.MULTILINE), "SKILLS"),
    (re.compile(r"^##[ \t]+(education)[ \t]*$", re.IGNORECASE | re.MULTILINE), "EDUCATION"),
)
_SECTION_GAP_RE = re.compile(r"([^\n])\n(##\s+)")
_ENTRY_GAP_RE = re.compile(r"([^\n])\n(###\s+)")


def _inline_section(line: str) -> str | None:
    idx = line.find("##")
    if idx == -1:
        return None
    words = line[idx + 2 :].split()
    if not words or words[0].lower() not in _RECOGNIZED_SECTIONS:
        return None
    return f"## {words[0].upper()}"


def normalize_ats_resume_markdown(markdown: str | None) -> str:
    """Canonicalise the headings of a model-written resume.

    Drops a leading ``# Name`` title, upper-cases the four standard ``##``
    headings (tolerating plurals and one common misspelling) and keeps a
    blank line before every ``##``/``###`` heading.
    """
    lines = (markdown or "").replace("\r\n", "\n").split("\n")

    first = next((index for index, line in enumerate(lines) if line.strip()), None)
    if first is not None:
        stripped = lines[first].strip()
        inline = _inline_section(_LEADING_HASHES_RE.sub("", stripped).strip())
        if inline:
            lines[first] = inline
        elif _TITLE_RE.match(stripped):
            del lines[first]

    out = "\n".join(lines)
    for pattern, heading in _CANONICAL_HEADINGS:
        out = pattern.sub(f"## {heading}", out)
    out = _SECTION_GAP_RE.sub(r"\1\n\n\2", out)
    out = _ENTRY_GAP_RE.sub(r"\1\n\n\2", out)
    return out.strip()
