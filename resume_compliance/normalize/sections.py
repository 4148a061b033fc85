from __future__ import annotations

import re
from functools import reduce
from types import MappingProxyType
from typing import Mapping

from .utils import split_lines

DEFAULT_SECTION = "OTHER"
REQUIRED_SECTIONS = ("SUMMARY", "EXPERIENCE", "SKILLS", "EDUCATION")

_HEADING_RE = re.compile(r"^##\s+(.+?)\s*$")

# (line groups per heading, current heading, pending body lines)
_State = tuple[dict[str, list[list[str]]], str, list[str]]


def _step(state: _State, line: str) -> _State:
    groups, current, pending = state
    match = _HEADING_RE.match(line)
    if match:
        groups.setdefault(current, []).append(pending)
        return groups, match.group(1).strip().upper(), []
    pending.append(line)
    return state


def _join_groups(groups: list[list[str]]) -> str:
    # A repeated heading appends its lines; an empty repeat leaves the body as is.
    parts: list[str] = []
    has_text = False
    for index, lines in enumerate(groups):
        if index and not lines:
            continue
        chunk = "\n".join(lines)
        if has_text:
            parts.append("\n")
        parts.append(chunk)
        has_text = has_text or bool(chunk)
    return "".join(parts)


def split_sections(markdown: str | None) -> Mapping[str, str]:
    """Split resume markdown on ``## Heading`` lines.

    Returns a read-only, insertion-ordered mapping of upper-cased heading to
    body text. Lines before the first heading land in ``OTHER``; a repeated
    heading appends to the body collected so far.
    """
    initial: _State = ({}, DEFAULT_SECTION, [])
    groups, current, pending = reduce(_step, split_lines(markdown), initial)
    groups.setdefault(current, []).append(pending)
    return MappingProxyType({name: _join_groups(chunks) for name, chunks in groups.items()})
