from __future__ import annotations

from resume_compliance.core.config import settings


def cors_allowed_origins() -> list[str]:
    return list(settings.cors_allowed_origins)
