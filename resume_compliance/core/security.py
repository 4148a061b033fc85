from __future__ import annotations

import hmac

from fastapi import HTTPException, status

from resume_compliance.core.config import settings

_DEFAULT_LANG = "en"
_AUTH_MESSAGES = {
    "en": "A valid X-API-Key header is required to run resume compliance checks.",
    "de": "Für die Lebenslauf-Prüfung ist ein gültiger X-API-Key-Header erforderlich.",
    "fr": "Un en-tête X-API-Key valide est requis pour vérifier un CV.",
    "es": "Se requiere una cabecera X-API-Key válida para revisar un currículum.",
}


def _primary_lang(accept_language: str | None) -> str:
    # "de-CH,de;q=0.9" -> "de"
    first = (accept_language or "").split(",")[0].split(";")[0].strip().lower()
    return first.split("-")[0] or _DEFAULT_LANG


def auth_error_message(accept_language: str | None) -> str:
    return _AUTH_MESSAGES.get(_primary_lang(accept_language), _AUTH_MESSAGES[_DEFAULT_LANG])


def check_api_key(x_api_key: str | None, accept_language: str | None = None) -> None:
    """Reject the request unless it carries the configured key; no key configured means open access."""
    expected = settings.api_key
    if not expected:
        return
    if not hmac.compare_digest((x_api_key or "").encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=auth_error_message(accept_language),
        )
