"""Display labels for status and error codes.

Pure lookups used at the presentation boundary. Codes are the canonical
values; labels exist in French (default) and English. Unknown codes are
returned verbatim so that a new status never breaks a page.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

DEFAULT_LOCALE = "fr"
MISSING = "—"

# Sentinel shown in a schedule slot with no artist assigned
EMPTY = "EMPTY"

STATUS_LABELS: Mapping[str, Mapping[str, str]] = {
    "fr": {
        "OPEN": "Ouvert",
        "PENDING": "En attente",
        "ACCEPTED": "Accepté",
        "REJECTED": "Refusé",
        "CONFIRMED": "Confirmé",
        "DECLINED": "Refusé",
        "CANCELLED": "Annulé",
        EMPTY: "Aucun artiste",
    },
    "en": {
        "OPEN": "Open",
        "PENDING": "Pending",
        "ACCEPTED": "Accepted",
        "REJECTED": "Rejected",
        "CONFIRMED": "Confirmed",
        "DECLINED": "Declined",
        "CANCELLED": "Cancelled",
        EMPTY: "No artist",
    },
}

ERROR_LABELS: Mapping[str, Mapping[str, str]] = {
    "fr": {
        "INVALID_DATE": "Date invalide.",
        "INVALID_RANGE": "Période invalide.",
        "ILLEGAL_TRANSITION": "Changement de statut impossible.",
        "UNAUTHORIZED": "Action non autorisée.",
        "QUOTA_EXCEEDED": "Limite mensuelle d'événements atteinte.",
        "MODIFICATION_LIMIT_EXCEEDED": "Nombre de modifications épuisé.",
        "SERVER_ERROR": "Erreur serveur.",
    },
    "en": {
        "INVALID_DATE": "Invalid date.",
        "INVALID_RANGE": "Invalid period.",
        "ILLEGAL_TRANSITION": "This status change is not allowed.",
        "UNAUTHORIZED": "You are not allowed to do this.",
        "QUOTA_EXCEEDED": "Monthly event limit reached.",
        "MODIFICATION_LIMIT_EXCEEDED": "No modifications left for this request.",
        "SERVER_ERROR": "Server error.",
    },
}

UNKNOWN_ERROR = {"fr": "Erreur inconnue.", "en": "Unknown error."}


def _code(value: str | Enum) -> str:
    return str(value.value) if isinstance(value, Enum) else value


def _table(tables: Mapping[str, Mapping[str, str]], locale: str) -> Mapping[str, str]:
    return tables.get(locale.lower(), tables[DEFAULT_LOCALE])


def label_for_status(code: str | Enum | None, locale: str = DEFAULT_LOCALE) -> str:
    """Return the display label of a status code.

    Args:
        code: Status code (e.g. ``"PENDING"`` or `Status.PENDING`), or the
            `EMPTY` sentinel.
        locale: ``"fr"`` or ``"en"``; other locales use French.

    Returns:
        The label, `MISSING` for an empty code, or the code itself when unknown.
    """
    if not code:
        return MISSING
    raw = _code(code)
    labels = _table(STATUS_LABELS, locale)
    return labels.get(raw) or labels.get(raw.upper()) or raw


def label_for_error(code: str | Enum | None, locale: str = DEFAULT_LOCALE) -> str:
    """Return the display message of an error code (unknown codes pass through)."""
    if not code:
        return UNKNOWN_ERROR.get(locale.lower(), UNKNOWN_ERROR[DEFAULT_LOCALE])
    raw = _code(code)
    return _table(ERROR_LABELS, locale).get(raw, raw)
