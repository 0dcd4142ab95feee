"""
Locale utilities for simple-loc-compat
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from fastapi import Request


def normalize_language(lang: Optional[str]) -> Optional[str]:
    """
    Normalize a locale code.

    Supports:
    - quality values ("de;q=0.8" -> "de")
    - separators and casing ("pt_br" -> "pt-BR", "EN" -> "en")

    Returns None for empty input.
    """
    if not lang:
        return None

    raw = str(lang).strip()
    if not raw:
        return None

    # Strip quality values: "en;q=0.9"
    if ";" in raw:
        raw = raw.split(";", 1)[0].strip()
    # Drop encoding suffixes: "fr_FR.UTF-8"
    if "." in raw:
        raw = raw.split(".", 1)[0].strip()

    parts = [p for p in raw.replace("_", "-").split("-") if p]
    if not parts:
        return None

    primary = parts[0].lower()
    rest = [p.upper() if len(p) == 2 else p for p in parts[1:]]
    return "-".join([primary, *rest])


def primary_subtag(lang: str) -> str:
    return (normalize_language(lang) or "").split("-", 1)[0]


def match_language(lang: Optional[str], available: Iterable[str]) -> Optional[str]:
    """
    Pick the available locale that best matches ``lang``.

    Exact matches (after normalization) win; otherwise the first available
    locale sharing the primary subtag is returned ("de-AT" -> "de").
    """
    wanted = normalize_language(lang)
    if not wanted:
        return None

    candidates = list(available)
    for candidate in candidates:
        if normalize_language(candidate) == wanted:
            return candidate

    primary = wanted.split("-", 1)[0]
    for candidate in candidates:
        if primary_subtag(candidate) == primary:
            return candidate

    return None


def parse_accept_language_header(value: str) -> List[str]:
    """
    Parse Accept-Language into a list of language codes ordered by preference.

    Very small parser; we don't implement full RFC behavior, but we respect q=.
    """
    if not value:
        return []

    parts = [p.strip() for p in value.split(",") if p.strip()]
    weighted: List[tuple[float, str]] = []
    for part in parts:
        lang = part
        q = 1.0
        if ";" in part:
            lang, params = part.split(";", 1)
            lang = lang.strip()
            params = params.strip()
            if params.startswith("q="):
                try:
                    q = float(params[2:])
                except ValueError:
                    q = 1.0
        normalized = normalize_language(lang)
        if normalized and normalized != "*":
            weighted.append((q, normalized))

    # Sort by q desc, stable otherwise
    weighted.sort(key=lambda item: item[0], reverse=True)
    return [lang for _, lang in weighted]


def get_accept_language(request: Request, available: Iterable[str], default: str) -> str:
    """
    Get the preferred locale for the request.

    Args:
        request: FastAPI request object
        available: Locales that have translations loaded
        default: Locale to use when nothing matches

    Returns:
        Locale code
    """
    available = list(available)

    # Explicit override (query param) beats header.
    query_lang = request.query_params.get("lang") or request.query_params.get("locale")
    if query_lang:
        matched = match_language(query_lang, available)
        if matched:
            return matched

    accept_language = request.headers.get("Accept-Language", "")
    for candidate in parse_accept_language_header(accept_language):
        matched = match_language(candidate, available)
        if matched:
            return matched

    return default
