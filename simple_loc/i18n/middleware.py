from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request

from simple_loc.i18n.context import reset_language, set_language
from simple_loc.i18n.language import Language, get_language_facade
from simple_loc.utils.app_logger import get_i18n_logger
from simple_loc.utils.language import get_accept_language

logger = get_i18n_logger("middleware")


def install_i18n_middleware(app: FastAPI, *, language: Optional[Language] = None) -> None:
    """
    Install request-scoped locale selection.

    This middleware guarantees:
    - the request locale is available via ContextVar (simple_loc.i18n.get_language)
    - the locale is reset once the response is created
    - responses carry a Content-Language header
    """

    @app.middleware("http")
    async def _i18n_middleware(request: Request, call_next):
        facade = language or get_language_facade()
        locale = get_accept_language(
            request,
            facade.available_locales,
            facade.settings.default_locale,
        )
        token = set_language(locale)
        try:
            response = await call_next(request)
        finally:
            reset_language(token)

        response.headers.setdefault("Content-Language", locale)
        logger.debug(f"{request.method} {request.url.path} served in locale {locale}")
        return response
