"""
FastAPI dependencies exposing the negotiated language to handlers.

    @app.get("/greeting")
    async def greeting(lang: Language):
        ...

A handler that would rather degrade than fail can depend on
``get_language_result`` and inspect the error itself.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request

from fastapi_lang.exceptions import NegotiationError
from fastapi_lang.i18n.catalog import LangCode
from fastapi_lang.negotiation import LanguageContext

logger = logging.getLogger(__name__)


def get_language_context(request: Request) -> LanguageContext | None:
    """Return the context installed by ``LanguageMiddleware``, if any."""
    context = getattr(request.state, "language", None)
    return context if isinstance(context, LanguageContext) else None


async def get_language(request: Request) -> LangCode:
    """Resolve the request's language, raising its ``NegotiationError`` on failure.

    Without ``LanguageMiddleware`` installed every request is English.
    """
    context = get_language_context(request)
    if context is None:
        logger.debug("No language middleware installed, defaulting to %s", LangCode.EN)
        return LangCode.EN
    return await context.resolve(request)


async def get_language_result(request: Request) -> LangCode | NegotiationError:
    """Like ``get_language`` but returns the error instead of raising it."""
    try:
        return await get_language(request)
    except NegotiationError as exc:
        return exc


Language = Annotated[LangCode, Depends(get_language)]
