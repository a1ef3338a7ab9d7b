"""
i18n Routes

i18n_router  (prefix: /api/v1/i18n)
    GET    /languages          → list the catalog with the server's support weights
    GET    /languages/{code}   → one catalog entry (404 for unknown codes)
    GET    /resolve            → the language negotiated for this request
"""

import logging
import math

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from fastapi_lang.dependencies import Language, get_language_context
from fastapi_lang.i18n.catalog import ALL_CODES, LangCode, get_language_info

i18n_router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


class LanguageInfo(BaseModel):
    code: str
    english_name: str
    native_name: str
    is_rtl: bool
    weight: float = 0.0


def _weights(request: Request) -> dict[LangCode, float]:
    context = get_language_context(request)
    return context.config.weights if context is not None else {}


@i18n_router.get("/languages", response_model=list[LanguageInfo])
async def list_languages(request: Request, supported: bool = False) -> list[LanguageInfo]:
    """List every known language; ``?supported=true`` keeps only weighted ones."""
    weights = _weights(request)
    languages = [LanguageInfo(**get_language_info(lang), weight=weights.get(lang, 0.0)) for lang in ALL_CODES]
    if supported:
        languages = [info for info in languages if info.weight != 0.0 and not math.isnan(info.weight)]
    return languages


@i18n_router.get("/languages/{code}", response_model=LanguageInfo)
async def get_language_entry(code: str, request: Request) -> LanguageInfo:
    lang = LangCode.get(code)
    if lang is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown language code '{code}'")
    return LanguageInfo(**get_language_info(lang), weight=_weights(request).get(lang, 0.0))


@i18n_router.get("/resolve", response_model=LanguageInfo)
async def resolve_language(request: Request, lang: Language) -> LanguageInfo:
    """Return the language negotiated for the current request."""
    return LanguageInfo(**get_language_info(lang), weight=_weights(request).get(lang, 0.0))
