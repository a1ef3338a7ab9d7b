"""
fastapi-lang: per-request language negotiation for FastAPI.

    config = LanguageConfig().url(-1).wildcard(LangCode.DE)
    config[LangCode.ES] = 1.0
    app.add_middleware(LanguageMiddleware, config=config)

    @app.get("/{section}/{lang}")
    async def page(lang: Language):
        ...
"""

from .dependencies import Language, get_language, get_language_result
from .exceptions import BadRequestError, LangError, NegotiationError, NotAcceptableError, NotFoundError
from .i18n.catalog import ALL_CODES, LangCode
from .middleware.language import LanguageMiddleware
from .negotiation import CustomResolver, LanguageConfig, LanguageContext

__all__ = [
    "ALL_CODES",
    "BadRequestError",
    "CustomResolver",
    "LangCode",
    "LangError",
    "Language",
    "LanguageConfig",
    "LanguageContext",
    "LanguageMiddleware",
    "NegotiationError",
    "NotAcceptableError",
    "NotFoundError",
    "get_language",
    "get_language_result",
]
