"""
Language Negotiation Middleware

Attaches a fresh ``LanguageContext`` to ``request.state.language`` for every
request. The context resolves lazily, at most once per request, from:
  1. the custom resolver (if configured)
  2. the designated URL segment (if configured)
  3. the Accept-Language header, against the configured support weights
  4. the wildcard language (if configured)

Handlers obtain the result through ``fastapi_lang.dependencies.get_language``.
When the language was resolved, the response gets a ``Content-Language``
header unless the handler already set one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from fastapi_lang.negotiation import LanguageConfig, LanguageContext

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


class LanguageMiddleware(BaseHTTPMiddleware):
    """Install the request-scoped language context.

    The configuration is copied once at construction, so changes the operator
    makes to the original object afterwards never reach live requests.
    """

    def __init__(self, app: ASGIApp, config: LanguageConfig | None = None, set_content_language: bool = True):
        super().__init__(app)
        self.config = (config if config is not None else LanguageConfig()).copy()
        self.set_content_language = set_content_language

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        context = LanguageContext(self.config)
        request.state.language = context
        response = await call_next(request)
        if self.set_content_language and context.language is not None:
            response.headers.setdefault("Content-Language", context.language.value)
        return response
