"""
Language resolution chain

``LanguageConfig`` holds everything the operator configures and resolves a
request's language by trying, in order:

    1. custom resolver  (if configured)
    2. URL segment      (if a position is configured)
    3. Accept-Language  (always)
    4. wildcard         (if configured)

The first source that succeeds wins. Unconfigured sources are transparent;
every configured source that fails replaces the error to report, and that
error is raised when nothing succeeds and no wildcard is set.

Example::

    config = LanguageConfig().url(-1).wildcard(LangCode.DE)
    config[LangCode.ES] = 1.0
    config[LangCode.EN] = 0.3
"""

from __future__ import annotations

import asyncio
import copy
import inspect
import logging
import math
from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, Union

from fastapi_lang.exceptions import NegotiationError
from fastapi_lang.i18n.accept_language import accept_language, negotiate
from fastapi_lang.i18n.catalog import ALL_CODES, LangCode
from fastapi_lang.i18n.url import language_from_path

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection

    from fastapi_lang.config import Settings

logger = logging.getLogger(__name__)

ResolverFunc = Callable[["HTTPConnection"], Union[LangCode, str, Awaitable[Union[LangCode, str]]]]


def _known_code(lang: LangCode | str) -> LangCode:
    code = LangCode.get(lang)
    if code is None:
        raise ValueError(f"unknown language code '{lang}'")
    return code


class CustomResolver:
    """A user-supplied resolver, either a plain function or a coroutine function.

    The resolver receives the request and returns a ``LangCode`` (a code
    string is accepted too) or raises a ``NegotiationError``. Both variants
    are invoked the same way: ``await resolver(request)``.
    """

    def __init__(self, func: ResolverFunc):
        self.func = func
        self.is_async = inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
            getattr(func, "__call__", None)
        )

    async def __call__(self, request: HTTPConnection) -> LangCode:
        if self.is_async:
            result = await self.func(request)
        else:
            result = self.func(request)
            # a plain callable may still hand back a coroutine or future
            if inspect.isawaitable(result):
                result = await result
        if isinstance(result, LangCode):
            return result
        return LangCode.parse(result)

    def __repr__(self) -> str:
        kind = "async" if self.is_async else "sync"
        return f"CustomResolver({self.func!r}, {kind})"


class LanguageConfig:
    """Operator configuration for language negotiation.

    Builder methods return a new configuration and leave the receiver
    untouched. Per-language support weights are set by indexing and default
    to 0.0 (unsupported) for every known code. An unknown code raises
    ``ValueError`` everywhere a code is accepted.
    """

    def __init__(self) -> None:
        self.wildcard_lang: LangCode | None = None
        self.url_position: int | None = None
        self.custom_resolver: CustomResolver | None = None
        self.weights: dict[LangCode, float] = {lang: 0.0 for lang in ALL_CODES}

    # ── Builder ──────────────────────────────────────────────────────────────

    def wildcard(self, lang: LangCode | str) -> LanguageConfig:
        """Use ``lang`` as a last resort when every other source failed."""
        config = self.copy()
        config.wildcard_lang = _known_code(lang)
        return config

    def url(self, position: int) -> LanguageConfig:
        """Interpret the path segment at ``position`` as the language code.

        Negative positions count from the last segment: -1 is the last one.
        """
        config = self.copy()
        config.url_position = int(position)
        return config

    def custom(self, func: ResolverFunc) -> LanguageConfig:
        """Resolve with ``func`` before any other source."""
        config = self.copy()
        config.custom_resolver = CustomResolver(func)
        return config

    def copy(self) -> LanguageConfig:
        config = copy.copy(self)
        config.weights = dict(self.weights)
        return config

    @classmethod
    def from_settings(cls, settings: Settings) -> LanguageConfig:
        """Build a configuration from ``LANGUAGE_*`` environment settings."""
        config = cls()
        if settings.language_url_position is not None:
            config = config.url(settings.language_url_position)
        if settings.language_wildcard is not None:
            config = config.wildcard(settings.language_wildcard)
        for code, weight in settings.language_weights.items():
            config[code] = weight
        return config

    # ── Support weights ──────────────────────────────────────────────────────

    def __getitem__(self, lang: LangCode | str) -> float:
        return self.weights[_known_code(lang)]

    def __setitem__(self, lang: LangCode | str, weight: float) -> None:
        self.weights[_known_code(lang)] = float(weight)

    def supported(self) -> Iterator[tuple[LangCode, float]]:
        """Yield the codes with a non-zero support weight."""
        for lang, weight in self.weights.items():
            if weight != 0.0 and not math.isnan(weight):
                yield lang, weight

    # ── Resolution ───────────────────────────────────────────────────────────

    async def choose(self, request: HTTPConnection) -> LangCode:
        """Resolve the language for ``request``.

        Raises:
            NegotiationError: the error of the last configured source that
                failed, when no source succeeded and no wildcard is set.
        """
        error: NegotiationError

        if self.custom_resolver is not None:
            try:
                return await self.custom_resolver(request)
            except NegotiationError as exc:
                logger.debug("Custom resolver failed: %r", exc)
                error = exc

        if self.url_position is not None:
            try:
                return language_from_path(request.url.path, self.url_position)
            except NegotiationError as exc:
                logger.debug("URL segment %d of %s is not a language", self.url_position, request.url.path)
                error = exc

        try:
            return negotiate(accept_language(request), self.weights)
        except NegotiationError as exc:
            logger.debug("Accept-Language negotiation failed: %r", exc)
            error = exc

        if self.wildcard_lang is not None:
            return self.wildcard_lang
        raise error

    def __repr__(self) -> str:
        return (
            f"LanguageConfig(wildcard={self.wildcard_lang}, url={self.url_position}, "
            f"custom={self.custom_resolver!r}, supported={dict(self.supported())})"
        )


_UNRESOLVED: Any = object()


class LanguageContext:
    """Request-scoped memo of the resolved language.

    A fresh context is attached to every request; the chain runs at most
    once and every later lookup replays the same language or error.
    """

    def __init__(self, config: LanguageConfig):
        self.config = config
        self._result: LangCode | NegotiationError = _UNRESOLVED
        self._lock = asyncio.Lock()

    @property
    def resolved(self) -> bool:
        return self._result is not _UNRESOLVED

    @property
    def language(self) -> LangCode | None:
        """The resolved language, or None when unresolved or failed."""
        return self._result if isinstance(self._result, LangCode) else None

    async def resolve(self, request: HTTPConnection) -> LangCode:
        async with self._lock:
            if self._result is _UNRESOLVED:
                try:
                    self._result = await self.config.choose(request)
                except NegotiationError as exc:
                    self._result = exc
        if isinstance(self._result, NegotiationError):
            raise self._result
        return self._result
