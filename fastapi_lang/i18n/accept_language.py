"""
Accept-Language negotiation

Pure functions for turning an ``Accept-Language`` header into a language:
- header parsing into (language, client quality) pairs
- quality-weighted selection against the server's per-language support

Nothing here blocks or suspends.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterator, Mapping
from fractions import Fraction
from typing import TYPE_CHECKING

from fastapi_lang.exceptions import NotAcceptableError
from fastapi_lang.i18n.catalog import LangCode

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection

logger = logging.getLogger(__name__)

# Header used when the client sends none at all
DEFAULT_ACCEPT_LANGUAGE = "en"

# primary subtag, optional region subtag (ignored), optional ";q=" quality in ASCII digits
ACCEPT_LANGUAGE_PATTERN = re.compile(r"(?:^|,| )(\w{1,3})(?:-\w{1,3})? ?(?:;q=([0-9.]+))?")


def accept_language(request: HTTPConnection) -> str:
    """Return the raw Accept-Language header, or ``"en"`` when it is absent.

    A header that is present but empty is returned as-is.
    """
    return request.headers.get("accept-language", DEFAULT_ACCEPT_LANGUAGE)


def _quality(raw: str | None) -> float:
    if raw is None:
        return 1.0
    try:
        return float(raw)
    except ValueError:
        # e.g. "0.5.1"
        return 1.0


def parse_accept_language(header: str) -> Iterator[tuple[LangCode, float]]:
    """Yield ``(language, client_quality)`` pairs in header order.

    Tokens whose primary subtag is not a known code are skipped, so a header
    of pure garbage yields nothing rather than failing.

    Args:
        header: Value of the Accept-Language header, e.g. "en-US, de;q=0.2".

    Yields:
        Known language codes with their quality (1.0 when not given).
    """
    for match in ACCEPT_LANGUAGE_PATTERN.finditer(header):
        primary, raw_quality = match.groups()
        lang = LangCode.get(primary)
        if lang is None:
            continue
        yield lang, _quality(raw_quality)


def _ratio(numerator: float, denominator: float) -> float:
    """IEEE-754 division: never raises, yields inf or nan on a zero denominator."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _relative_change(new: float, old: float, base: float) -> Fraction | float:
    """Return (new - old) / base, exact on the decimal values the floats stand for.

    Weights and qualities are written as short decimals ("0.3"), so the
    comparison runs on those decimals rather than on their binary
    approximations. Zero or non-finite operands fall back to ``_ratio``.
    """
    if base == 0.0 or not all(math.isfinite(value) for value in (new, old, base)):
        return _ratio(new - old, base)
    return (Fraction(repr(new)) - Fraction(repr(old))) / Fraction(repr(base))


class PreferenceDecider:
    """Pick the best candidate language against the server's support weights.

    Candidates are fed in header order. A candidate whose server weight is
    0.0 or NaN is discarded before any comparison. The first surviving
    candidate becomes the current best; a later one replaces it when its
    relative gain in client quality beats the relative loss in server
    support::

        (s1 - s2) / s1 < (q2 - q1) / q2

    where 1 is the current best and 2 the candidate. Ties keep the earlier
    candidate. Languages missing from ``weights`` count as unsupported.
    """

    def __init__(self, weights: Mapping[LangCode, float]):
        self.weights = weights
        self.lang: LangCode | None = None
        self.quality: float | None = None

    def is_supported(self, lang: LangCode) -> bool:
        weight = self.weights.get(lang, 0.0)
        return not (weight == 0.0 or math.isnan(weight))

    def prefers(self, lang: LangCode, quality: float) -> bool:
        """Return True when ``lang`` at ``quality`` should replace the current best."""
        server_best = self.weights.get(self.lang, 0.0)
        server_candidate = self.weights.get(lang, 0.0)
        support_loss = _relative_change(server_best, server_candidate, server_best)
        quality_gain = _relative_change(quality, self.quality, quality)
        return support_loss < quality_gain

    def add_preference(self, lang: LangCode, quality: float) -> None:
        if not self.is_supported(lang):
            return
        if self.lang is None or self.prefers(lang, quality):
            self.lang = lang
            self.quality = quality

    def result(self) -> LangCode:
        """Return the winning language.

        Raises:
            NotAcceptableError: no candidate is supported by the server.
        """
        if self.lang is None:
            raise NotAcceptableError()
        return self.lang


def negotiate(header: str, weights: Mapping[LangCode, float]) -> LangCode:
    """Resolve an Accept-Language header against per-language support weights.

    Raises:
        NotAcceptableError: when no requested language is supported.
    """
    decider = PreferenceDecider(weights)
    for lang, quality in parse_accept_language(header):
        decider.add_preference(lang, quality)
    lang = decider.result()
    logger.debug("Accept-Language %r resolved to %s", header, lang)
    return lang
