"""
URL segment language resolution

The operator designates one path segment as the language slot. Positions
count from the start when non-negative and from the end when negative, so
``-1`` is the last segment:

    /index/path/es   position -1 → es
    /de/some/path    position  0 → de

Unlike the Accept-Language parser, a slot that is missing or does not hold a
known code is a hard ``NotFoundError``.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi_lang.exceptions import NotFoundError
from fastapi_lang.i18n.catalog import LangCode


def path_segments(path: str) -> list[str]:
    """Split a URL path into its non-empty segments.

    Examples:
        "/some/bad/path" → ["some", "bad", "path"]
        "/"              → []
        "/a//b/"         → ["a", "b"]
    """
    return [segment for segment in path.split("/") if segment]


def select_segment(segments: Sequence[str], position: int) -> str | None:
    """Return the segment at ``position`` or None when it is out of range."""
    if position < 0:
        index = len(segments) + position
        if index < 0:
            return None
    else:
        index = position
        if index >= len(segments):
            return None
    return segments[index]


def language_from_segments(segments: Sequence[str], position: int) -> LangCode:
    """Parse the segment at ``position`` as a language code.

    Raises:
        NotFoundError: the position is out of range, or the segment is not
            a known language code.
    """
    segment = select_segment(segments, position)
    if segment is None:
        raise NotFoundError()
    lang = LangCode.get(segment)
    if lang is None:
        raise NotFoundError()
    return lang


def language_from_path(path: str, position: int) -> LangCode:
    """Resolve the language slot of a raw URL path. See ``language_from_segments``."""
    return language_from_segments(path_segments(path), position)
