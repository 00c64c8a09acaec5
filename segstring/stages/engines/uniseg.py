"""Default segmentation engine backed by uniseg (Unicode UAX #29)."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from uniseg.graphemecluster import grapheme_clusters
from uniseg.sentencebreak import sentences
from uniseg.wordbreak import words

from ...options import check_granularity
from ...types import Granularity, LocalesArgument

NativeSegment = tuple[str, int, Optional[bool]]

# Well-formed BCP 47 language tag (RFC 5646 langtag or private use).
_LANGTAG_RE = re.compile(
    r"""
    ^(?:
        (?:[a-z]{2,3}(?:-[a-z]{3}){0,3}|[a-z]{4}|[a-z]{5,8})  # language
        (?:-[a-z]{4})?                                       # script
        (?:-(?:[a-z]{2}|[0-9]{3}))?                          # region
        (?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*             # variants
        (?:-[0-9a-wyz](?:-[a-z0-9]{2,8})+)*                  # extensions
        (?:-x(?:-[a-z0-9]{1,8})+)?                           # private use
    |
        x(?:-[a-z0-9]{1,8})+
    )$
    """,
    re.IGNORECASE | re.VERBOSE,
)

_BREAKERS: dict[str, Callable[[str], Iterable[str]]] = {
    "grapheme": grapheme_clusters,
    "word": words,
    "sentence": sentences,
}


class LocaleSyntaxError(ValueError):
    """A locale identifier is not a well-formed BCP 47 tag."""


def canonical_locales(locales: LocalesArgument | None) -> tuple[str, ...]:
    if locales is None:
        return ()
    if isinstance(locales, str):
        tags = [locales]
    else:
        tags = [str(locale) for locale in locales]
    for tag in tags:
        if not _LANGTAG_RE.match(tag):
            raise LocaleSyntaxError(f"Incorrect locale information provided: {tag!r}")
    return tuple(tags)


def is_word_like(segment: str) -> bool:
    return any(ch.isalnum() for ch in segment)


class UnisegEngine:
    """Segments text at one granularity.

    uniseg implements the default Unicode boundary rules, which do not vary
    by locale. Locales are still validated so a malformed tag fails at
    construction.
    """

    def __init__(
        self, locales: LocalesArgument | None, granularity: Granularity
    ) -> None:
        check_granularity(granularity)
        self.locales = canonical_locales(locales)
        self.granularity = granularity
        self._breaker = _BREAKERS[granularity]

    def segment(self, text: str) -> Iterator[NativeSegment]:
        if not text:
            return
        word = self.granularity == "word"
        index = 0
        for segment in self._breaker(text):
            if not segment:
                continue
            yield segment, index, is_word_like(segment) if word else None
            index += len(segment)

    def __repr__(self) -> str:
        return (
            f"UnisegEngine(locales={list(self.locales)!r}, "
            f"granularity={self.granularity!r})"
        )
