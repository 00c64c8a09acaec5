from __future__ import annotations

from collections.abc import Iterable

from ..runtime.cursor import SegmentStream, TextCursor, WordLikeCursor
from ..types import SegmentRecord


def filter_raw_word_like_segments(
    segments: Iterable[SegmentRecord],
) -> SegmentStream[SegmentRecord]:
    """Keep only records whose ``is_word_like`` is true, in order.

    The result re-reads ``segments`` on every iteration, so it is restartable
    whenever the source is.
    """
    return SegmentStream(lambda: WordLikeCursor(segments))


def filter_word_like_segments(segments: Iterable[SegmentRecord]) -> SegmentStream[str]:
    """Text of the word-like records of ``segments``."""
    return SegmentStream(lambda: TextCursor(WordLikeCursor(segments)))
