from __future__ import annotations

from .accessor import SegmentAccessor, default_accessor
from .options import (
    SegmentationOptions,
    WordSegmentationOptions,
    resolve_options,
    with_default_locales,
)
from .runtime.cursor import SegmentStream
from .types import Granularity, LocalesArgument, SegmentRecord


class SegmentString:
    """A fixed string segmented into graphemes, words or sentences.

    ``locales`` is the default for every call. ``locales_override`` on a
    call's options applies to that call only and never replaces the default.

    Args:
        text: The string to segment
        locales: Default locale or ordered locale list (None for engine default)
        accessor: Accessor to run segmentation with (shared default if None)
    """

    def __init__(
        self,
        text: str,
        locales: LocalesArgument | None = None,
        *,
        accessor: SegmentAccessor | None = None,
    ) -> None:
        self._text = text
        self._locales = locales
        self._accessor = accessor or default_accessor

    @property
    def text(self) -> str:
        return self._text

    @property
    def locales(self) -> LocalesArgument | None:
        return self._locales

    def _options(
        self, granularity: Granularity, options: SegmentationOptions | None
    ) -> SegmentationOptions:
        return with_default_locales(
            resolve_options(granularity, options), self._locales
        )

    def segments(
        self, granularity: Granularity, options: SegmentationOptions | None = None
    ) -> SegmentStream[str]:
        return self._accessor.segments(
            self._text, granularity, self._options(granularity, options)
        )

    def raw_segments(
        self, granularity: Granularity, options: SegmentationOptions | None = None
    ) -> SegmentStream[SegmentRecord]:
        return self._accessor.raw_segments(
            self._text, granularity, self._options(granularity, options)
        )

    def segment_count(
        self, granularity: Granularity, options: SegmentationOptions | None = None
    ) -> int:
        return self._accessor.segment_count(
            self._text, granularity, self._options(granularity, options)
        )

    def segment_at(
        self,
        index: int,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> str | None:
        return self._accessor.segment_at(
            self._text, index, granularity, self._options(granularity, options)
        )

    def raw_segment_at(
        self,
        index: int,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> SegmentRecord | None:
        return self._accessor.raw_segment_at(
            self._text, index, granularity, self._options(granularity, options)
        )

    def graphemes(
        self, options: SegmentationOptions | None = None
    ) -> SegmentStream[str]:
        return self.segments("grapheme", options)

    def raw_graphemes(
        self, options: SegmentationOptions | None = None
    ) -> SegmentStream[SegmentRecord]:
        return self.raw_segments("grapheme", options)

    def grapheme_count(self, options: SegmentationOptions | None = None) -> int:
        return self.segment_count("grapheme", options)

    def grapheme_at(
        self, index: int, options: SegmentationOptions | None = None
    ) -> str | None:
        return self.segment_at(index, "grapheme", options)

    def words(
        self, options: WordSegmentationOptions | None = None
    ) -> SegmentStream[str]:
        """Word segments; pass ``is_word_like=True`` to drop spaces and punctuation."""
        return self.segments("word", options)

    def raw_words(
        self, options: WordSegmentationOptions | None = None
    ) -> SegmentStream[SegmentRecord]:
        return self.raw_segments("word", options)

    def word_count(self, options: WordSegmentationOptions | None = None) -> int:
        return self.segment_count("word", options)

    def word_at(
        self, index: int, options: WordSegmentationOptions | None = None
    ) -> str | None:
        return self.segment_at(index, "word", options)

    def sentences(
        self, options: SegmentationOptions | None = None
    ) -> SegmentStream[str]:
        return self.segments("sentence", options)

    def raw_sentences(
        self, options: SegmentationOptions | None = None
    ) -> SegmentStream[SegmentRecord]:
        return self.raw_segments("sentence", options)

    def sentence_count(self, options: SegmentationOptions | None = None) -> int:
        return self.segment_count("sentence", options)

    def sentence_at(
        self, index: int, options: SegmentationOptions | None = None
    ) -> str | None:
        return self.segment_at(index, "sentence", options)

    def __repr__(self) -> str:
        return f"SegmentString({self._text!r}, locales={self._locales!r})"
