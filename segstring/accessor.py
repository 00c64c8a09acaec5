from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .options import SegmentationOptions, WordSegmentationOptions, resolve_options
from .runtime.cache import SegmenterCache
from .runtime.cursor import SegmentStream, as_cursor
from .stages.adapter import SegmentationEngineAdapter
from .types import Granularity, SegmentRecord

T = TypeVar("T")


def item_at(items: Iterable[T], index: int) -> T | None:
    """Return ``items[index]`` for a forward-only sequence, or None.

    A non-negative index walks forward and stops at the element, without
    buffering. A negative index counts from the end, which needs the
    length, so the whole sequence is materialized first.
    """
    if index < 0:
        buffered = list(items)
        position = len(buffered) + index
        if position < 0:
            return None
        return buffered[position]

    cursor = as_cursor(items)
    position = 0
    while True:
        item = cursor.fetch()
        if item is None:
            return None
        if position == index:
            return item
        position += 1


def count_items(items: Iterable[object]) -> int:
    cursor = as_cursor(items)
    count = 0
    while cursor.fetch() is not None:
        count += 1
    return count


class SegmentAccessor:
    """Enumerate, count and index the segments of a string.

    Args:
        cache: Engine cache shared by every call on this accessor
        adapter: Turns engine output into segment streams
    """

    def __init__(
        self,
        cache: SegmenterCache | None = None,
        adapter: SegmentationEngineAdapter | None = None,
    ) -> None:
        self.cache = cache if cache is not None else SegmenterCache()
        self.adapter = adapter or SegmentationEngineAdapter()

    def raw_segments(
        self,
        text: str,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> SegmentStream[SegmentRecord]:
        """Lazy stream of segment records, word-filtered when requested."""
        opts = resolve_options(granularity, options)
        engine = self.cache.get_or_create(opts.locales_override, granularity)
        stream = self.adapter.stream(engine, text)
        if isinstance(opts, WordSegmentationOptions) and opts.is_word_like:
            return stream.word_like()
        return stream

    def segments(
        self,
        text: str,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> SegmentStream[str]:
        return self.raw_segments(text, granularity, options).texts()

    def segment_count(
        self,
        text: str,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> int:
        return count_items(self.raw_segments(text, granularity, options))

    def raw_segment_at(
        self,
        text: str,
        index: int,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> SegmentRecord | None:
        """Record at ``index`` (negative counts from the end), or None."""
        return item_at(self.raw_segments(text, granularity, options), index)

    def segment_at(
        self,
        text: str,
        index: int,
        granularity: Granularity,
        options: SegmentationOptions | None = None,
    ) -> str | None:
        record = self.raw_segment_at(text, index, granularity, options)
        return None if record is None else record.text


# Created once at import and shared by the module-level functions.
default_cache = SegmenterCache()
default_accessor = SegmentAccessor(default_cache)


def get_raw_segments(
    text: str,
    granularity: Granularity,
    options: SegmentationOptions | None = None,
    *,
    accessor: SegmentAccessor | None = None,
) -> SegmentStream[SegmentRecord]:
    return (accessor or default_accessor).raw_segments(text, granularity, options)


def get_segments(
    text: str,
    granularity: Granularity,
    options: SegmentationOptions | None = None,
    *,
    accessor: SegmentAccessor | None = None,
) -> SegmentStream[str]:
    return (accessor or default_accessor).segments(text, granularity, options)


def segment_count(
    text: str,
    granularity: Granularity,
    options: SegmentationOptions | None = None,
    *,
    accessor: SegmentAccessor | None = None,
) -> int:
    return (accessor or default_accessor).segment_count(text, granularity, options)


def raw_segment_at(
    text: str,
    index: int,
    granularity: Granularity,
    options: SegmentationOptions | None = None,
    *,
    accessor: SegmentAccessor | None = None,
) -> SegmentRecord | None:
    return (accessor or default_accessor).raw_segment_at(
        text, index, granularity, options
    )


def segment_at(
    text: str,
    index: int,
    granularity: Granularity,
    options: SegmentationOptions | None = None,
    *,
    accessor: SegmentAccessor | None = None,
) -> str | None:
    """Segment text at ``index``; -1 is the last segment. None if out of range."""
    return (accessor or default_accessor).segment_at(text, index, granularity, options)
