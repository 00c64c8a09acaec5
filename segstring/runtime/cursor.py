"""Pull-based cursors over segment streams.

A cursor hands out one element per ``fetch()`` call and returns ``None``
once the stream is exhausted. Cursors are single pass; a ``SegmentStream``
restarts by opening a fresh cursor, which re-runs the engine.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Protocol, TypeVar

from ..types import SegmentRecord

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

_END = object()


class Cursor(Protocol[T_co]):
    def fetch(self) -> T_co | None: ...


class BaseCursor(Generic[T]):
    """Iterator protocol on top of ``fetch``."""

    def fetch(self) -> T | None:
        raise NotImplementedError

    def __iter__(self) -> BaseCursor[T]:
        return self

    def __next__(self) -> T:
        item = self.fetch()
        if item is None:
            raise StopIteration
        return item


class IterCursor(BaseCursor[T]):
    """Cursor over any iterable, consumed once."""

    def __init__(self, items: Iterable[T]) -> None:
        self._it: Iterator[T] | None = iter(items)

    def fetch(self) -> T | None:
        if self._it is None:
            return None
        item = next(self._it, _END)
        if item is _END:
            self._it = None
            return None
        return item


class WordLikeCursor(BaseCursor[SegmentRecord]):
    def __init__(self, source: Iterable[SegmentRecord]) -> None:
        self._source = as_cursor(source)

    def fetch(self) -> SegmentRecord | None:
        while True:
            record = self._source.fetch()
            if record is None or record.is_word_like:
                return record


class TextCursor(BaseCursor[str]):
    def __init__(self, source: Iterable[SegmentRecord]) -> None:
        self._source = as_cursor(source)

    def fetch(self) -> str | None:
        record = self._source.fetch()
        if record is None:
            return None
        return record.text


def as_cursor(items: Iterable[T]) -> Cursor[T]:
    if isinstance(items, BaseCursor):
        return items
    if isinstance(items, SegmentStream):
        return items.cursor()
    return IterCursor(items)


class SegmentStream(Generic[T]):
    """Restartable, lazy sequence; every ``iter()`` opens a new cursor."""

    def __init__(self, open_cursor: Callable[[], BaseCursor[T]]) -> None:
        self._open_cursor = open_cursor

    def __iter__(self) -> BaseCursor[T]:
        return self._open_cursor()

    def cursor(self) -> BaseCursor[T]:
        return self._open_cursor()

    def word_like(self) -> SegmentStream[SegmentRecord]:
        return SegmentStream(lambda: WordLikeCursor(self._open_cursor()))

    def texts(self) -> SegmentStream[str]:
        return SegmentStream(lambda: TextCursor(self._open_cursor()))
