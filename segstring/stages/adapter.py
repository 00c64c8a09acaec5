from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..runtime.cursor import BaseCursor, IterCursor, SegmentStream
from ..types import SegmentRecord
from .engines.base import SegmentationEngine


class RecordCursor(BaseCursor[SegmentRecord]):
    """Normalizes whatever an engine yields into ``SegmentRecord``."""

    def __init__(self, native: Iterable[Any]) -> None:
        self._native = IterCursor(native)
        self._position = 0

    def fetch(self) -> SegmentRecord | None:
        item = self._native.fetch()
        if item is None:
            return None
        record = self._to_record(item)
        self._position = record.char_end
        return record

    def _to_record(self, item: Any) -> SegmentRecord:
        if isinstance(item, SegmentRecord):
            return item
        if isinstance(item, str):
            return SegmentRecord(text=item, char_start=self._position)

        if isinstance(item, tuple):
            seg_text = item[0]
            start = item[1] if len(item) > 1 else None
            word_like = item[2] if len(item) > 2 else None
        elif isinstance(item, Mapping):
            seg_text = item.get("segment")
            start = item.get("index")
            word_like = item.get("isWordLike", item.get("is_word_like"))
        else:
            seg_text = getattr(item, "segment", None)
            if seg_text is None:
                seg_text = getattr(item, "text", None)
            start = getattr(item, "index", None)
            word_like = getattr(item, "is_word_like", None)

        if seg_text is None:
            raise TypeError(f"Unsupported segment record: {item!r}")
        if start is None:
            start = self._position
        return SegmentRecord(
            text=str(seg_text),
            char_start=int(start),
            is_word_like=None if word_like is None else bool(word_like),
        )


class SegmentationEngineAdapter:
    """Presents any engine's output as a restartable stream of records."""

    def stream(
        self, engine: SegmentationEngine, text: str
    ) -> SegmentStream[SegmentRecord]:
        return SegmentStream(lambda: RecordCursor(engine.segment(text)))
