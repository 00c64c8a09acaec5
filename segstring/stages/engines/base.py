from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from ...types import Granularity, LocalesArgument


class SegmentationEngine(Protocol):
    def segment(self, text: str) -> Iterable[Any]:
        """Yield the native segment records of ``text`` in order.

        Must be restartable: calling again on the same text yields the same
        records.
        """
        ...


class EngineFactory(Protocol):
    def __call__(
        self, locales: LocalesArgument | None, granularity: Granularity
    ) -> SegmentationEngine: ...
