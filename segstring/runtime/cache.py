from __future__ import annotations

import hashlib
import json
import logging
from typing import TYPE_CHECKING, Any, Protocol

from ..constants import DEFAULT_LOCALE_KEY, LOCALE_KEY_SEPARATOR
from ..options import check_granularity
from ..types import Granularity, LocalesArgument

if TYPE_CHECKING:
    from ..stages.engines.base import EngineFactory, SegmentationEngine

logger = logging.getLogger(__name__)


class Cache(Protocol):
    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any) -> Any: ...


def normalize_locale_key(locales: LocalesArgument | None) -> str:
    """Collapse a locale specification into a stable string.

    ``None`` and the empty string map to ``"default"``; a list keeps its
    order, so ``["de", "en"]`` and ``["en", "de"]`` give different keys.
    """
    if locales is None:
        return DEFAULT_LOCALE_KEY
    if isinstance(locales, str):
        return locales or DEFAULT_LOCALE_KEY
    try:
        parts = [str(locale) for locale in locales]  # type: ignore[union-attr]
    except TypeError:
        # Locale objects that are not iterable
        return str(locales) or DEFAULT_LOCALE_KEY
    return LOCALE_KEY_SEPARATOR.join(parts) or DEFAULT_LOCALE_KEY


def make_cache_key(*parts: Any) -> str:
    h = hashlib.sha256()
    for p in parts:
        h.update(json.dumps(p, ensure_ascii=False, default=str).encode("utf-8"))
        h.update(b"\x1f")
    return h.hexdigest()


def make_segmenter_key(
    granularity: Granularity, locales: LocalesArgument | None
) -> str:
    return make_cache_key(granularity, normalize_locale_key(locales))


class MemoryCache:
    """Unbounded in-process store; entries live as long as the cache."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> Any:
        # setdefault keeps whichever value landed first, so racing writers
        # all end up sharing one entry.
        return self._entries.setdefault(key, value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class SegmenterCache:
    """Get-or-create store of engines keyed by (granularity, locales).

    No eviction and no teardown: the key space is small and engines are
    immutable once built.
    """

    def __init__(
        self,
        engine_factory: EngineFactory | None = None,
        store: Cache | None = None,
    ) -> None:
        if engine_factory is None:
            from ..stages.engines.uniseg import UnisegEngine

            engine_factory = UnisegEngine
        self.engine_factory = engine_factory
        self.store = store if store is not None else MemoryCache()

    def get_or_create(
        self, locales: LocalesArgument | None, granularity: Granularity
    ) -> SegmentationEngine:
        check_granularity(granularity)
        key = make_segmenter_key(granularity, locales)
        engine = self.store.get(key)
        if engine is not None:
            return engine

        logger.debug(
            "Creating %s segmenter for locale key %r",
            granularity,
            normalize_locale_key(locales),
        )
        engine = self.engine_factory(locales, granularity)
        stored = self.store.set(key, engine)
        return stored if stored is not None else engine
