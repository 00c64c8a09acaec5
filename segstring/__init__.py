"""segstring - locale-aware grapheme, word and sentence segmentation."""

from .accessor import (
    SegmentAccessor,
    get_raw_segments,
    get_segments,
    raw_segment_at,
    segment_at,
    segment_count,
)
from .options import SegmentationOptions, WordSegmentationOptions
from .runtime.cache import SegmenterCache, normalize_locale_key
from .segment_string import SegmentString
from .stages.engines.uniseg import LocaleSyntaxError, UnisegEngine
from .stages.filters import filter_raw_word_like_segments, filter_word_like_segments
from .types import Granularity, SegmentRecord

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "Granularity",
    "LocaleSyntaxError",
    "SegmentAccessor",
    "SegmentRecord",
    "SegmentString",
    "SegmentationOptions",
    "SegmenterCache",
    "UnisegEngine",
    "WordSegmentationOptions",
    "filter_raw_word_like_segments",
    "filter_word_like_segments",
    "get_raw_segments",
    "get_segments",
    "normalize_locale_key",
    "raw_segment_at",
    "segment_at",
    "segment_count",
]
