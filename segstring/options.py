from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import GRANULARITIES
from .types import Granularity, LocalesArgument


@dataclass(frozen=True)
class SegmentationOptions:
    """Options accepted by every granularity.

    Keep this frozen so a stored default can never be changed by a call.
    """

    # Overrides the locale used for segmentation (None means engine default).
    locales_override: LocalesArgument | None = None


@dataclass(frozen=True)
class WordSegmentationOptions(SegmentationOptions):
    """Options for word granularity only."""

    # Keep only segments the engine classifies as words.
    is_word_like: bool = False


def check_granularity(granularity: str) -> None:
    if granularity not in GRANULARITIES:
        raise ValueError(
            f"Unknown granularity {granularity!r}, "
            f"expected one of {', '.join(GRANULARITIES)}"
        )


def resolve_options(
    granularity: Granularity, options: SegmentationOptions | None
) -> SegmentationOptions:
    """Return the options variant that matches ``granularity``.

    Word options given for grapheme or sentence granularity are rejected.
    """
    check_granularity(granularity)
    if granularity == "word":
        if options is None:
            return WordSegmentationOptions()
        if isinstance(options, WordSegmentationOptions):
            return options
        return WordSegmentationOptions(locales_override=options.locales_override)

    if options is None:
        return SegmentationOptions()
    if isinstance(options, WordSegmentationOptions):
        raise ValueError(
            f"Word segmentation options are not supported for "
            f"{granularity!r} granularity"
        )
    return options


def with_default_locales(
    options: SegmentationOptions, locales: LocalesArgument | None
) -> SegmentationOptions:
    if options.locales_override is not None:
        return options
    return replace(options, locales_override=locales)
