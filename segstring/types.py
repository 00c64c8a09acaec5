from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Union

Granularity = Literal["grapheme", "word", "sentence"]

# A single identifier or an ordered list of identifiers (fallback order).
LocalesArgument = Union[str, Sequence[str]]


@dataclass(frozen=True)
class SegmentRecord:
    """One segment of an input string with its offset into that string."""

    text: str
    char_start: int
    # Only populated under word granularity.
    is_word_like: bool | None = None

    @property
    def char_end(self) -> int:
        return self.char_start + len(self.text)
