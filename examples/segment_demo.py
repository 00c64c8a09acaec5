#!/usr/bin/env python3
"""
Segmentation demo: graphemes, words and sentences of one string.

Shows counting, forward and from-end indexing, the word-like filter and a
per-call locale override on a SegmentString.

Usage:
    python examples/segment_demo.py
"""

from segstring import SegmentationOptions, SegmentString, WordSegmentationOptions

TEXT = "Hi \U0001f44b\U0001f3fd! Segmentation is easy. Is it?"


def main() -> None:
    s = SegmentString(TEXT, "en-US")
    words_only = WordSegmentationOptions(is_word_like=True)

    print(f"Text: {TEXT!r}")
    print(f"Graphemes: {s.grapheme_count()} (code points: {len(TEXT)})")
    print(f"Grapheme 3 (emoji cluster): {s.grapheme_at(3)!r}")
    print(f"Words: {list(s.words(words_only))}")
    print(f"Last word: {s.word_at(-1, words_only)!r}")
    print(f"Sentences: {list(s.sentences())}")
    print(f"Sentence 10: {s.sentence_at(10)!r}")

    fr = SegmentationOptions(locales_override=["fr-CA", "fr"])
    print(f"Sentences (fr-CA, fr): {s.sentence_count(fr)}")
    print(f"Default locale unchanged: {s.locales!r}")


if __name__ == "__main__":
    main()
