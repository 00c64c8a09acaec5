import dataclasses

import pytest

from segstring.options import (
    SegmentationOptions,
    WordSegmentationOptions,
    resolve_options,
    with_default_locales,
)


@pytest.mark.parametrize("granularity", ["grapheme", "sentence"])
def test_none_resolves_to_base_options(granularity):
    assert resolve_options(granularity, None) == SegmentationOptions()


def test_none_resolves_to_word_options():
    assert resolve_options("word", None) == WordSegmentationOptions()


def test_plain_options_widen_for_word():
    resolved = resolve_options("word", SegmentationOptions(locales_override="en"))
    assert resolved == WordSegmentationOptions(locales_override="en")


@pytest.mark.parametrize("granularity", ["grapheme", "sentence"])
def test_word_options_rejected(granularity):
    with pytest.raises(ValueError, match="not supported"):
        resolve_options(granularity, WordSegmentationOptions(is_word_like=True))


def test_unknown_granularity():
    with pytest.raises(ValueError, match="Unknown granularity"):
        resolve_options("line", None)


def test_options_are_frozen():
    options = WordSegmentationOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.is_word_like = True


def test_with_default_locales():
    base = WordSegmentationOptions(is_word_like=True)
    filled = with_default_locales(base, "en")
    assert filled == WordSegmentationOptions(locales_override="en", is_word_like=True)
    assert base.locales_override is None

    explicit = SegmentationOptions(locales_override="fr")
    assert with_default_locales(explicit, "en") is explicit
