import pytest

from segstring import (
    SegmentAccessor,
    SegmentationOptions,
    SegmenterCache,
    SegmentString,
    WordSegmentationOptions,
)

TEXT = "Hello, world! This is a test."
WORD_LIKE = WordSegmentationOptions(is_word_like=True)


class RecordingEngine:
    def __init__(self, locales, granularity):
        self.locales = locales

    def segment(self, text):
        yield text, 0, None


@pytest.fixture
def recording_accessor():
    built = []

    def factory(locales, granularity):
        built.append(locales)
        return RecordingEngine(locales, granularity)

    return SegmentAccessor(SegmenterCache(factory)), built


class TestSegmentString:
    @pytest.fixture
    def segment_string(self):
        return SegmentString(TEXT, "en-US")

    def test_segments(self, segment_string):
        words = list(segment_string.segments("word"))
        assert "Hello" in words
        assert "world" in words
        assert "".join(words) == TEXT

    def test_counts(self, segment_string):
        assert segment_string.grapheme_count() == len(TEXT)
        assert segment_string.word_count() == 14
        assert segment_string.word_count(WORD_LIKE) == 6
        assert segment_string.sentence_count() == 2

    def test_at(self, segment_string):
        assert segment_string.grapheme_at(0) == "H"
        assert segment_string.grapheme_at(-1) == "."
        assert segment_string.word_at(3) == "world"
        assert segment_string.word_at(-1, WORD_LIKE) == "test"
        assert segment_string.sentence_at(0) == "Hello, world! "
        assert segment_string.sentence_at(1) == "This is a test."
        assert segment_string.sentence_at(2) is None

    def test_raw(self, segment_string):
        record = segment_string.raw_segment_at(2, "sentence")
        assert record is None
        record = segment_string.raw_segment_at(-1, "sentence")
        assert record.char_start == len("Hello, world! ")
        assert [r.text for r in segment_string.raw_graphemes()][:2] == ["H", "e"]
        assert all(r.is_word_like for r in segment_string.raw_words(WORD_LIKE))
        assert len(list(segment_string.raw_sentences())) == 2

    def test_shortcuts_match_generic_calls(self, segment_string):
        assert list(segment_string.graphemes()) == list(
            segment_string.segments("grapheme")
        )
        assert list(segment_string.words()) == list(segment_string.segments("word"))
        assert list(segment_string.sentences()) == list(
            segment_string.segments("sentence")
        )

    def test_text_and_locales(self, segment_string):
        assert segment_string.text == TEXT
        assert segment_string.locales == "en-US"

    def test_word_options_rejected_for_sentences(self, segment_string):
        with pytest.raises(ValueError):
            segment_string.segment_count("sentence", WordSegmentationOptions())


def test_default_locales_are_used(recording_accessor):
    accessor, built = recording_accessor
    s = SegmentString("abc", ["de-DE", "en-US"], accessor=accessor)

    assert s.word_count() == 1
    assert built == [["de-DE", "en-US"]]


def test_override_applies_to_one_call_only(recording_accessor):
    accessor, built = recording_accessor
    s = SegmentString("abc", "en-US", accessor=accessor)

    s.sentence_count(SegmentationOptions(locales_override="fr-FR"))
    s.sentence_count()

    assert built == ["fr-FR", "en-US"]
    assert s.locales == "en-US"


def test_override_keeps_word_filter(recording_accessor):
    accessor, built = recording_accessor
    s = SegmentString("abc", "en-US", accessor=accessor)

    options = WordSegmentationOptions(locales_override="ja", is_word_like=True)
    # The recording engine never marks segments word-like.
    assert s.word_count(options) == 0
    assert built == ["ja"]
    assert options.locales_override == "ja"


def test_no_default_locale(recording_accessor):
    accessor, built = recording_accessor
    SegmentString("abc", accessor=accessor).grapheme_count()
    assert built == [None]
