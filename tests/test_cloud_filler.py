"""
Tests for mapping words to font sizes and placing them in the cloud.
"""

import itertools
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from cloud_filler import FontManager, PlacedWord, WordsCloudFiller, font_size_for
from cloud_layouter import CloudLayouter
from geometry import Point, Size
from spiral import SquareSpiral


class FakeFontManager:
    """Measures words as half a font size per letter, without loading fonts."""

    def measure(self, word, font_size):
        if word == "invisible":
            return Size(0, font_size)
        return Size(len(word) * font_size // 2, font_size)


def make_layouter(max_candidates=100_000):
    return CloudLayouter(
        Point(500, 500),
        spiral_factory=lambda: SquareSpiral(4),
        max_candidates=max_candidates,
    )


@pytest.mark.unit
class TestFontSizeFor:
    """Test the frequency to font size mapping."""

    def test_most_frequent_word_gets_max_size(self):
        assert font_size_for(10, 10, 40) == 40

    def test_sizes_scale_between_min_and_max(self):
        assert font_size_for(5, 10, 40) == 24
        assert font_size_for(0, 10, 40) == 8

    def test_never_below_one(self):
        assert font_size_for(1, 1000, 2) >= 1


@pytest.mark.unit
class TestWordsCloudFiller:
    """Test word placement through the filler."""

    def test_empty_input(self):
        result = WordsCloudFiller(make_layouter(), FakeFontManager(), 40).fill([])
        assert result.is_success
        assert result.value == []

    def test_places_words_in_order(self):
        words = [("cloud", 10), ("tag", 5), ("word", 2)]
        layouter = make_layouter()

        result = WordsCloudFiller(layouter, FakeFontManager(), 40).fill(words)

        assert result.is_success
        placed = result.value
        assert [p.word for p in placed] == ["cloud", "tag", "word"]
        assert [p.font_size for p in placed] == [40, 24, 14]
        assert placed[0] == PlacedWord(
            "cloud", 10, layouter.rectangles[0], 40
        )
        assert placed[0].rectangle.center == Point(500, 500)
        assert placed[0].rectangle.size == Size(100, 40)

    def test_placed_words_do_not_overlap(self):
        words = [(f"word{'x' * (i % 5)}", 30 - i) for i in range(30)]
        result = WordsCloudFiller(make_layouter(), FakeFontManager(), 30).fill(words)

        rectangles = [p.rectangle for p in result.value]
        assert len(rectangles) == 30
        for first, second in itertools.combinations(rectangles, 2):
            assert not first.intersects(second)

    def test_unplaceable_word_is_skipped(self):
        layouter = make_layouter(max_candidates=1)
        result = WordsCloudFiller(
            layouter, FakeFontManager(), 40, skip_unplaceable=True
        ).fill([("first", 3), ("second", 2)])

        assert result.is_success
        assert [p.word for p in result.value] == ["first"]
        assert len(layouter.rectangles) == 1

    def test_unplaceable_word_fails_when_not_skipping(self):
        layouter = make_layouter(max_candidates=1)
        result = WordsCloudFiller(
            layouter, FakeFontManager(), 40, skip_unplaceable=False
        ).fill([("first", 3), ("second", 2)])

        assert not result.is_success
        assert result.error_message.startswith("Can't place word 'second'. No space found")

    def test_zero_sized_word_is_always_skipped(self):
        result = WordsCloudFiller(
            make_layouter(), FakeFontManager(), 40, skip_unplaceable=False
        ).fill([("visible", 3), ("invisible", 2), ("shown", 1)])

        assert result.is_success
        assert [p.word for p in result.value] == ["visible", "shown"]


@pytest.mark.unit
class TestFontManager:
    """Test font loading errors."""

    def test_missing_font_is_unavailable(self):
        assert not FontManager("no-such-font-file.ttf").is_available()

    def test_missing_font_raises_on_load(self):
        with pytest.raises(OSError):
            FontManager("no-such-font-file.ttf").get_font(12)
