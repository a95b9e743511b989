"""
Maps ranked words to font sizes and feeds their measured boxes to the layouter.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from PIL import ImageFont

from cloud_layouter import CloudLayouter, InvalidSize
from config import CLOUD_CONFIG, OUTPUT_CONFIG
from geometry import Rectangle, Size
from result import Result


class FontManager:
    """Handles font loading and text size calculations."""

    def __init__(self, font_name: str = None):
        self.font_name = font_name or CLOUD_CONFIG["font_name"]
        self._font_cache: Dict[int, ImageFont.FreeTypeFont] = {}

    def get_font(self, font_size: int) -> ImageFont.FreeTypeFont:
        """Get a font of the specified size with caching. Raises OSError if missing."""
        if font_size not in self._font_cache:
            self._font_cache[font_size] = ImageFont.truetype(self.font_name, font_size)
        return self._font_cache[font_size]

    def is_available(self) -> bool:
        try:
            self.get_font(CLOUD_CONFIG["font_size"])
        except OSError:
            return False
        return True

    def text_offset(self, word: str, font_size: int) -> Tuple[int, int]:
        """Offset of the glyph box from the drawing origin."""
        left, top, _, _ = self.get_font(font_size).getbbox(word)
        return int(left), int(top)

    def measure(self, word: str, font_size: int) -> Size:
        left, top, right, bottom = self.get_font(font_size).getbbox(word)
        return Size(math.ceil(right - left), math.ceil(bottom - top))


def font_size_for(count: int, max_count: int, max_font_size: float) -> int:
    """Scale a word count linearly between the smallest and largest font size."""
    min_font_size = max_font_size / CLOUD_CONFIG["font_size_ratio"]
    size = min_font_size + (max_font_size - min_font_size) * count / max_count
    return max(1, int(round(size)))


@dataclass(frozen=True)
class PlacedWord:
    """A word with its position in the cloud and the font size it is drawn with."""

    word: str
    count: int
    rectangle: Rectangle
    font_size: int


class WordsCloudFiller:
    """Places ranked words into a cloud, most frequent first."""

    def __init__(
        self,
        layouter: CloudLayouter,
        font_manager: FontManager,
        max_font_size: float = None,
        skip_unplaceable: bool = None,
    ):
        self.layouter = layouter
        self.font_manager = font_manager
        self.max_font_size = max_font_size or CLOUD_CONFIG["font_size"]
        self.skip_unplaceable = (
            CLOUD_CONFIG["skip_unplaceable_words"]
            if skip_unplaceable is None
            else skip_unplaceable
        )

    def fill(self, words: Sequence[Tuple[str, int]]) -> Result[List[PlacedWord]]:
        """
        Place every word in the layouter.

        Args:
            words: (word, count) pairs sorted by descending count

        Returns:
            Result with the placed words in placement order
        """
        if not words:
            return Result.ok([])

        max_count = max(count for _, count in words)
        placed = []

        for word, count in words:
            font_size = font_size_for(count, max_count, self.max_font_size)
            size = self.font_manager.measure(word, font_size)
            placement = self.layouter.put_next_rectangle(size)

            if placement.is_success:
                placed.append(PlacedWord(word, count, placement.value, font_size))
            elif isinstance(placement.error, InvalidSize) or self.skip_unplaceable:
                if OUTPUT_CONFIG["verbose"]:
                    print(f"Skipping '{word}': {placement.error}")
            else:
                return placement.refine_error(f"Can't place word '{word}'")

        if OUTPUT_CONFIG["verbose"]:
            print(f"Placed {len(placed)} of {len(words)} words")
        return Result.ok(placed)
