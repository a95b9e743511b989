"""
Tag cloud renderer.
Draws placed words (or bare rectangles) onto a Pillow image and saves it.
"""

import os
from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw
import matplotlib.colors as mcolors

from cloud_filler import FontManager, PlacedWord
from config import CLOUD_CONFIG, OUTPUT_CONFIG
from geometry import Point, Rectangle
from result import Result

RGB = Tuple[int, int, int]

# Exponent smoothing the word color fade
COLOR_SMOOTHING = 0.4


def parse_color(spec: str) -> Result[RGB]:
    """Parse any matplotlib color spec ('navy', '#ff8800', ...) into an RGB tuple."""
    try:
        r, g, b = mcolors.to_rgb(spec)
    except ValueError:
        return Result.fail(f"Invalid color: {spec}")
    return Result.ok((int(round(r * 255)), int(round(g * 255)), int(round(b * 255))))


def parse_image_format(extension: str) -> Result[str]:
    """Resolve a file extension to the Pillow format name able to save it."""
    extension = extension.lower().lstrip(".")
    image_format = Image.registered_extensions().get(f".{extension}")
    if image_format is None or image_format not in Image.SAVE:
        return Result.fail("Invalid image format.")
    return Result.ok(image_format)


def scale_color(color: RGB, ratio: float) -> RGB:
    return tuple(int(channel * ratio) for channel in color)


class TagCloudRenderer:
    """Handles the drawing and saving of tag cloud images."""

    def __init__(
        self,
        width: int = None,
        height: int = None,
        color: str = None,
        background_color: str = None,
        image_format: str = None,
    ):
        """
        Initialize the renderer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            color: Color the word colors fade toward
            background_color: Fill color of the ellipse behind each word
            image_format: File extension of the saved image
        """
        self.width = width or CLOUD_CONFIG["canvas_width"]
        self.height = height or CLOUD_CONFIG["canvas_height"]
        self.color = parse_color(color or CLOUD_CONFIG["color"]).get_value_or_raise()
        self.background_color = parse_color(
            background_color or CLOUD_CONFIG["background_color"]
        ).get_value_or_raise()
        self.extension = (image_format or CLOUD_CONFIG["image_format"]).lower().lstrip(".")
        self.image_format = parse_image_format(self.extension).get_value_or_raise()

    def check_bounds(self, placed: Sequence[PlacedWord]) -> Result[Sequence[PlacedWord]]:
        """Fail if any placed word falls outside the canvas."""
        for placed_word in placed:
            rectangle = placed_word.rectangle
            if (
                rectangle.left < 0
                or rectangle.top < 0
                or rectangle.right > self.width
                or rectangle.bottom > self.height
            ):
                return Result.fail("Too small image size")
        return Result.ok(placed)

    def word_color(self, index: int, count: int) -> RGB:
        return scale_color(self.color, (index / count) ** COLOR_SMOOTHING)

    def render(
        self, placed: Sequence[PlacedWord], font_manager: FontManager
    ) -> Result[Image.Image]:
        """Draw background ellipses and words, most frequent word darkest."""
        bounds = self.check_bounds(placed)
        if not bounds.is_success:
            return bounds

        image = Image.new("RGB", (self.width, self.height), "white")
        draw = ImageDraw.Draw(image)

        for placed_word in placed:
            draw.ellipse(placed_word.rectangle.as_box(), fill=self.background_color)

        for index, placed_word in enumerate(placed):
            offset_x, offset_y = font_manager.text_offset(
                placed_word.word, placed_word.font_size
            )
            draw.text(
                (
                    placed_word.rectangle.left - offset_x,
                    placed_word.rectangle.top - offset_y,
                ),
                placed_word.word,
                fill=self.word_color(index, len(placed)),
                font=font_manager.get_font(placed_word.font_size),
            )

        return Result.ok(image)

    def render_rectangles(
        self, rectangles: Sequence[Rectangle], center: Point
    ) -> Image.Image:
        """Outline each rectangle, brighter toward the cloud's edge."""
        image = Image.new("RGB", (self.width, self.height), "white")
        if not rectangles:
            return image

        draw = ImageDraw.Draw(image)
        centers = np.array([(r.center.x, r.center.y) for r in rectangles], dtype=float)
        distances = np.hypot(centers[:, 0] - center.x, centers[:, 1] - center.y)
        max_distance = distances.max()
        ratios = distances / max_distance if max_distance > 0 else np.zeros_like(distances)

        for rectangle, ratio in zip(rectangles, ratios):
            # Pillow's rectangle box is inclusive on the far edge
            left, top, right, bottom = rectangle.as_box()
            draw.rectangle(
                (left, top, right - 1, bottom - 1),
                outline=scale_color(self.color, float(ratio)),
            )
        return image

    def save(self, image: Image.Image, directory: str, name: str) -> Result[str]:
        """Save the image as <directory>/<name>.<ext> and return the path."""
        path = os.path.join(directory, f"{name}.{self.extension}")

        def write() -> str:
            image.save(path, self.image_format)
            return path

        saved = Result.of(write, "Can't save image")
        if saved.is_success and OUTPUT_CONFIG["verbose"]:
            print(f"Tag cloud saved to: {path}")
        return saved

    def render_and_save(
        self,
        placed: List[PlacedWord],
        font_manager: FontManager,
        directory: str,
        name: str,
    ) -> Result[str]:
        return self.render(placed, font_manager).then(
            lambda image: self.save(image, directory, name)
        )
