"""
Cloud layouter: places rectangles as tightly as possible around a center point.

Each request walks a fresh spiral outward from the center and takes the first
candidate that does not overlap anything already placed.
"""

from typing import Callable, Optional, Tuple

import numpy as np

from config import LAYOUT_CONFIG
from geometry import Point, Rectangle, Size
from overlap import edges_array, overlap_mask
from result import Result
from spiral import Spiral, create_spiral

# Candidates tested per numpy pass
BATCH_SIZE = 1024


class LayoutError(Exception):
    """Base class for placement failures returned by CloudLayouter."""

    def __init__(self, message: str, size: Size):
        super().__init__(message)
        self.size = size


class InvalidSize(LayoutError):
    """Requested size has a non-positive width or height."""

    def __init__(self, size: Size):
        super().__init__(
            f"Invalid rectangle size {size.width}x{size.height}: "
            "width and height must be positive",
            size,
        )


class NoSpaceFound(LayoutError):
    """The search ceiling was reached without a collision-free candidate."""

    def __init__(self, size: Size, candidates: int):
        super().__init__(
            f"No space found for rectangle {size.width}x{size.height} "
            f"after {candidates} candidates",
            size,
        )
        self.candidates = candidates


class CloudLayouter:
    """Owns the cloud center and the growing sequence of placed rectangles."""

    def __init__(
        self,
        center: Point,
        spiral_factory: Optional[Callable[[], Spiral]] = None,
        max_candidates: Optional[int] = None,
        max_radius: Optional[float] = None,
    ):
        """
        Initialize the layouter.

        Args:
            center: Fixed center of the cloud
            spiral_factory: Callable returning a fresh spiral for each request
            max_candidates: Maximum candidates tried per request
            max_radius: Optional maximum spiral radius searched per request
        """
        if max_candidates is None:
            max_candidates = LAYOUT_CONFIG["max_candidates"]
        if max_radius is None:
            max_radius = LAYOUT_CONFIG["max_radius"]
        if max_candidates <= 0:
            raise ValueError(f"max_candidates must be positive, got {max_candidates}")

        self._center = center
        self._spiral_factory = spiral_factory or create_spiral
        self.max_candidates = max_candidates
        self.max_radius = max_radius
        self._rectangles = []
        self._edges = edges_array([])

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        """Placed rectangles in placement order."""
        return tuple(self._rectangles)

    def put_next_rectangle(self, size: Size) -> Result[Rectangle]:
        """
        Place a rectangle of the given size at the first free spiral position.

        Args:
            size: Width and height of the rectangle

        Returns:
            Result with the placed Rectangle, or a failure carrying
            InvalidSize or NoSpaceFound. A failure leaves the layout unchanged.
        """
        if size.is_empty:
            return Result.fail(InvalidSize(size))

        spiral = self._spiral_factory()
        tried = 0
        exhausted = False

        while tried < self.max_candidates and not exhausted:
            offsets = []
            for _ in range(min(BATCH_SIZE, self.max_candidates - tried)):
                offset = next(spiral)
                if self.max_radius is not None and spiral.radius > self.max_radius:
                    exhausted = True
                    break
                offsets.append(offset)

            index = self._first_free(offsets, size)
            if index is not None:
                return Result.ok(self._place(offsets[index], size))
            tried += len(offsets)

        return Result.fail(NoSpaceFound(size, tried))

    def _first_free(self, offsets, size: Size) -> Optional[int]:
        """Index of the first offset whose candidate overlaps nothing."""
        if not offsets:
            return None

        origins = np.array([(o.x, o.y) for o in offsets], dtype=np.int64).reshape(-1, 2)
        left = origins[:, 0] + (self._center.x - size.width // 2)
        top = origins[:, 1] + (self._center.y - size.height // 2)
        candidates = np.column_stack((left, top, left + size.width, top + size.height))

        free = ~overlap_mask(candidates, self._edges)
        if not free.any():
            return None
        return int(np.argmax(free))

    def _place(self, offset: Point, size: Size) -> Rectangle:
        rectangle = Rectangle.centered_at(self._center + offset, size)
        self._rectangles.append(rectangle)
        self._edges = np.vstack((self._edges, edges_array([rectangle])))
        return rectangle
