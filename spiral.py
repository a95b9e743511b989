"""
Spiral point generators for placement candidates.

A spiral is an infinite iterator of integer offsets around (0, 0). Offsets move
outward in small steps and are never re-emitted. A spiral cannot be rewound;
build a new instance to start again from the center.
"""

import math
from abc import ABC, abstractmethod

from config import LAYOUT_CONFIG
from geometry import Point


class Spiral(ABC):
    """Abstract base class for spirals."""

    def __iter__(self) -> "Spiral":
        return self

    @abstractmethod
    def __next__(self) -> Point:
        """Return the next offset."""

    @property
    @abstractmethod
    def radius(self) -> float:
        """Distance of the last emitted offset from the origin."""


class SquareSpiral(Spiral):
    """
    Square spiral walking the rings of growing concentric squares.

    Starting at (0, 0) it walks legs of length 1, 1, 2, 2, 3, 3, ... turning a
    quarter turn after each leg. Each ring is finished before the next one is
    entered, so the ring index never decreases.
    """

    # right, down, left, up (image coordinates)
    DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

    def __init__(self, step: int = None):
        """
        Initialize the square spiral.

        Args:
            step: Distance in pixels between neighbouring offsets
        """
        step = LAYOUT_CONFIG["spiral_step"] if step is None else step
        if step <= 0:
            raise ValueError(f"Spiral step must be positive, got {step}")
        self.step = step

        self._x = 0
        self._y = 0
        self._direction = 0
        self._leg_length = 1
        self._leg_progress = 0
        self._started = False

    def __next__(self) -> Point:
        if not self._started:
            self._started = True
            return Point(0, 0)

        dx, dy = self.DIRECTIONS[self._direction]
        self._x += dx
        self._y += dy

        self._leg_progress += 1
        if self._leg_progress == self._leg_length:
            self._leg_progress = 0
            self._direction = (self._direction + 1) % 4
            # Legs grow every second turn
            if self._direction % 2 == 0:
                self._leg_length += 1

        return Point(self._x * self.step, self._y * self.step)

    @property
    def radius(self) -> float:
        return max(abs(self._x), abs(self._y)) * self.step


class ArchimedeanSpiral(Spiral):
    """
    Continuous spiral r = step * theta / 2pi, rounded to integer points.

    The angle increment shrinks as the radius grows so that neighbouring
    candidates stay about ``step`` pixels apart along the arc. Rounded points
    already emitted on an earlier turn are skipped.
    """

    def __init__(self, step: int = None, angle_step: float = None):
        """
        Initialize the Archimedean spiral.

        Args:
            step: Distance in pixels between successive turns and between candidates
            angle_step: Largest angle increment in radians, used near the center
        """
        step = LAYOUT_CONFIG["spiral_step"] if step is None else step
        angle_step = LAYOUT_CONFIG["angle_step"] if angle_step is None else angle_step
        if step <= 0:
            raise ValueError(f"Spiral step must be positive, got {step}")
        if angle_step <= 0:
            raise ValueError(f"Angle step must be positive, got {angle_step}")
        self.step = step
        self.angle_step = angle_step

        self._theta = 0.0
        self._radius = 0.0
        self._emitted = set()

    def __next__(self) -> Point:
        while True:
            self._radius = self.step * self._theta / (2 * math.pi)
            point = Point(
                int(round(self._radius * math.cos(self._theta))),
                int(round(self._radius * math.sin(self._theta))),
            )
            self._theta += min(self.angle_step, self.step / max(self._radius, self.step))
            if point not in self._emitted:
                self._emitted.add(point)
                return point

    @property
    def radius(self) -> float:
        return self._radius


SPIRALS = {
    "square": SquareSpiral,
    "archimedean": ArchimedeanSpiral,
}


def create_spiral(kind: str = None, step: int = None, **kwargs) -> Spiral:
    """
    Create a spiral of the given kind.

    Args:
        kind: 'square' or 'archimedean' (default from LAYOUT_CONFIG)
        step: Distance between neighbouring offsets
        **kwargs: Extra arguments for the specific spiral (angle_step)

    Returns:
        A fresh spiral positioned at the origin
    """
    kind = (kind or LAYOUT_CONFIG["spiral"]).lower()
    if kind not in SPIRALS:
        raise ValueError(f"Unsupported spiral type: {kind}")

    if kind == "archimedean":
        return ArchimedeanSpiral(step=step, angle_step=kwargs.get("angle_step"))
    return SquareSpiral(step=step)
