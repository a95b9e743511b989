"""
Overlap detection between candidate and placed rectangles.

Rectangles are compared as (left, top, right, bottom) edge rows so that many
candidates can be tested against the placed set in one numpy pass.
"""

from typing import Iterable, Sequence

import numpy as np

from geometry import Rectangle


def edges_array(rectangles: Iterable[Rectangle]) -> np.ndarray:
    """Stack rectangles into an (n, 4) array of left, top, right, bottom."""
    rows = [rectangle.as_box() for rectangle in rectangles]
    return np.array(rows, dtype=np.int64).reshape(len(rows), 4)


def overlap_mask(candidates: np.ndarray, placed: np.ndarray) -> np.ndarray:
    """
    Flag every candidate that shares interior area with a placed rectangle.

    Args:
        candidates: (m, 4) edge array of candidate rectangles
        placed: (n, 4) edge array of placed rectangles

    Returns:
        Boolean array of length m
    """
    if len(placed) == 0:
        return np.zeros(len(candidates), dtype=bool)

    left, top, right, bottom = (candidates[:, i, np.newaxis] for i in range(4))
    hits = (
        (left < placed[:, 2])
        & (placed[:, 0] < right)
        & (top < placed[:, 3])
        & (placed[:, 1] < bottom)
    )
    return hits.any(axis=1)


def overlaps(candidate: Rectangle, placed: Sequence[Rectangle]) -> bool:
    """Check if the candidate shares interior area with any placed rectangle."""
    return bool(overlap_mask(edges_array([candidate]), edges_array(placed))[0])
