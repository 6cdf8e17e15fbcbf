# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Color similarity metric.

Plain Euclidean distance over the 0-255 RGB channels. Not perceptually
uniform, but fast and deterministic; black to white is ~441.67.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tinta.engine.colorspace import hex_to_rgb, random_hex


logger = logging.getLogger(__name__)

ColorLike = Union[str, Sequence[float], NDArray]

DEFAULT_SIMILARITY_THRESHOLD = 50.0


def _as_rgb(color: ColorLike) -> NDArray[np.float64]:
    if isinstance(color, str):
        return np.array(hex_to_rgb(color), dtype=np.float64)
    return np.asarray(color, dtype=np.float64)[:3]


def color_distance(a: ColorLike, b: ColorLike) -> float:
    """
    Euclidean distance between two colors.

    Args:
        a, b: Canonical hex strings or (r, g, b) triples

    Returns:
        Distance in 0-255 channel units
    """
    delta = _as_rgb(a) - _as_rgb(b)
    return float(np.sqrt(np.sum(delta ** 2)))


def is_color_similar(
    candidate: ColorLike,
    existing: Iterable[ColorLike],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> bool:
    """
    True if candidate is closer than ``threshold`` to any existing color.

    Stops at the first match. An empty ``existing`` is never similar.
    """
    rgb = _as_rgb(candidate)
    for other in existing:
        delta = rgb - _as_rgb(other)
        if float(np.sqrt(np.sum(delta ** 2))) < threshold:
            return True
    return False


def pairwise_distances(
    pixels: NDArray[np.float64],
    centroids: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Distances from every pixel to every centroid.

    Args:
        pixels: (N, 3) array
        centroids: (K, 3) array

    Returns:
        (N, K) array of Euclidean distances
    """
    # |p - c|^2 = |p|^2 - 2 p.c + |c|^2, avoids an (N, K, 3) intermediate
    sq = (
        np.sum(pixels ** 2, axis=1)[:, np.newaxis]
        - 2.0 * pixels @ centroids.T
        + np.sum(centroids ** 2, axis=1)[np.newaxis, :]
    )
    return np.sqrt(np.maximum(sq, 0.0))


def backfill_random(
    colors: list[str],
    target: int,
    rng: np.random.Generator,
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    max_attempts: int = 100,
) -> list[str]:
    """
    Append random colors until ``target`` is reached.

    The first ``max_attempts`` draws are rejected when similar to a color
    already in the list. After that, draws are accepted unconditionally so
    the target is always met.

    Returns:
        A new list; ``colors`` is not modified.
    """
    result = list(colors)
    attempts = 0
    while len(result) < target and attempts < max_attempts:
        attempts += 1
        candidate = random_hex(rng)
        if not is_color_similar(candidate, result, threshold):
            result.append(candidate)

    if len(result) < target:
        logger.warning(
            "Accepting %d random colors without similarity check after %d attempts",
            target - len(result),
            attempts,
        )
        while len(result) < target:
            result.append(random_hex(rng))

    return result
