# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Dominant color extraction from raw pixel buffers.

Two strategies, picked per image:
1. Direct: rank quantized color buckets by frequency
2. K-means: cluster the sampled pixels (k-means++ seeding)

Flat or simple images (few buckets, few pixels, low diversity) use the
direct path; the frequency table already is the answer there. Everything
else is clustered. Either way the result is deduplicated with the color
metric and backfilled to the requested count.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tinta.engine.colorspace import pixels_to_hex, rgb_to_hex
from tinta.engine.config import DEFAULT_CONFIG, PaletteConfig
from tinta.engine.metric import (
    DEFAULT_SIMILARITY_THRESHOLD,
    backfill_random,
    is_color_similar,
    pairwise_distances,
)
from tinta.schema import ColorFrequencyEntry, ImageAnalysis


logger = logging.getLogger(__name__)

PixelBuffer = Union[bytes, bytearray, memoryview, NDArray[np.uint8], Sequence[int]]
Seed = Union[None, int, np.random.Generator]

# Returned for buffers with no opaque pixels
FALLBACK_COLOR = "#000000"


# =============================================================================
# Sampling and frequency tracking
# =============================================================================


def _as_rgba(pixel_buffer: PixelBuffer) -> NDArray[np.uint8]:
    """
    View a pixel buffer as an (N, 4) RGBA array.

    Accepts flat RGBA bytes, flat uint8 arrays, and arrays whose last axis
    holds 4 (RGBA) or 3 (RGB, treated as fully opaque) channels, such as
    (N, 4) or (H, W, 3). A trailing partial pixel is dropped.

    Raises:
        ValueError: If a multi-dimensional array has neither 3 nor 4 channels.
    """
    if isinstance(pixel_buffer, (bytes, bytearray, memoryview)):
        data = np.frombuffer(pixel_buffer, dtype=np.uint8)
    elif isinstance(pixel_buffer, np.ndarray):
        data = pixel_buffer.astype(np.uint8, copy=False)
        if data.ndim >= 2:
            if data.shape[-1] == 3:
                alpha = np.full(data.shape[:-1] + (1,), 255, dtype=np.uint8)
                data = np.concatenate([data, alpha], axis=-1)
            elif data.shape[-1] != 4:
                raise ValueError(
                    f"Expected 3 or 4 channels on the last axis, got shape {data.shape}"
                )
        data = data.reshape(-1)
    elif isinstance(pixel_buffer, (list, tuple)):
        data = np.asarray(pixel_buffer, dtype=np.uint8).reshape(-1)
    else:
        raise TypeError(
            f"Expected bytes-like object, list or numpy array, got {type(pixel_buffer)}"
        )

    usable = len(data) - len(data) % 4
    return data[:usable].reshape(-1, 4)


def calculate_sampling_rate(
    total_pixels: int,
    config: Optional[PaletteConfig] = None,
) -> int:
    """
    Stride for walking a buffer of ``total_pixels`` pixels.

    With default tiers: 1 below 10k pixels, 4 below 100k, 16 below 500k,
    32 above.
    """
    cfg = config or DEFAULT_CONFIG
    return cfg.sampling_rate(total_pixels)


def quantize_color(r: int, g: int, b: int, step: int = 16) -> tuple[int, int, int]:
    """Round each channel down to a multiple of ``step`` (37 -> 32)."""
    return (r // step) * step, (g // step) * step, (b // step) * step


def _track_frequency(
    pixels: NDArray[np.uint8],
    step: int,
) -> dict[tuple[int, int, int], ColorFrequencyEntry]:
    """Bucket pixels by quantized color, keeping first-seen order."""
    if len(pixels) == 0:
        return {}

    quantized = (pixels.astype(np.int32) // step) * step
    keys, first_idx, counts = np.unique(
        quantized, axis=0, return_index=True, return_counts=True
    )

    frequency: dict[tuple[int, int, int], ColorFrequencyEntry] = {}
    for i in np.argsort(first_idx, kind="stable"):
        r, g, b = (int(v) for v in pixels[first_idx[i]])
        key = tuple(int(v) for v in keys[i])
        frequency[key] = ColorFrequencyEntry(
            rgb=(r, g, b),
            count=int(counts[i]),
            hex=rgb_to_hex(r, g, b),
        )
    return frequency


def analyze_image(
    pixel_buffer: PixelBuffer,
    config: Optional[PaletteConfig] = None,
) -> ImageAnalysis:
    """
    Sample a pixel buffer and build its quantized frequency table.

    Walks the buffer at an adaptive stride, skips pixels with alpha at or
    below the alpha threshold, and counts the rest per quantization bucket.

    Args:
        pixel_buffer: Flat RGBA bytes (4 per pixel, row-major) or array
        config: Tunables (uses defaults if None)

    Returns:
        ImageAnalysis for this buffer
    """
    cfg = config or DEFAULT_CONFIG

    rgba = _as_rgba(pixel_buffer)
    total_pixels = len(rgba)
    sampling_rate = cfg.sampling_rate(total_pixels)

    sampled = rgba[::sampling_rate]
    opaque = sampled[sampled[:, 3] > cfg.alpha_threshold]
    pixels = np.ascontiguousarray(opaque[:, :3])

    frequency = _track_frequency(pixels, cfg.quantization_step)
    unique_colors = len(frequency)
    sampled_pixels = len(pixels)
    diversity = unique_colors / sampled_pixels if sampled_pixels > 0 else 0.0

    return ImageAnalysis(
        pixels=pixels,
        color_frequency=frequency,
        unique_colors=unique_colors,
        sampled_pixels=sampled_pixels,
        color_diversity=diversity,
        total_pixels=total_pixels,
        sampling_rate=sampling_rate,
    )


# =============================================================================
# Strategies
# =============================================================================


def should_use_direct_extraction(
    analysis: ImageAnalysis,
    count: int,
    config: Optional[PaletteConfig] = None,
) -> bool:
    """True if the frequency table alone is a good enough answer."""
    cfg = config or DEFAULT_CONFIG
    return (
        analysis.unique_colors <= count * cfg.direct_unique_factor
        or analysis.sampled_pixels < cfg.direct_min_pixels
        or analysis.color_diversity < cfg.direct_diversity_threshold
    )


def rank_by_frequency(
    color_frequency: dict[tuple[int, int, int], ColorFrequencyEntry],
) -> list[str]:
    """Bucket representatives, most frequent first (ties keep first-seen order)."""
    entries = sorted(color_frequency.values(), key=lambda e: e.count, reverse=True)
    return [e.hex for e in entries]


def extract_direct_colors(
    color_frequency: dict[tuple[int, int, int], ColorFrequencyEntry],
    count: int,
) -> list[str]:
    """Top ``count`` bucket representatives by frequency."""
    return rank_by_frequency(color_frequency)[:count]


def initialize_centroids(
    data: NDArray[np.float64],
    k: int,
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    """
    K-means++ seeding.

    First centroid is a uniformly random pixel. Each following one is drawn
    with probability proportional to its squared distance to the nearest
    centroid chosen so far, or uniformly if every distance is zero.

    Args:
        data: (N, 3) pixels
        k: Number of centroids
        rng: Random source

    Returns:
        (k, 3) array of initial centroids
    """
    n = len(data)
    centroids = np.empty((k, 3), dtype=np.float64)
    centroids[0] = data[rng.integers(n)]

    nearest_sq = np.sum((data - centroids[0]) ** 2, axis=1)
    for i in range(1, k):
        total = nearest_sq.sum()
        if total == 0:
            idx = rng.integers(n)
        else:
            idx = rng.choice(n, p=nearest_sq / total)
        centroids[i] = data[idx]
        nearest_sq = np.minimum(nearest_sq, np.sum((data - centroids[i]) ** 2, axis=1))

    return centroids


def cluster_pixels(
    data: NDArray[np.float64],
    k: int,
    rng: np.random.Generator,
    max_iterations: int = 20,
    convergence_threshold: float = 1.0,
) -> tuple[NDArray[np.float64], int]:
    """
    K-means over RGB pixels.

    Centroids are recomputed as the rounded channel-wise mean of their
    members. A centroid whose cluster comes up empty is moved to a random
    pixel. Stops once no centroid moves by ``convergence_threshold`` or
    more, or after ``max_iterations`` rounds.

    Args:
        data: (N, 3) pixels, N >= k
        k: Number of clusters
        rng: Random source for seeding and empty-cluster reseeding
        max_iterations: Round cap
        convergence_threshold: Largest movement (Euclidean) that counts as converged

    Returns:
        (centroids, iterations) where centroids is (k, 3) in internal order
    """
    n = len(data)
    centroids = initialize_centroids(data, k, rng)

    iterations = 0
    for iterations in range(1, max_iterations + 1):
        previous = centroids
        labels = np.argmin(pairwise_distances(data, centroids), axis=1)

        centroids = np.empty_like(previous)
        for j in range(k):
            members = data[labels == j]
            if len(members) == 0:
                centroids[j] = data[rng.integers(n)]
            else:
                centroids[j] = np.floor(members.mean(axis=0) + 0.5)

        movement = np.sqrt(np.sum((centroids - previous) ** 2, axis=1)).max()
        if movement < convergence_threshold:
            break

    return centroids, iterations


def extract_with_kmeans(
    pixels: NDArray[np.uint8],
    count: int,
    *,
    config: Optional[PaletteConfig] = None,
    seed: Seed = None,
) -> list[str]:
    """
    Cluster sampled pixels into ``count`` colors.

    When there are no more pixels than ``count``, the pixels themselves
    are returned.
    """
    cfg = config or DEFAULT_CONFIG
    data = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)

    if len(data) <= count:
        return pixels_to_hex(data)

    rng = np.random.default_rng(seed)
    centroids, iterations = cluster_pixels(
        data,
        k=count,
        rng=rng,
        max_iterations=cfg.max_iterations,
        convergence_threshold=cfg.convergence_threshold,
    )
    logger.debug("k-means finished after %d iterations (k=%d, n=%d)", iterations, count, len(data))
    return pixels_to_hex(centroids)


# =============================================================================
# Post-processing
# =============================================================================


def deduplicate_colors(
    colors: Sequence[str],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[str]:
    """Drop colors similar to one already accepted, keeping order."""
    accepted: list[str] = []
    for color in colors:
        if not is_color_similar(color, accepted, threshold):
            accepted.append(color)
    return accepted


def ensure_color_count(
    colors: Sequence[str],
    target_count: int,
    color_frequency: dict[tuple[int, int, int], ColorFrequencyEntry],
    *,
    config: Optional[PaletteConfig] = None,
    seed: Seed = None,
) -> list[str]:
    """
    Trim or backfill ``colors`` to exactly ``target_count``.

    Backfill draws from the frequency table first (most frequent first,
    skipping present or similar colors), then from random colors.
    """
    cfg = config or DEFAULT_CONFIG

    if len(colors) >= target_count:
        return list(colors[:target_count])

    result = list(colors)
    for candidate in rank_by_frequency(color_frequency):
        if len(result) >= target_count:
            break
        if candidate in result:
            continue
        if not is_color_similar(candidate, result, cfg.similarity_threshold):
            result.append(candidate)

    from_frequency = len(result) - len(colors)
    if len(result) < target_count:
        result = backfill_random(
            result,
            target_count,
            np.random.default_rng(seed),
            threshold=cfg.similarity_threshold,
            max_attempts=cfg.max_random_attempts,
        )

    logger.debug(
        "Backfilled %d colors from frequency table, %d random",
        from_frequency,
        len(result) - len(colors) - from_frequency,
    )
    return result[:target_count]


# =============================================================================
# Entry point
# =============================================================================


def extract_colors(
    pixel_buffer: PixelBuffer,
    count: int = 5,
    *,
    config: Optional[PaletteConfig] = None,
    seed: Seed = None,
) -> list[str]:
    """
    Extract ``count`` representative colors from a pixel buffer.

    Args:
        pixel_buffer: Flat RGBA bytes (4 per pixel, row-major), or a uint8
            array of shape (N*4,), (H, W, 4) or (H, W, 3)
        count: Number of colors wanted (>= 1)
        config: Tunables (uses defaults if None)
        seed: None, int or numpy Generator driving every random choice.
            Pass a fixed value for reproducible results.

    Returns:
        Canonical hex colors, exactly ``count`` long. A buffer with no
        opaque pixels yields ["#000000"].

    Example:
        >>> from tinta import extract_colors
        >>> extract_colors(bytes([255, 0, 0, 255] * 100), count=1)
        ['#FF0000']
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    cfg = config or DEFAULT_CONFIG
    rng = np.random.default_rng(seed)

    analysis = analyze_image(pixel_buffer, cfg)
    if analysis.is_empty:
        logger.debug("No opaque pixels in %d-pixel buffer", analysis.total_pixels)
        return [FALLBACK_COLOR]

    direct = should_use_direct_extraction(analysis, count, cfg)
    logger.debug(
        "Sampled %d/%d pixels (rate %d), %d buckets, diversity %.3f, strategy=%s",
        analysis.sampled_pixels,
        analysis.total_pixels,
        analysis.sampling_rate,
        analysis.unique_colors,
        analysis.color_diversity,
        "direct" if direct else "kmeans",
    )

    if direct:
        colors = extract_direct_colors(analysis.color_frequency, count)
    else:
        colors = extract_with_kmeans(analysis.pixels, count, config=cfg, seed=rng)

    colors = deduplicate_colors(colors, cfg.similarity_threshold)
    return ensure_color_count(
        colors,
        count,
        analysis.color_frequency,
        config=cfg,
        seed=rng,
    )
