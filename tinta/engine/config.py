# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Tunable constants for extraction and palette generation.

Defaults reproduce the behavior palettes were designed against. Pass a
modified PaletteConfig to any entry point to change them for one call.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaletteConfig:
    """Configuration shared by the analyzer and the harmony generator."""

    # Euclidean RGB distance below which two colors count as duplicates.
    # Black to white is ~441.7.
    similarity_threshold: float = 50.0

    # Channel bucket width for frequency tracking (256 levels -> 16 buckets)
    quantization_step: int = 16

    # Pixels with alpha <= this are treated as background
    alpha_threshold: int = 128

    # (pixel count upper bound, stride) pairs, checked in order
    sampling_tiers: tuple[tuple[int, int], ...] = (
        (10_000, 1),
        (100_000, 4),
        (500_000, 16),
    )
    max_sampling_rate: int = 32

    # Direct frequency extraction is used when ANY of these hold
    direct_unique_factor: int = 2  # unique buckets <= factor * count
    direct_min_pixels: int = 1000  # sampled pixels < this
    direct_diversity_threshold: float = 0.3  # unique / sampled < this

    # K-means
    max_iterations: int = 20
    convergence_threshold: float = 1.0

    # Similarity-checked random draws before accepting unconditionally
    max_random_attempts: int = 100

    # Neutral variants of the base color (HSL, 0-1 scale)
    white_lightness: float = 0.95
    white_saturation_factor: float = 0.1
    black_lightness: float = 0.1
    black_saturation_factor: float = 0.8

    # Tonal variations: lightness * (1 +/- x), saturation * (1 +/- y)
    lightness_variation: float = 0.2
    saturation_variation: float = 0.3

    def __post_init__(self) -> None:
        """Validate ranges."""
        if self.similarity_threshold < 0:
            raise ValueError(
                f"similarity_threshold must be >= 0, got {self.similarity_threshold}"
            )
        if not 1 <= self.quantization_step <= 256:
            raise ValueError(
                f"quantization_step must be 1-256, got {self.quantization_step}"
            )
        if not 0 <= self.alpha_threshold <= 255:
            raise ValueError(
                f"alpha_threshold must be 0-255, got {self.alpha_threshold}"
            )
        for bound, rate in self.sampling_tiers:
            if bound <= 0 or rate < 1:
                raise ValueError(
                    f"sampling_tiers entries must be (bound > 0, stride >= 1), "
                    f"got {(bound, rate)}"
                )
        if self.max_sampling_rate < 1:
            raise ValueError(
                f"max_sampling_rate must be >= 1, got {self.max_sampling_rate}"
            )
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )
        if self.convergence_threshold < 0:
            raise ValueError(
                f"convergence_threshold must be >= 0, got {self.convergence_threshold}"
            )
        if self.max_random_attempts < 0:
            raise ValueError(
                f"max_random_attempts must be >= 0, got {self.max_random_attempts}"
            )
        for name in (
            "white_lightness",
            "white_saturation_factor",
            "black_lightness",
            "black_saturation_factor",
            "lightness_variation",
            "saturation_variation",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be 0-1, got {value}")

    def sampling_rate(self, total_pixels: int) -> int:
        """Stride for walking a buffer of ``total_pixels`` pixels."""
        for bound, rate in self.sampling_tiers:
            if total_pixels < bound:
                return rate
        return self.max_sampling_rate


DEFAULT_CONFIG = PaletteConfig()
