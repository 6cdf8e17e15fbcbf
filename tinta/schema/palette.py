# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Record types for palette extraction and generation.

Design principles:
- Transient: every record lives for a single extraction or generation call
- Immutable: frozen dataclasses, built once and never updated
- Canonical: colors are "#RRGGBB" strings, uppercase, never shorthand
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Image analysis
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorFrequencyEntry:
    """
    One quantization bucket of an analyzed image.

    Attributes:
        rgb: First raw pixel seen in the bucket (its representative)
        count: Number of sampled pixels that fell in the bucket
        hex: Canonical hex of the representative pixel
    """
    rgb: tuple[int, int, int]
    count: int
    hex: str

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Bucket count must be >= 1, got {self.count}")


@dataclass(frozen=True, eq=False)
class ImageAnalysis:
    """
    Sampling statistics for one pixel buffer.

    Attributes:
        pixels: (N, 3) uint8 array of sampled opaque pixels
        color_frequency: Buckets keyed by quantized (r, g, b), in first-seen order
        unique_colors: Number of buckets
        sampled_pixels: Number of sampled opaque pixels (N)
        color_diversity: unique_colors / sampled_pixels (0 for empty samples)
        total_pixels: Pixel count of the whole buffer
        sampling_rate: Stride used to walk the buffer
    """
    pixels: NDArray[np.uint8] = field(repr=False)
    color_frequency: dict[tuple[int, int, int], ColorFrequencyEntry] = field(repr=False)
    unique_colors: int
    sampled_pixels: int
    color_diversity: float
    total_pixels: int
    sampling_rate: int

    @property
    def is_empty(self) -> bool:
        """True when no opaque pixel was sampled."""
        return self.sampled_pixels == 0


# =============================================================================
# Harmonious generation
# =============================================================================


class GenerationStep(Enum):
    """Tokens naming what the generator produces, in priority lists."""
    WHITE = "white"
    BLACK = "black"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "splitComplementary"
    SQUARE = "square"
    COMPOUND = "compound"
    VARIATIONS = "variations"


class HarmonyPreset(Enum):
    """
    Generation presets.

    WEB_FRIENDLY mixes neutrals with common harmonies and is the default.
    The rest are strict color-theory harmonies.
    """
    WEB_FRIENDLY = "webFriendly"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "splitComplementary"
    SQUARE = "square"
    COMPOUND = "compound"


@dataclass(frozen=True, slots=True)
class HarmoniousPaletteRequest:
    """
    Input to harmonious palette generation.

    Attributes:
        count: Exact number of colors wanted
        seed_color: Base color; falls back to existing[0], then to random
        existing: Colors already in the palette, kept in order
        preset: Generation priority preset
    """
    count: int
    seed_color: Optional[str] = None
    existing: tuple[str, ...] = ()
    preset: HarmonyPreset = HarmonyPreset.WEB_FRIENDLY

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")
        # Accept any iterable, store a tuple
        object.__setattr__(self, "existing", tuple(self.existing))
