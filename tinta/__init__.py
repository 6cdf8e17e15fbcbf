# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Tinta -- Color extraction and harmonious palette generation.

Derives a small representative color set from raw image pixels, and
grows a balanced palette of N colors from a single seed color.

Quick start::

    from tinta import extract_colors, generate_harmonious_palette

    extract_colors(rgba_bytes, count=5, seed=42)   # ['#1E3A5F', ...]
    generate_harmonious_palette("#FF0000", count=6)
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinta.engine import (
    DEFAULT_CONFIG,
    PaletteConfig,
    analyze_image,
    color_distance,
    extract_colors,
    generate_harmonious_palette,
    generate_palette,
    generate_shades,
    is_color_similar,
)
from tinta.engine.colorspace import is_valid_hex, normalize_hex
from tinta.engine.image import extract_colors_from_file, load_rgba
from tinta.engine.naming import color_name
from tinta.schema import (
    ColorFrequencyEntry,
    HarmoniousPaletteRequest,
    HarmonyPreset,
    ImageAnalysis,
)

__all__ = [
    # Core API
    "extract_colors",
    "generate_harmonious_palette",
    "generate_palette",
    # Helpers
    "analyze_image",
    "color_distance",
    "is_color_similar",
    "generate_shades",
    "color_name",
    "is_valid_hex",
    "normalize_hex",
    # Image files (requires Pillow)
    "extract_colors_from_file",
    "load_rgba",
    # Types
    "PaletteConfig",
    "DEFAULT_CONFIG",
    "HarmonyPreset",
    "HarmoniousPaletteRequest",
    "ImageAnalysis",
    "ColorFrequencyEntry",
    # Version
    "__version__",
]
