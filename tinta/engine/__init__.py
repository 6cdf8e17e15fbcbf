# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Numeric core of Tinta.

Pure functions over in-memory pixels and hex colors: no I/O, no global
state. Randomness is always drawn from an explicitly seeded generator.
"""

from tinta.engine.analyzer import analyze_image, extract_colors
from tinta.engine.config import DEFAULT_CONFIG, PaletteConfig
from tinta.engine.harmony import (
    generate_harmonious_palette,
    generate_palette,
    generate_shades,
)
from tinta.engine.metric import color_distance, is_color_similar

__all__ = [
    "extract_colors",
    "analyze_image",
    "generate_harmonious_palette",
    "generate_palette",
    "generate_shades",
    "color_distance",
    "is_color_similar",
    "PaletteConfig",
    "DEFAULT_CONFIG",
]
