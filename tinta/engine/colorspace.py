# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Color representations and conversions.

Canonical color form is "#RRGGBB": leading '#', six uppercase hex digits.
Every color returned by Tinta is in this form, and every color accepted
is compared only after canonicalization.

HSL math goes through the standard library's colorsys (HLS ordering);
this module exposes it as (hue degrees, saturation, lightness).
"""

from __future__ import annotations

import colorsys
import re
from typing import Iterable

import numpy as np
from numpy.typing import NDArray


RGB = tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def is_valid_hex(value: str) -> bool:
    """True for 3- or 6-digit hex colors, with or without a leading '#'."""
    return isinstance(value, str) and _HEX_RE.match(value.strip()) is not None


def normalize_hex(value: str) -> str:
    """
    Canonicalize a hex color string.

    Expands 3-digit shorthand, uppercases, and adds the leading '#'.

    Args:
        value: Hex string like "#f0a", "F0A", "#ff00aa"

    Returns:
        Canonical hex string like "#FF00AA"

    Raises:
        ValueError: If value is not a 3- or 6-digit hex color
    """
    if not is_valid_hex(value):
        raise ValueError(f"Invalid hex color: {value!r}")

    digits = value.strip().lstrip("#").upper()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a canonical hex color into an (r, g, b) triple of 0-255 ints.

    Args:
        hex_color: Hex string like "#3941C8" or "3941C8"
    """
    digits = hex_color.lstrip("#")
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Format channel values as a canonical hex color.

    Values are rounded half-up and clamped to 0-255.
    """
    channels = (max(0, min(255, int(np.floor(float(c) + 0.5)))) for c in (r, g, b))
    return "#" + "".join(f"{c:02X}" for c in channels)


def pixels_to_hex(pixels: NDArray | Iterable[Iterable[float]]) -> list[str]:
    """Convert an (N, 3) array of RGB values to canonical hex strings."""
    return [rgb_to_hex(r, g, b) for r, g, b in np.asarray(pixels).reshape(-1, 3)]


# =============================================================================
# Hex ↔ HSL
# =============================================================================


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """
    Convert a hex color to HSL.

    Returns:
        (H, S, L) with H in degrees [0, 360), S and L in [0, 1].
        Achromatic colors report H = 0.
    """
    r, g, b = hex_to_rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return (h * 360.0) % 360.0, s, l


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to a canonical hex color.

    Args:
        h: Hue in degrees (any value, wrapped into [0, 360))
        s: Saturation, clamped to [0, 1]
        l: Lightness, clamped to [0, 1]
    """
    s = min(1.0, max(0.0, s))
    l = min(1.0, max(0.0, l))
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
    return rgb_to_hex(r * 255.0, g * 255.0, b * 255.0)


def rotate_hue(hex_color: str, degrees: float) -> str:
    """Rotate the hue of a color, keeping its saturation and lightness."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h + degrees, s, l)


# =============================================================================
# Random colors
# =============================================================================


def random_hex(rng: np.random.Generator) -> str:
    """Draw a uniformly random color from the full 24-bit space."""
    r, g, b = rng.integers(0, 256, size=3)
    return rgb_to_hex(r, g, b)
