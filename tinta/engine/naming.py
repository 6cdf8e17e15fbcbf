# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""Coarse human-readable color names from HSL."""

from __future__ import annotations

from tinta.engine.colorspace import hex_to_hsl, normalize_hex


# (exclusive upper hue bound in degrees, name)
_HUE_NAMES = (
    (15.0, "Red"),
    (45.0, "Orange"),
    (75.0, "Yellow"),
    (105.0, "Yellow Green"),
    (135.0, "Green"),
    (165.0, "Green Cyan"),
    (195.0, "Cyan"),
    (225.0, "Blue"),
    (255.0, "Blue Violet"),
    (285.0, "Violet"),
    (315.0, "Red Violet"),
    (345.0, "Red"),
    (360.0, "Red"),
)


def color_name(hex_color: str) -> str:
    """
    Name a color like "Dark Blue" or "Light Gray".

    Low-saturation colors are White, Black or Gray. Others get one of
    the hue families, with "Light " above 80% lightness and "Dark "
    below 30%.
    """
    h, s, l = hex_to_hsl(normalize_hex(hex_color))

    if s < 0.1:
        if l > 0.9:
            name = "White"
        elif l < 0.1:
            name = "Black"
        else:
            name = "Gray"
    else:
        name = next(label for bound, label in _HUE_NAMES if h < bound)

    if name in ("White", "Black"):
        return name
    if l > 0.8:
        name = f"Light {name}"
    elif l < 0.3:
        name = f"Dark {name}"
    return name
