# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Harmonious palette generation.

Grows a palette from a base color using fixed color-theory transforms,
in a priority order set by a preset:

- white / black: near-neutral light and dark variants of the base hue
- complementary, analogous, triadic, ...: hue rotations of the base
- variations: lightness and saturation shifts of the base

Each candidate is kept only if it is not similar to a color already in
the palette. Whatever is still missing is filled with random colors, so
the requested count is always met.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import numpy as np

from tinta.engine.colorspace import (
    hex_to_hsl,
    hsl_to_hex,
    normalize_hex,
    random_hex,
    rotate_hue,
)
from tinta.engine.config import DEFAULT_CONFIG, PaletteConfig
from tinta.engine.metric import backfill_random, is_color_similar
from tinta.schema import GenerationStep, HarmoniousPaletteRequest, HarmonyPreset


logger = logging.getLogger(__name__)

Seed = Union[None, int, np.random.Generator]


# =============================================================================
# Priorities and transforms
# =============================================================================

_STRICT_TAIL = (GenerationStep.VARIATIONS, GenerationStep.WHITE, GenerationStep.BLACK)

HARMONY_PRIORITIES: dict[HarmonyPreset, tuple[GenerationStep, ...]] = {
    # Neutrals first, then relationships, then variations
    HarmonyPreset.WEB_FRIENDLY: (
        GenerationStep.WHITE,
        GenerationStep.BLACK,
        GenerationStep.COMPLEMENTARY,
        GenerationStep.ANALOGOUS,
        GenerationStep.VARIATIONS,
    ),
    HarmonyPreset.ANALOGOUS: (GenerationStep.ANALOGOUS,) + _STRICT_TAIL,
    HarmonyPreset.MONOCHROMATIC: _STRICT_TAIL,
    HarmonyPreset.COMPLEMENTARY: (GenerationStep.COMPLEMENTARY,) + _STRICT_TAIL,
    HarmonyPreset.TRIADIC: (GenerationStep.TRIADIC,) + _STRICT_TAIL,
    HarmonyPreset.TETRADIC: (GenerationStep.TETRADIC,) + _STRICT_TAIL,
    HarmonyPreset.SPLIT_COMPLEMENTARY: (GenerationStep.SPLIT_COMPLEMENTARY,) + _STRICT_TAIL,
    HarmonyPreset.SQUARE: (GenerationStep.SQUARE,) + _STRICT_TAIL,
    HarmonyPreset.COMPOUND: (GenerationStep.COMPOUND,) + _STRICT_TAIL,
}

# Hue rotations in degrees, applied in order
HUE_OFFSETS: dict[GenerationStep, tuple[float, ...]] = {
    GenerationStep.COMPLEMENTARY: (180.0,),
    GenerationStep.ANALOGOUS: (30.0, -30.0),
    GenerationStep.TRIADIC: (120.0, -120.0),
    GenerationStep.TETRADIC: (60.0, 180.0, 240.0),
    GenerationStep.SPLIT_COMPLEMENTARY: (150.0, 210.0),
    GenerationStep.SQUARE: (90.0, 180.0, 270.0),
    GenerationStep.COMPOUND: (30.0, 180.0, 210.0),
}


def white_variant(base: str, config: Optional[PaletteConfig] = None) -> str:
    """Very light, almost unsaturated version of the base hue."""
    cfg = config or DEFAULT_CONFIG
    h, s, _ = hex_to_hsl(base)
    return hsl_to_hex(h, s * cfg.white_saturation_factor, cfg.white_lightness)


def black_variant(base: str, config: Optional[PaletteConfig] = None) -> str:
    """Very dark version of the base hue, keeping most of its saturation."""
    cfg = config or DEFAULT_CONFIG
    h, s, _ = hex_to_hsl(base)
    return hsl_to_hex(h, s * cfg.black_saturation_factor, cfg.black_lightness)


def tonal_variations(base: str, config: Optional[PaletteConfig] = None) -> list[str]:
    """
    Same-hue variations of the base color.

    Returns:
        [lighter, darker, less saturated, more saturated]
    """
    cfg = config or DEFAULT_CONFIG
    h, s, l = hex_to_hsl(base)
    lv, sv = cfg.lightness_variation, cfg.saturation_variation
    return [
        hsl_to_hex(h, s, l * (1.0 + lv)),
        hsl_to_hex(h, s, l * (1.0 - lv)),
        hsl_to_hex(h, s * (1.0 - sv), l),
        hsl_to_hex(h, s * (1.0 + sv), l),
    ]


def step_candidates(
    base: str,
    step: GenerationStep,
    config: Optional[PaletteConfig] = None,
) -> list[str]:
    """Candidate colors one generation step produces for a base color."""
    if step is GenerationStep.WHITE:
        return [white_variant(base, config)]
    if step is GenerationStep.BLACK:
        return [black_variant(base, config)]
    if step is GenerationStep.VARIATIONS:
        return tonal_variations(base, config)
    return [rotate_hue(base, offset) for offset in HUE_OFFSETS[step]]


# =============================================================================
# Generation
# =============================================================================


def generate_harmonious_palette(
    base_color: Optional[str] = None,
    count: int = 5,
    existing: Optional[Iterable[str]] = None,
    *,
    preset: HarmonyPreset = HarmonyPreset.WEB_FRIENDLY,
    config: Optional[PaletteConfig] = None,
    seed: Seed = None,
) -> list[str]:
    """
    Build a palette of exactly ``count`` colors around a base color.

    The base is ``base_color`` if given, else the first existing color,
    else a random color. Existing colors are kept in order, with the base
    prepended when missing. If that already reaches ``count``, the front
    ``count`` entries are returned as-is.

    Otherwise candidates from the preset's priority list are appended,
    skipping any similar to a color already present. A remaining shortfall
    is filled with random colors: similarity-checked for up to
    ``config.max_random_attempts`` draws, then accepted unconditionally.

    Args:
        base_color: Seed color (hex, shorthand allowed)
        count: Number of colors wanted (>= 1)
        existing: Colors already in the palette
        preset: Priority order of generation steps
        config: Tunables (uses defaults if None)
        seed: None, int or numpy Generator for the random choices

    Returns:
        Canonical hex colors, exactly ``count`` long

    Example:
        >>> palette = generate_harmonious_palette("#f00", count=12, seed=7)
        >>> palette[0], len(palette)
        ('#FF0000', 12)
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    cfg = config or DEFAULT_CONFIG
    rng = np.random.default_rng(seed)

    colors = [normalize_hex(c) for c in (existing or ())]
    if base_color is not None:
        base = normalize_hex(base_color)
    elif colors:
        base = colors[0]
    else:
        base = random_hex(rng)

    # The seed always leads, without duplicating an existing entry.
    if base in colors:
        colors.remove(base)
    colors.insert(0, base)

    if len(colors) >= count:
        return colors[:count]

    for step in HARMONY_PRIORITIES[preset]:
        if len(colors) >= count:
            break
        for candidate in step_candidates(base, step, cfg):
            if len(colors) >= count:
                break
            if not is_color_similar(candidate, colors, cfg.similarity_threshold):
                colors.append(candidate)

    if len(colors) < count:
        logger.debug(
            "Preset %s produced %d of %d colors for %s, filling randomly",
            preset.value,
            len(colors),
            count,
            base,
        )
        colors = backfill_random(
            colors,
            count,
            rng,
            threshold=cfg.similarity_threshold,
            max_attempts=cfg.max_random_attempts,
        )

    return colors[:count]


def generate_palette(
    request: HarmoniousPaletteRequest,
    *,
    config: Optional[PaletteConfig] = None,
    seed: Seed = None,
) -> list[str]:
    """Run :func:`generate_harmonious_palette` for a request record."""
    return generate_harmonious_palette(
        request.seed_color,
        request.count,
        request.existing,
        preset=request.preset,
        config=config,
        seed=seed,
    )


def generate_shades(color: str, count: int = 9) -> list[str]:
    """
    Lightness ramp of a color.

    Keeps hue and saturation; lightness runs evenly from 10% to 90%.
    A single shade sits at 50%.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    h, s, _ = hex_to_hsl(normalize_hex(color))
    if count == 1:
        return [hsl_to_hex(h, s, 0.5)]
    return [hsl_to_hex(h, s, 0.1 + (i / (count - 1)) * 0.8) for i in range(count)]
