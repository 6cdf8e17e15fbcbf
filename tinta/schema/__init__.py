# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""
Record types for palette extraction and generation.

All types in this module are frozen dataclasses or enums. None of them
is persisted; each lives for the duration of one call.
"""

from tinta.schema.palette import (
    ColorFrequencyEntry,
    GenerationStep,
    HarmoniousPaletteRequest,
    HarmonyPreset,
    ImageAnalysis,
)

__all__ = [
    # Image analysis
    "ColorFrequencyEntry",
    "ImageAnalysis",
    # Harmonious generation
    "GenerationStep",
    "HarmonyPreset",
    "HarmoniousPaletteRequest",
]
