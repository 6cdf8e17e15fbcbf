# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""Tests for record types and configuration."""

import dataclasses

import numpy as np
import pytest

from tinta.engine.config import DEFAULT_CONFIG, PaletteConfig
from tinta.schema import (
    ColorFrequencyEntry,
    GenerationStep,
    HarmoniousPaletteRequest,
    HarmonyPreset,
    ImageAnalysis,
)


class TestPaletteConfig:
    """Configuration defaults and validation tests."""

    def test_defaults(self):
        cfg = PaletteConfig()
        assert cfg.similarity_threshold == 50.0
        assert cfg.quantization_step == 16
        assert cfg.alpha_threshold == 128
        assert cfg.max_iterations == 20
        assert cfg.convergence_threshold == 1.0
        assert cfg.max_random_attempts == 100

    def test_default_instance(self):
        assert DEFAULT_CONFIG == PaletteConfig()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.similarity_threshold = 10.0

    def test_replace(self):
        cfg = dataclasses.replace(DEFAULT_CONFIG, similarity_threshold=25.0)
        assert cfg.similarity_threshold == 25.0
        assert cfg.quantization_step == 16

    @pytest.mark.parametrize(
        "field, value",
        [
            ("similarity_threshold", -1.0),
            ("quantization_step", 0),
            ("quantization_step", 300),
            ("alpha_threshold", 256),
            ("max_sampling_rate", 0),
            ("max_iterations", 0),
            ("convergence_threshold", -0.5),
            ("max_random_attempts", -1),
            ("white_lightness", 1.5),
            ("saturation_variation", -0.1),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError, match=field):
            PaletteConfig(**{field: value})

    def test_invalid_sampling_tier(self):
        with pytest.raises(ValueError, match="sampling_tiers"):
            PaletteConfig(sampling_tiers=((1000, 0),))

    def test_sampling_rate(self):
        assert DEFAULT_CONFIG.sampling_rate(5) == 1
        assert DEFAULT_CONFIG.sampling_rate(600_000) == 32


class TestColorFrequencyEntry:
    """Frequency entries must be immutable with a positive count."""

    def test_valid(self):
        entry = ColorFrequencyEntry(rgb=(1, 2, 3), count=4, hex="#010203")
        assert entry.count == 4

    def test_invalid_count(self):
        with pytest.raises(ValueError, match="count"):
            ColorFrequencyEntry(rgb=(1, 2, 3), count=0, hex="#010203")

    def test_frozen(self):
        entry = ColorFrequencyEntry(rgb=(1, 2, 3), count=4, hex="#010203")
        with pytest.raises(AttributeError):
            entry.count = 5


class TestImageAnalysis:
    """ImageAnalysis record tests."""

    def _analysis(self, frequency):
        return ImageAnalysis(
            pixels=np.zeros((0, 3), dtype=np.uint8),
            color_frequency=frequency,
            unique_colors=len(frequency),
            sampled_pixels=0,
            color_diversity=0.0,
            total_pixels=0,
            sampling_rate=1,
        )

    def test_empty(self):
        assert self._analysis({}).is_empty

    def test_repr_omits_pixels(self):
        assert "pixels=" not in repr(self._analysis({}))


class TestHarmoniousPaletteRequest:
    """Palette requests must validate count and freeze existing colors."""

    def test_defaults(self):
        request = HarmoniousPaletteRequest(count=5)
        assert request.seed_color is None
        assert request.existing == ()
        assert request.preset is HarmonyPreset.WEB_FRIENDLY

    def test_existing_stored_as_tuple(self):
        request = HarmoniousPaletteRequest(count=2, existing=["#000000"])
        assert request.existing == ("#000000",)

    def test_invalid_count(self):
        with pytest.raises(ValueError, match="count"):
            HarmoniousPaletteRequest(count=0)


class TestEnums:
    """Enum values must match their wire names."""

    def test_preset_values(self):
        assert HarmonyPreset("webFriendly") is HarmonyPreset.WEB_FRIENDLY
        assert HarmonyPreset("splitComplementary") is HarmonyPreset.SPLIT_COMPLEMENTARY

    def test_step_values(self):
        assert GenerationStep("variations") is GenerationStep.VARIATIONS
