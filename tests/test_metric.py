# Copyright (c) 2026 Tinta
# SPDX-License-Identifier: MIT

"""Tests for the color similarity metric."""

import logging

import numpy as np
import pytest

from tinta.engine.metric import (
    backfill_random,
    color_distance,
    is_color_similar,
    pairwise_distances,
)


class TestColorDistance:
    """Euclidean RGB distance tests."""

    def test_identical_zero(self):
        assert color_distance("#FF0000", "#FF0000") == 0.0

    def test_black_white(self):
        assert color_distance("#000000", "#FFFFFF") == pytest.approx(255 * np.sqrt(3))

    def test_symmetric(self):
        assert color_distance("#123456", "#654321") == color_distance("#654321", "#123456")

    def test_accepts_triples(self):
        assert color_distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)

    def test_mixed_inputs(self):
        assert color_distance("#000000", np.array([0, 30, 40])) == pytest.approx(50.0)


class TestIsColorSimilar:
    """Similarity must be strictly below the threshold."""

    def test_empty_existing_never_similar(self):
        assert not is_color_similar("#FF0000", [])

    def test_near_match(self):
        # (15, 16, 16) away -> ~27
        assert is_color_similar("#FF0000", ["#0000FF", "#F01010"])

    def test_far_colors(self):
        assert not is_color_similar("#FF0000", ["#0000FF", "#00FF00"])

    def test_threshold_is_strict(self):
        # Exactly 50 apart is not similar
        assert not is_color_similar("#000000", ["#001E28"])
        assert is_color_similar("#000000", ["#001E28"], threshold=50.01)

    def test_custom_threshold(self):
        assert not is_color_similar("#FF0000", ["#F01010"], threshold=20)

    def test_short_circuits(self):
        def existing():
            yield "#FF0000"
            raise AssertionError("iterated past first match")

        assert is_color_similar("#FF0000", existing())


class TestPairwiseDistances:
    """Pairwise distances must match the scalar metric."""

    def test_matches_scalar(self):
        pixels = np.array([[0, 0, 0], [255, 255, 255], [10, 20, 30]], dtype=np.float64)
        centroids = np.array([[0, 0, 0], [255, 0, 0]], dtype=np.float64)
        dists = pairwise_distances(pixels, centroids)

        assert dists.shape == (3, 2)
        for i, p in enumerate(pixels):
            for j, c in enumerate(centroids):
                assert dists[i, j] == pytest.approx(color_distance(p, c), abs=1e-6)

    def test_zero_distance_not_nan(self):
        pixels = np.array([[7, 7, 7]], dtype=np.float64)
        dists = pairwise_distances(pixels, pixels.copy())
        assert dists[0, 0] == pytest.approx(0.0, abs=1e-6)
        assert not np.isnan(dists).any()


class TestBackfillRandom:
    """Random backfill must always reach the target count."""

    def test_reaches_target(self):
        rng = np.random.default_rng(1)
        result = backfill_random(["#FF0000"], 6, rng)
        assert len(result) == 6
        assert result[0] == "#FF0000"

    def test_does_not_modify_input(self):
        colors = ["#FF0000"]
        backfill_random(colors, 4, np.random.default_rng(1))
        assert colors == ["#FF0000"]

    def test_accepted_colors_are_distinct(self):
        result = backfill_random([], 8, np.random.default_rng(3))
        for i, a in enumerate(result):
            assert not is_color_similar(a, result[:i])

    def test_unconditional_after_attempts(self, caplog):
        rng = np.random.default_rng(5)
        with caplog.at_level(logging.WARNING, logger="tinta.engine.metric"):
            result = backfill_random(["#808080"], 5, rng, threshold=500.0)
        assert len(result) == 5
        assert "without similarity check" in caplog.text

    def test_zero_attempts(self):
        result = backfill_random([], 3, np.random.default_rng(0), max_attempts=0)
        assert len(result) == 3

    def test_target_already_met(self):
        assert backfill_random(["#000000", "#FFFFFF"], 2, np.random.default_rng(0)) == [
            "#000000",
            "#FFFFFF",
        ]
