"""Tests for engine.economics.generation: degradation and revenue."""

from __future__ import annotations

import numpy as np
import pytest

from engine.economics.generation import annual_generation, annual_revenue, generation_profile


class TestAnnualGeneration:
    def test_first_year_has_no_degradation(self):
        """100 kW at 3.7 h/day: 135,050 kWh in year 1."""
        assert annual_generation(100.0, 3.7, 0.008, 1) == pytest.approx(135_050.0)

    def test_compound_degradation(self):
        expected = 135_050.0 * (1 - 0.008) ** 9
        assert annual_generation(100.0, 3.7, 0.008, 10) == pytest.approx(expected)

    def test_strictly_decreasing_with_degradation(self):
        values = [annual_generation(250.0, 3.5, 0.005, y) for y in range(1, 21)]
        assert all(b < a for a, b in zip(values, values[1:]))

    def test_flat_without_degradation(self):
        values = {annual_generation(100.0, 3.7, 0.0, y) for y in range(1, 21)}
        assert len(values) == 1


class TestGenerationProfile:
    def test_matches_scalar_function(self):
        profile = generation_profile(100.0, 3.7, 0.008, 20)
        assert profile.shape == (20,)
        for year, value in enumerate(profile, start=1):
            assert value == pytest.approx(annual_generation(100.0, 3.7, 0.008, year))

    def test_non_increasing(self):
        profile = generation_profile(500.0, 4.0, 0.01, 25)
        assert np.all(np.diff(profile) < 0)


class TestAnnualRevenue:
    def test_split(self):
        smp, rec, total = annual_revenue(135_050.0, 120.0, 40_000.0, 1.0)
        assert smp == pytest.approx(16_206_000.0)
        # 135.05 RECs at 40,000
        assert rec == pytest.approx(5_402_000.0)
        assert total == pytest.approx(smp + rec)

    def test_rec_weight_scales_only_rec(self):
        smp1, rec1, _ = annual_revenue(10_000.0, 100.0, 50_000.0, 1.0)
        smp2, rec2, _ = annual_revenue(10_000.0, 100.0, 50_000.0, 1.5)
        assert smp1 == smp2
        assert rec2 == pytest.approx(rec1 * 1.5)

    def test_zero_generation(self):
        assert annual_revenue(0.0, 120.0, 40_000.0, 1.0) == (0.0, 0.0, 0.0)
