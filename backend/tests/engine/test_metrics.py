"""Tests for engine.economics.metrics: payback period and ROI."""

from __future__ import annotations

import pytest

from engine.economics.metrics import compute_roi, payback_period


class TestPaybackPeriod:
    def test_interpolates_crossing(self):
        """-100 -> -40 -> +20: crosses two thirds of the way through year 2."""
        assert payback_period([-100.0, -40.0, 20.0]) == pytest.approx(1.7)

    def test_exact_zero_counts_as_recovered(self):
        assert payback_period([-100.0, -50.0, 0.0]) == pytest.approx(2.0)

    def test_first_crossing_only(self):
        assert payback_period([-10.0, 10.0, -5.0, 30.0]) == pytest.approx(0.5)

    def test_not_recovered_is_none(self):
        assert payback_period([-100.0, -90.0, -80.0]) is None

    def test_no_initial_cost_is_immediate(self):
        assert payback_period([0.0, 10.0, 20.0]) == 0.0

    def test_empty_sequence(self):
        assert payback_period([]) is None


class TestComputeROI:
    def test_basic(self):
        assert compute_roi(300.0, 150.0) == 200.0

    def test_rounded_to_one_decimal(self):
        assert compute_roi(1.0, 3.0) == 33.3

    def test_negative_profit(self):
        assert compute_roi(-50.0, 200.0) == -25.0

    def test_zero_cost_guard(self):
        assert compute_roi(1_000_000.0, 0.0) == 0.0


class TestHalfUpRounding:
    def test_roi_half_rounds_up(self):
        assert compute_roi(6.25, 100.0) == pytest.approx(6.3)

    def test_negative_roi_half_rounds_towards_positive(self):
        assert compute_roi(-6.25, 100.0) == pytest.approx(-6.2)

    def test_payback_half_rounds_up(self):
        """-100 -> -25 -> +75: crossing at exactly 1.25 years."""
        assert payback_period([-100.0, -25.0, 75.0]) == pytest.approx(1.3)
