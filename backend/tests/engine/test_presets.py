"""Tests for engine.economics.presets: market assumptions from the config store."""

from __future__ import annotations

import pytest

from engine.economics.presets import (
    CONFIG_DESCRIPTIONS,
    DEFAULT_ASSUMPTIONS,
    MarketAssumptions,
)
from engine.errors import InvalidInputError


class TestFromConfigMap:
    def test_string_values_parsed(self):
        assumptions = MarketAssumptions.from_config_map(
            {"SMP_PRICE": "135.5", "REC_PRICE": "52000", "PEAK_HOURS": "3.9"}
        )
        assert assumptions.smp_price == 135.5
        assert assumptions.rec_price == 52_000.0
        assert assumptions.peak_hours == 3.9

    def test_missing_keys_keep_defaults(self):
        assumptions = MarketAssumptions.from_config_map({"SMP_PRICE": "100"})
        assert assumptions.rec_price == DEFAULT_ASSUMPTIONS.rec_price
        assert assumptions.maintenance_cost == DEFAULT_ASSUMPTIONS.maintenance_cost

    def test_unknown_and_blank_keys_ignored(self):
        assumptions = MarketAssumptions.from_config_map(
            {"COMPANY_NAME": "Acme Solar", "REC_WEIGHT": "", "MONITORING_COST": None}
        )
        assert assumptions == DEFAULT_ASSUMPTIONS

    def test_keys_case_insensitive(self):
        assert MarketAssumptions.from_config_map({"smp_price": "99"}).smp_price == 99.0

    def test_integer_field_cast(self):
        assumptions = MarketAssumptions.from_config_map({"QUOTATION_VALID_DAYS": "45"})
        assert assumptions.quotation_valid_days == 45
        assert isinstance(assumptions.quotation_valid_days, int)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidInputError, match="SMP_PRICE"):
            MarketAssumptions.from_config_map({"SMP_PRICE": "cheap"})


class TestToConfigMap:
    def test_covers_every_described_key(self):
        assert set(DEFAULT_ASSUMPTIONS.to_config_map()) == set(CONFIG_DESCRIPTIONS)

    def test_inverse_of_from_config_map(self):
        custom = MarketAssumptions(smp_price=142.0, degradation_rate=0.005, quotation_valid_days=14)
        assert MarketAssumptions.from_config_map(custom.to_config_map()) == custom

    def test_string_form(self):
        assert DEFAULT_ASSUMPTIONS.to_config_map()["SMP_PRICE"] == "120.0"
