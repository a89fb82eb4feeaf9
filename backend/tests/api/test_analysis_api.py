"""Tests for the single-variant analysis and financing-defaults endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

URL = "/api/v1/analysis"
BODY = {"capacity_kw": 100.0, "total_investment": 150_000_000}


class TestAnalysis:
    async def test_bank_loan(self, client: AsyncClient):
        resp = await client.post(URL, json={**BODY, "financing_type": "BANK_LOAN"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["financing_type"] == "BANK_LOAN"
        assert data["initial_cost"] == 30_000_000
        assert data["terms"]["loan_amount"] == 120_000_000
        assert len(data["yearly_data"]) == 20

    async def test_grace_period_override(self, client: AsyncClient):
        resp = await client.post(
            URL, json={**BODY, "financing_type": "GOVERNMENT_LOAN", "grace_period": 1}
        )
        assert resp.status_code == 200
        year1 = resp.json()["yearly_data"][0]
        assert year1["loan_repayment"] == 0
        assert year1["interest_payment"] == 2_100_000

    async def test_equity_share_override_derives_loan(self, client: AsyncClient):
        resp = await client.post(
            URL, json={**BODY, "financing_type": "BANK_LOAN", "self_funding_rate": 0.5}
        )
        data = resp.json()
        assert data["initial_cost"] == 75_000_000
        assert data["terms"]["loan_amount"] == 75_000_000

    async def test_unknown_financing_type(self, client: AsyncClient):
        resp = await client.post(URL, json={**BODY, "financing_type": "LEASE"})
        assert resp.status_code == 422

    async def test_grace_not_shorter_than_term(self, client: AsyncClient):
        resp = await client.post(
            URL,
            json={**BODY, "financing_type": "BANK_LOAN", "loan_period": 2, "grace_period": 5},
        )
        assert resp.status_code == 400
        assert "grace_period" in resp.json()["detail"]


class TestFinancingDefaults:
    async def test_government_loan(self, client: AsyncClient):
        resp = await client.get(
            f"{URL}/financing-defaults",
            params={"financing_type": "GOVERNMENT_LOAN", "total_investment": 100_000_000},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["self_funding_rate"] == 0.2
        assert data["loan_amount"] == 80_000_000
        assert data["interest_rate"] == 0.0175
        assert data["loan_period"] == 11

    async def test_factoring_fees(self, client: AsyncClient):
        data = (
            await client.get(
                f"{URL}/financing-defaults",
                params={"financing_type": "FACTORING", "total_investment": 100_000_000},
            )
        ).json()
        assert data["guarantee_fee_rate"] == 0.05
        assert data["factoring_fee_rate"] == 0.08

    async def test_label_and_description(self, client: AsyncClient):
        data = (
            await client.get(
                f"{URL}/financing-defaults",
                params={"financing_type": "BANK_LOAN", "total_investment": 100_000_000},
            )
        ).json()
        assert data["label"] == "Bank loan 80%"
        assert "80%" in data["description"]

    async def test_financing_types(self, client: AsyncClient):
        resp = await client.get(f"{URL}/financing-types")
        assert resp.status_code == 200
        types = resp.json()
        assert [t["financing_type"] for t in types] == [
            "SELF_FUNDING",
            "BANK_LOAN",
            "GOVERNMENT_LOAN",
            "FACTORING",
        ]
        assert all(t["label"] for t in types)

    async def test_invalid_investment(self, client: AsyncClient):
        resp = await client.get(
            f"{URL}/financing-defaults",
            params={"financing_type": "BANK_LOAN", "total_investment": 0},
        )
        assert resp.status_code == 422
