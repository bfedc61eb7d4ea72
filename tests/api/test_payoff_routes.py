from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from debtplan.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def plan_body() -> dict:
    return {
        "cards": [
            {
                "id": "visa",
                "card_name": "Visa",
                "current_balance": "1000.00",
                "apr": "24.0",
                "minimum_payment": "25.00",
                "user_name": "Sam",
            }
        ],
        "monthly_extra_budget": "200.00",
        "strategy": "avalanche",
        "as_of": "2026-10-17",
    }


class TestHealth:
    def test_ok(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestPlan:
    def test_plan_without_timeline(self, client, plan_body):
        resp = client.post("/api/v1/payoff/plan", json=plan_body)
        assert resp.status_code == 200
        plan = resp.json()["plan"]
        assert "timeline" not in plan
        instruction = plan["payment_instructions"][0]
        assert Decimal(instruction["new_balance_after_payment"]) == Decimal("795.00")
        assert Decimal(instruction["extra_payment"]) == Decimal("200.00")
        assert instruction["user_name"] == "Sam"
        assert instruction["pays_off_this_month"] is False
        assert Decimal(plan["total_interest_cost"]) == Decimal("58.17")
        assert plan["months_to_debt_free"] == 5
        assert plan["debt_free_date"] == "2027-03"
        assert plan["strategy"] == "avalanche"
        assert plan["capped"] is False

    def test_budget_query_override(self, client, plan_body):
        resp = client.post("/api/v1/payoff/plan", params={"budget": "0"}, json=plan_body)
        plan = resp.json()["plan"]
        assert Decimal(plan["monthly_extra_budget"]) == Decimal("0")
        assert Decimal(plan["payment_instructions"][0]["new_balance_after_payment"]) == Decimal("995.00")

    def test_negative_budget_query_rejected(self, client, plan_body):
        resp = client.post("/api/v1/payoff/plan", params={"budget": "-5"}, json=plan_body)
        assert resp.status_code == 422

    def test_no_cards(self, client, plan_body):
        plan_body["cards"] = []
        body = client.post("/api/v1/payoff/plan", json=plan_body).json()
        assert body["plan"] is None
        assert body["message"] == "No active cards found"

    def test_negative_balance_rejected(self, client, plan_body):
        plan_body["cards"][0]["current_balance"] = "-10"
        assert client.post("/api/v1/payoff/plan", json=plan_body).status_code == 422

    def test_oversized_balance_rejected(self, client, plan_body):
        plan_body["cards"][0]["current_balance"] = "1e27"
        assert client.post("/api/v1/payoff/plan", json=plan_body).status_code == 422

    def test_apr_above_bound_rejected(self, client, plan_body):
        plan_body["cards"][0]["apr"] = "150"
        assert client.post("/api/v1/payoff/plan", json=plan_body).status_code == 422

    def test_unknown_strategy_rejected(self, client, plan_body):
        plan_body["strategy"] = "tsunami"
        assert client.post("/api/v1/payoff/plan", json=plan_body).status_code == 422


class TestTimeline:
    def test_timeline(self, client, plan_body):
        body = client.post("/api/v1/payoff/timeline", json=plan_body).json()
        assert len(body["timeline"]) == 5
        first = body["timeline"][0]
        assert first["month"] == 1
        assert first["label"] == "Nov 2026"
        assert Decimal(first["total_interest_this_month"]) == Decimal("20.00")
        assert first["card_balances"][0]["card_id"] == "visa"
        assert body["months_to_debt_free"] == 5
        assert body["capped"] is False

    def test_no_cards(self, client, plan_body):
        plan_body["cards"] = []
        body = client.post("/api/v1/payoff/timeline", json=plan_body).json()
        assert body["timeline"] == []
        assert body["message"] == "No active cards found"


class TestSimulate:
    def test_one_time_payment(self, client, plan_body):
        plan_body["one_time_payment"] = "100.00"
        resp = client.post("/api/v1/payoff/simulate", json=plan_body)
        assert resp.status_code == 200
        sim = resp.json()["simulation"]
        assert Decimal(sim["current"]["total_interest_cost"]) == Decimal("58.17")
        assert Decimal(sim["simulated"]["total_interest_cost"]) == Decimal("49.93")
        assert Decimal(sim["interest_saved"]) == Decimal("8.24")
        assert sim["months_saved"] == 0

    def test_strategy_override(self, client, plan_body):
        plan_body["strategy_override"] = "snowball"
        resp = client.post("/api/v1/payoff/simulate", json=plan_body)
        assert resp.status_code == 200
        # Single card: order cannot matter
        assert Decimal(resp.json()["simulation"]["interest_saved"]) == Decimal("0")

    def test_requires_a_scenario_parameter(self, client, plan_body):
        resp = client.post("/api/v1/payoff/simulate", json=plan_body)
        assert resp.status_code == 400
        assert "At least one scenario parameter" in resp.json()["detail"]

    def test_negative_budget_change_rejected(self, client, plan_body):
        plan_body["budget_change"] = "-1"
        assert client.post("/api/v1/payoff/simulate", json=plan_body).status_code == 422
