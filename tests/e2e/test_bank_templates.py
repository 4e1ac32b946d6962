"""
E2E tests generating full statements for representative bank templates.

Scenarios:
- growth: balance climbs over a year with quarterly interest
- drawdown: balance falls well below the opening amount
- short period: no interest cycle inside the range
"""

import pytest
from fastapi.testclient import TestClient

SYSTEM_REFERENCES = ("TRANSFER", "INTEREST", "TAX")


def generate(client: TestClient, **overrides) -> dict:
    body = {
        "start_date": "2024-07-28",
        "end_date": "2025-07-28",
        "opening_balance_paisa": 50_000_000,
        "target_balance_paisa": 120_000_000,
        "interest_rate_percent": "7.5",
        "tax_rate_percent": "5",
        "target_transaction_count": 30,
        "min_transaction_paisa": 200_000,
        "max_transaction_paisa": 6_000_000,
        "seed": 7,
    }
    body.update(overrides)
    response = client.post("/v1/statements", json=body)
    assert response.status_code == 200
    return response.json()


@pytest.mark.integration
@pytest.mark.parametrize("template_id", ["sarbeshwor", "aarogya", "agnijwala"])
def test_growth_statement_uses_template_labels(client: TestClient, template_id: str):
    """Transaction and interest rows carry the chosen bank's wording"""
    template = client.get(f"/v1/templates/{template_id}").json()
    data = generate(client, template_id=template_id)

    assert data["bank_name"] == template["name"]
    assert abs(data["gap_paisa"]) <= 1

    pool = set(template["deposits"]) | set(template["withdrawals"])
    for row in data["rows"]:
        if row["reference"] == "INTEREST":
            assert row["description"] == template["interest"]
        elif row["reference"] == "TAX":
            assert row["description"] == template["tax"]
        elif row["reference"] not in SYSTEM_REFERENCES:
            assert row["description"] in pool
            assert row["reference"].isdigit() and len(row["reference"]) == 7


@pytest.mark.integration
def test_drawdown_statement(client: TestClient):
    """
    Opening balance well above target
    Expected: withdrawals dominate and closing lands on target
    """
    data = generate(
        client,
        template_id="dhaulagiri",
        opening_balance_paisa=300_000_000,
        target_balance_paisa=40_000_000,
    )

    totals = data["totals"]
    assert totals["total_debit_paisa"] > totals["total_credit_paisa"]
    assert abs(totals["closing_balance_paisa"] - 40_000_000) <= 1


@pytest.mark.integration
def test_short_period_has_no_interest(client: TestClient):
    """
    Range shorter than one interest cycle
    Expected: exact convergence and no interest or tax rows
    """
    data = generate(
        client,
        template_id="nilratna",
        start_date="2024-03-01",
        end_date="2024-04-30",
        target_transaction_count=12,
    )

    references = {row["reference"] for row in data["rows"]}
    assert "INTEREST" not in references
    assert "TAX" not in references
    assert data["converged"] is True
    assert data["totals"]["closing_balance_paisa"] == 120_000_000
