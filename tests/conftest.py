"""Pytest fixtures for testing"""

import random
import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from statement_gateway.api.main import create_app
from statement_gateway.domain.models import StatementConfig


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so synthesized statements are reproducible"""
    return random.Random(2024)


@pytest.fixture
def base_config() -> StatementConfig:
    """One year statement close to the generator's form defaults"""
    return StatementConfig(
        start_date=date(2024, 7, 28),
        end_date=date(2025, 7, 28),
        opening_balance_paisa=231_984_090,  # NPR 2,319,840.90
        target_balance_paisa=360_000_000,  # NPR 3,600,000.00
        interest_rate_percent=Decimal("6"),
        tax_rate_percent=Decimal("5"),
        target_transaction_count=45,
        min_transaction_paisa=500_000,  # NPR 5,000
        max_transaction_paisa=8_000_000,  # NPR 80,000
        deposit_descriptions=("Cash Deposit by Self", "CASH DEPOSIT"),
        withdrawal_descriptions=("CHEQUE Withdrawal by Self", "CASH Withdrawal"),
        interest_label="Interest Posted on A/C",
        tax_label="Tax Deducted",
        holidays=frozenset({"2024-10-13", "2024-11-01", "2025-04-14"}),
    )
