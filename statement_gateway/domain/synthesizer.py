"""Random transaction synthesis for mock statements"""

import random
from datetime import date, timedelta
from typing import AbstractSet, List, Sequence

from statement_gateway.domain.calendar import interest_cycle_dates, is_holiday
from statement_gateway.domain.exceptions import InvalidStatementConfigError
from statement_gateway.domain.models import StatementConfig, Transaction
from statement_gateway.utils.date_utils import day_span

# Placement retries before a transaction is accepted on a blocked day
MAX_PLACEMENT_CHECKS = 30

# random() above this is a deposit (60% deposit bias)
DEPOSIT_THRESHOLD = 0.4

# Amounts are rounded up to whole NPR 100
AMOUNT_ROUNDING_STEP_PAISA = 10_000


def validate_config(config: StatementConfig) -> None:
    """
    Reject configurations the generator cannot honour.

    Raises:
        InvalidStatementConfigError: On any inconsistent field
    """
    if config.start_date > config.end_date:
        raise InvalidStatementConfigError(
            f"start_date {config.start_date} is after end_date {config.end_date}"
        )
    if config.target_transaction_count < 0:
        raise InvalidStatementConfigError("target_transaction_count must not be negative")
    if config.min_transaction_paisa <= 0:
        raise InvalidStatementConfigError("min_transaction_paisa must be positive")
    if config.min_transaction_paisa > config.max_transaction_paisa:
        raise InvalidStatementConfigError(
            f"min_transaction_paisa {config.min_transaction_paisa} exceeds "
            f"max_transaction_paisa {config.max_transaction_paisa}"
        )
    if config.interest_rate_percent < 0 or config.tax_rate_percent < 0:
        raise InvalidStatementConfigError("interest and tax rates must not be negative")
    if config.target_transaction_count > 0:
        if not config.deposit_descriptions:
            raise InvalidStatementConfigError("deposit_descriptions is empty")
        if not config.withdrawal_descriptions:
            raise InvalidStatementConfigError("withdrawal_descriptions is empty")


def round_up_amount(amount_paisa: int, step: int = AMOUNT_ROUNDING_STEP_PAISA) -> int:
    """Round up to the next multiple of step"""
    return -(-amount_paisa // step) * step


def pick_description(rng: random.Random, is_deposit: bool, config: StatementConfig) -> str:
    pool = config.deposit_descriptions if is_deposit else config.withdrawal_descriptions
    return rng.choice(pool)


def place_date(
    candidate: date,
    start: date,
    end: date,
    holidays: AbstractSet[str],
    blocked: AbstractSet[date],
) -> date:
    """
    Move candidate off holidays and interest-cycle dates.

    Advances one day at a time, wrapping to start past end. Gives up after
    MAX_PLACEMENT_CHECKS and keeps whatever day it reached, so a dense
    holiday calendar never blocks generation.
    """
    checks = 0
    while (is_holiday(candidate, holidays) or candidate in blocked) and checks < MAX_PLACEMENT_CHECKS:
        candidate = start if candidate >= end else candidate + timedelta(days=1)
        checks += 1
    return candidate


def draw_amount(rng: random.Random, min_paisa: int, max_paisa: int) -> int:
    """Uniform amount in [min, max), rounded up to NPR 100 and never below min"""
    raw = rng.randrange(min_paisa, max_paisa) if max_paisa > min_paisa else min_paisa
    amount = round_up_amount(raw)
    if amount < min_paisa:
        amount = round_up_amount(min_paisa)
    return amount


def synthesize_transactions(
    config: StatementConfig,
    rng: random.Random,
    cycle_dates: Sequence[date] | None = None,
) -> List[Transaction]:
    """
    Generate exactly target_transaction_count transactions sorted by date.

    Args:
        config: Statement inputs (validated here)
        rng: Injected random source; a seeded instance reproduces output
        cycle_dates: Interest posting dates to avoid (computed if omitted)

    Returns:
        Transactions in ascending date order (stable for equal dates)
    """
    validate_config(config)

    if cycle_dates is None:
        cycle_dates = interest_cycle_dates(config.start_date, config.end_date)
    blocked = set(cycle_dates)
    span = day_span(config.start_date, config.end_date)

    transactions = []
    for _ in range(config.target_transaction_count):
        offset = rng.randrange(span) if span > 0 else 0
        candidate = config.start_date + timedelta(days=offset)
        tx_date = place_date(candidate, config.start_date, config.end_date, config.holidays, blocked)

        is_deposit = rng.random() > DEPOSIT_THRESHOLD
        amount = draw_amount(rng, config.min_transaction_paisa, config.max_transaction_paisa)
        description = pick_description(rng, is_deposit, config)
        reference = str(rng.randrange(1_000_000, 10_000_000))

        transactions.append(
            Transaction(
                date=tx_date,
                is_deposit=is_deposit,
                amount_paisa=amount,
                description=description,
                reference=reference,
            )
        )

    transactions.sort(key=lambda t: t.date)
    return transactions
