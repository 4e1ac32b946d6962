"""Unit tests for transaction synthesis"""

import random
import pytest
from dataclasses import replace
from datetime import date, timedelta
from statement_gateway.domain.calendar import interest_cycle_dates, is_holiday
from statement_gateway.domain.exceptions import InvalidStatementConfigError
from statement_gateway.domain.synthesizer import (
    AMOUNT_ROUNDING_STEP_PAISA,
    MAX_PLACEMENT_CHECKS,
    draw_amount,
    place_date,
    round_up_amount,
    synthesize_transactions,
    validate_config,
)


def test_synthesize_exact_count_sorted(base_config, rng):
    """Exactly target_transaction_count transactions, ascending by date"""
    transactions = synthesize_transactions(base_config, rng)

    assert len(transactions) == base_config.target_transaction_count
    dates = [t.date for t in transactions]
    assert dates == sorted(dates)
    assert all(base_config.start_date <= d <= base_config.end_date for d in dates)


def test_synthesize_avoids_holidays_and_cycle_dates(base_config, rng):
    """With a sparse calendar every transaction lands on an open day"""
    cycle_dates = set(interest_cycle_dates(base_config.start_date, base_config.end_date))
    transactions = synthesize_transactions(base_config, rng)

    for t in transactions:
        assert not is_holiday(t.date, base_config.holidays)
        assert t.date not in cycle_dates


def test_synthesize_amounts_rounded_and_above_minimum(base_config, rng):
    transactions = synthesize_transactions(base_config, rng)

    for t in transactions:
        assert t.amount_paisa >= base_config.min_transaction_paisa
        assert t.amount_paisa % AMOUNT_ROUNDING_STEP_PAISA == 0


def test_synthesize_descriptions_match_side(base_config, rng):
    transactions = synthesize_transactions(base_config, rng)

    for t in transactions:
        pool = base_config.deposit_descriptions if t.is_deposit else base_config.withdrawal_descriptions
        assert t.description in pool
        assert len(t.reference) == 7 and t.reference.isdigit()


def test_synthesize_reproducible_with_seed(base_config):
    first = synthesize_transactions(base_config, random.Random(7))
    second = synthesize_transactions(base_config, random.Random(7))
    assert first == second


def test_synthesize_zero_count(base_config, rng):
    """Zero transactions is valid even without description pools"""
    config = replace(base_config, target_transaction_count=0, deposit_descriptions=(), withdrawal_descriptions=())
    assert synthesize_transactions(config, rng) == []


def test_synthesize_count_kept_when_every_day_is_holiday(base_config, rng):
    """Placement retries are capped; count never drops"""
    start = date(2024, 1, 1)
    end = start + timedelta(days=60)
    every_day = frozenset(
        (start + timedelta(days=i)).isoformat() for i in range(61)
    )
    config = replace(base_config, start_date=start, end_date=end, holidays=every_day, target_transaction_count=12)

    transactions = synthesize_transactions(config, rng)

    assert len(transactions) == 12
    assert all(start <= t.date <= end for t in transactions)


def test_synthesize_single_day_range(base_config, rng):
    day = date(2024, 7, 28)
    config = replace(base_config, start_date=day, end_date=day, target_transaction_count=3)

    transactions = synthesize_transactions(config, rng)

    assert [t.date for t in transactions] == [day, day, day]


def test_place_date_skips_saturday():
    saturday = date(2024, 7, 27)
    placed = place_date(saturday, date(2024, 7, 1), date(2024, 7, 31), set(), set())
    assert placed == date(2024, 7, 28)


def test_place_date_skips_cycle_date_and_holiday():
    start = date(2024, 7, 28)
    blocked = {date(2024, 7, 29)}
    placed = place_date(date(2024, 7, 29), start, date(2024, 8, 31), {"2024-07-30"}, blocked)
    assert placed == date(2024, 7, 31)


def test_place_date_wraps_to_start():
    """Overshooting end_date wraps to start_date"""
    start = date(2024, 7, 28)  # Sunday
    end = date(2024, 8, 3)  # Saturday
    assert place_date(end, start, end, set(), set()) == start


def test_place_date_wraps_from_last_representable_day():
    """9999-12-31 is a Friday holiday here; wraps to Saturday 12-25, then Sunday"""
    start = date(9999, 12, 25)
    placed = place_date(date.max, start, date.max, {"9999-12-31"}, set())
    assert placed == date(9999, 12, 26)


def test_place_date_gives_up_after_cap():
    start = date(2024, 1, 1)
    end = start + timedelta(days=100)
    every_day = {(start + timedelta(days=i)).isoformat() for i in range(101)}

    placed = place_date(start, start, end, every_day, set())

    assert placed == start + timedelta(days=MAX_PLACEMENT_CHECKS)


def test_round_up_amount():
    assert round_up_amount(10_000) == 10_000
    assert round_up_amount(10_001) == 20_000
    assert round_up_amount(1) == 10_000


def test_draw_amount_equal_bounds():
    """min == max yields min rounded up to NPR 100"""
    assert draw_amount(random.Random(1), 155_000, 155_000) == 160_000


def test_draw_amount_within_rounded_bounds():
    rng = random.Random(3)
    for _ in range(200):
        amount = draw_amount(rng, 500_000, 8_000_000)
        assert 500_000 <= amount <= 8_000_000
        assert amount % AMOUNT_ROUNDING_STEP_PAISA == 0


@pytest.mark.parametrize(
    "changes",
    [
        {"deposit_descriptions": ()},
        {"withdrawal_descriptions": ()},
        {"start_date": date(2025, 8, 1)},
        {"min_transaction_paisa": 9_000_000},
        {"min_transaction_paisa": 0},
        {"target_transaction_count": -1},
    ],
)
def test_validate_config_rejects(base_config, changes):
    with pytest.raises(InvalidStatementConfigError):
        validate_config(replace(base_config, **changes))


def test_synthesize_fails_fast_on_empty_pool(base_config, rng):
    config = replace(base_config, withdrawal_descriptions=())
    with pytest.raises(InvalidStatementConfigError):
        synthesize_transactions(config, rng)
