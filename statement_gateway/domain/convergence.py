"""Convergence of the simulated closing balance onto a target balance"""

import logging
import random
from dataclasses import replace
from datetime import date
from typing import List, Sequence

from statement_gateway.domain.calendar import interest_cycle_dates
from statement_gateway.domain.ledger import simulate_ledger
from statement_gateway.domain.models import StatementConfig, StatementResult, Transaction
from statement_gateway.domain.synthesizer import pick_description, synthesize_transactions, validate_config

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 10

# NPR 0.01
CONVERGENCE_TOLERANCE_PAISA = 1


def adjust_transaction(
    tx: Transaction,
    gap_paisa: int,
    rng: random.Random,
    config: StatementConfig,
) -> Transaction:
    """
    Shift one transaction so the closing balance moves by roughly gap_paisa.

    A deposit grows by the gap, a withdrawal shrinks by it. If the amount
    goes negative the transaction changes side (deposit <-> withdrawal),
    keeps the absolute amount and gets a description from the new side.
    """
    amount = tx.amount_paisa + gap_paisa if tx.is_deposit else tx.amount_paisa - gap_paisa
    if amount >= 0:
        return replace(tx, amount_paisa=amount)

    is_deposit = not tx.is_deposit
    return replace(
        tx,
        is_deposit=is_deposit,
        amount_paisa=abs(amount),
        description=pick_description(rng, is_deposit, config),
    )


def _posted(transactions: Sequence[Transaction]) -> List[Transaction]:
    return [tx for tx in transactions if tx.amount_paisa > 0]


def converge(
    transactions: Sequence[Transaction],
    config: StatementConfig,
    rng: random.Random,
    cycle_dates: Sequence[date] | None = None,
) -> StatementResult:
    """
    Re-simulate while correcting the last transaction toward target balance.

    Only the last transaction in date order is ever changed. Each pass is a
    fresh simulation of an immutable snapshot; the corrected transaction
    replaces the last element for the next pass.

    Returns the first simulation within tolerance, or the last one simulated
    after MAX_ITERATIONS passes with converged=False. Never raises on a
    shortfall.

    A transaction adjusted to exactly zero posts no row and is left out of
    the returned transactions, so every returned amount is positive.
    """
    if cycle_dates is None:
        cycle_dates = interest_cycle_dates(config.start_date, config.end_date)

    working: List[Transaction] = list(transactions)
    iterations = 0

    while True:
        snapshot = list(working)
        simulation = simulate_ledger(snapshot, config, cycle_dates)
        iterations += 1
        gap = config.target_balance_paisa - simulation.final_balance_paisa
        logger.debug("Convergence pass", extra={"iteration": iterations, "gap_paisa": gap})

        if abs(gap) < CONVERGENCE_TOLERANCE_PAISA:
            return StatementResult(simulation, _posted(snapshot), gap, iterations, converged=True)

        if not snapshot or iterations >= MAX_ITERATIONS:
            break

        working[-1] = adjust_transaction(working[-1], gap, rng, config)

    logger.warning(
        "Statement did not converge",
        extra={"iterations": iterations, "gap_paisa": gap, "transaction_count": len(snapshot)},
    )
    return StatementResult(simulation, _posted(snapshot), gap, iterations, converged=False)


def generate_statement(
    config: StatementConfig,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> StatementResult:
    """
    Main entry point: synthesize transactions and converge on the target.

    Args:
        config: Statement inputs
        rng: Random source; defaults to random.Random(seed)
        seed: Seed for the default random source

    Raises:
        ValueError: If both rng and seed are given
        InvalidStatementConfigError: Before any work, on bad configuration
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    validate_config(config)
    if rng is None:
        rng = random.Random(seed)

    cycle_dates = interest_cycle_dates(config.start_date, config.end_date)
    transactions = synthesize_transactions(config, rng, cycle_dates)
    return converge(transactions, config, rng, cycle_dates)
