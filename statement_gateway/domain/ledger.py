"""Day-by-day ledger simulation with 90-day interest cycles"""

from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence

from statement_gateway.domain.calendar import interest_cycle_dates
from statement_gateway.domain.models import LedgerRow, SimulationResult, StatementConfig, Transaction
from statement_gateway.utils.date_utils import generate_date_range

OPENING_DESCRIPTION = "Balance B/F"
OPENING_REFERENCE = "TRANSFER"
INTEREST_REFERENCE = "INTEREST"
TAX_REFERENCE = "TAX"

# 365 days x 100 (rate is a percentage)
DAILY_PRODUCT_DIVISOR = Decimal(36500)


def _to_paisa(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def accrue_interest(daily_product_sum: int, rate_percent: Decimal) -> int:
    """
    Daily-product interest for one cycle, in paisa.

    interest = sum(EOD balances) * annual rate / (365 * 100)
    """
    return _to_paisa(Decimal(daily_product_sum) * Decimal(rate_percent) / DAILY_PRODUCT_DIVISOR)


def withholding_tax(interest_paisa: int, rate_percent: Decimal) -> int:
    """Tax withheld on posted interest, in paisa"""
    return _to_paisa(Decimal(interest_paisa) * Decimal(rate_percent) / Decimal(100))


class _Ledger:
    """Running balance and row accumulator for a single pass"""

    def __init__(self, opening_balance_paisa: int):
        self.balance = opening_balance_paisa
        self.total_debit = 0
        self.total_credit = 0
        self.rows: List[LedgerRow] = []

    def credit(self, day: date, description: str, reference: str, amount: int) -> None:
        self.balance += amount
        self.total_credit += amount
        self.rows.append(LedgerRow(day, description, reference, None, amount, self.balance))

    def debit(self, day: date, description: str, reference: str, amount: int) -> None:
        self.balance -= amount
        self.total_debit += amount
        self.rows.append(LedgerRow(day, description, reference, amount, None, self.balance))

    def post(self, tx: Transaction) -> None:
        if tx.amount_paisa == 0:
            return
        if tx.is_deposit:
            self.credit(tx.date, tx.description, tx.reference, tx.amount_paisa)
        else:
            self.debit(tx.date, tx.description, tx.reference, tx.amount_paisa)

    def result(self) -> SimulationResult:
        return SimulationResult(
            rows=self.rows,
            final_balance_paisa=self.balance,
            total_debit_paisa=self.total_debit,
            total_credit_paisa=self.total_credit,
        )


def simulate_ledger(
    transactions: Sequence[Transaction],
    config: StatementConfig,
    cycle_dates: Sequence[date] | None = None,
) -> SimulationResult:
    """
    Replay transactions over [start_date, end_date] and post interest/tax.

    Pure: the same transactions and config always produce the same result.

    Flow:
    1. "Balance B/F" row at start_date, then any start_date transactions.
       A plain start_date + 1 walk would silently drop transactions placed
       on the first day, so they are posted here and only enter the daily
       product from start_date + 1 onward
    2. Walk start_date + 1 .. end_date:
       - post the day's transactions in list order
       - add the end-of-day balance to the cycle's daily product
       - on a cycle date post interest (and tax when non-zero), then reset
         the daily product whether or not anything was posted
    """
    if cycle_dates is None:
        cycle_dates = interest_cycle_dates(config.start_date, config.end_date)
    cycle_set = set(cycle_dates)

    by_date: Dict[date, List[Transaction]] = defaultdict(list)
    for tx in transactions:
        by_date[tx.date].append(tx)

    ledger = _Ledger(config.opening_balance_paisa)
    ledger.rows.append(
        LedgerRow(
            date=config.start_date,
            description=OPENING_DESCRIPTION,
            reference=OPENING_REFERENCE,
            debit_paisa=None,
            credit_paisa=None,
            running_balance_paisa=ledger.balance,
        )
    )
    for tx in by_date.get(config.start_date, ()):
        ledger.post(tx)

    daily_product_sum = 0
    # start_date itself only carries the B/F row and its transactions
    for cursor in generate_date_range(config.start_date, config.end_date)[1:]:
        for tx in by_date.get(cursor, ()):
            ledger.post(tx)

        daily_product_sum += ledger.balance

        if cursor in cycle_set:
            interest = accrue_interest(daily_product_sum, config.interest_rate_percent)
            if interest > 0:
                ledger.credit(cursor, config.interest_label, INTEREST_REFERENCE, interest)
                tax = withholding_tax(interest, config.tax_rate_percent)
                if tax > 0:
                    ledger.debit(cursor, config.tax_label, TAX_REFERENCE, tax)
            daily_product_sum = 0

    return ledger.result()
