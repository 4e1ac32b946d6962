"""Domain models - pure Python dataclasses representing statement entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class StatementConfig:
    """Inputs for one statement generation run (amounts in paisa)"""

    start_date: date
    end_date: date
    opening_balance_paisa: int
    target_balance_paisa: int
    interest_rate_percent: Decimal
    tax_rate_percent: Decimal
    target_transaction_count: int
    min_transaction_paisa: int
    max_transaction_paisa: int
    deposit_descriptions: Tuple[str, ...]
    withdrawal_descriptions: Tuple[str, ...]
    interest_label: str
    tax_label: str
    holidays: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class Transaction:
    """Synthesized statement transaction"""

    date: date
    is_deposit: bool
    amount_paisa: int
    description: str
    reference: str  # 7-digit cosmetic reference


@dataclass(frozen=True)
class LedgerRow:
    """Single line of the simulated ledger"""

    date: date
    description: str
    reference: str
    debit_paisa: Optional[int]
    credit_paisa: Optional[int]
    running_balance_paisa: int


@dataclass
class SimulationResult:
    """Output of one ledger simulation pass"""

    rows: List[LedgerRow]
    final_balance_paisa: int
    total_debit_paisa: int
    total_credit_paisa: int


@dataclass
class StatementResult:
    """Converged (or best-effort) statement"""

    simulation: SimulationResult
    transactions: List[Transaction]  # amounts adjusted to zero are left out
    gap_paisa: int  # target - final balance of the returned simulation
    iterations: int
    converged: bool


@dataclass(frozen=True)
class BankTemplate:
    """Per-institution labels used when synthesizing a statement"""

    id: str
    name: str
    location: str
    deposits: Tuple[str, ...]
    withdrawals: Tuple[str, ...]
    interest: str = "Interest Posted on A/C"
    tax: str = "Tax Deducted"
