"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from datetime import date
from decimal import Decimal
from typing import List, Optional


class StatementRequest(BaseModel):
    """Request body for POST /v1/statements (amounts in paisa)"""

    template_id: Optional[str] = Field(None, description="Bank template id (service default if omitted)")
    start_date: date
    end_date: date
    opening_balance_paisa: int = Field(..., description="Balance brought forward")
    target_balance_paisa: int = Field(..., description="Closing balance to converge on")
    interest_rate_percent: Decimal = Field(Decimal("0"), ge=0)
    tax_rate_percent: Decimal = Field(Decimal("0"), ge=0)
    target_transaction_count: Optional[int] = Field(None, ge=0)
    min_transaction_paisa: Optional[int] = Field(None, gt=0)
    max_transaction_paisa: Optional[int] = Field(None, gt=0)
    holidays: List[date] = Field(default_factory=list, description="Extra holidays for this statement")
    use_holiday_calendar: bool = Field(False, description="Merge the shared holiday calendar")
    seed: Optional[int] = Field(None, description="Seed for reproducible output")

    @model_validator(mode="after")
    def check_period(self) -> "StatementRequest":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class LedgerRowSchema(BaseModel):
    """Single statement line, raw and display values"""

    date: date
    display_date: str
    description: str
    reference: str
    debit_paisa: Optional[int] = None
    credit_paisa: Optional[int] = None
    running_balance_paisa: int
    debit: str
    credit: str
    balance: str


class StatementTotals(BaseModel):
    total_debit_paisa: int
    total_credit_paisa: int
    closing_balance_paisa: int
    closing_balance_words: str


class StatementResponse(BaseModel):
    """Response for POST /v1/statements"""

    template_id: str
    bank_name: str
    period: str
    rows: List[LedgerRowSchema]
    totals: StatementTotals
    transaction_count: int
    converged: bool
    gap_paisa: int
    iterations: int


class TemplateSummary(BaseModel):
    """Template entry for GET /v1/templates"""

    id: str
    name: str
    location: str


class TemplateDetail(TemplateSummary):
    """Response for GET /v1/templates/{template_id}"""

    deposits: List[str]
    withdrawals: List[str]
    interest: str
    tax: str
