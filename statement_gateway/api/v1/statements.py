"""POST /v1/statements - mock bank statement generation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from statement_gateway.api.v1.schemas import LedgerRowSchema, StatementRequest, StatementResponse, StatementTotals
from statement_gateway.api.dependencies import get_holiday_client, get_request_id
from statement_gateway.config import settings
from statement_gateway.infrastructure.clients.holidays import HolidayClient
from statement_gateway.domain.convergence import generate_statement
from statement_gateway.domain.models import BankTemplate, LedgerRow, StatementConfig
from statement_gateway.domain.templates import get_template
from statement_gateway.domain.exceptions import HolidayAPIError, InvalidStatementConfigError, UnknownTemplateError
from statement_gateway.infrastructure.observability.metrics import record_statement, holiday_fetch_failures_counter
from statement_gateway.infrastructure.observability.logging import log_generation
from statement_gateway.utils.formatting import amount_in_words, format_display_date, format_money

router = APIRouter()


def build_config(request_body: StatementRequest, template: BankTemplate, holidays: set[str]) -> StatementConfig:
    """Combine request fields, template labels and service defaults"""
    count = request_body.target_transaction_count
    min_paisa = request_body.min_transaction_paisa
    max_paisa = request_body.max_transaction_paisa
    return StatementConfig(
        start_date=request_body.start_date,
        end_date=request_body.end_date,
        opening_balance_paisa=request_body.opening_balance_paisa,
        target_balance_paisa=request_body.target_balance_paisa,
        interest_rate_percent=request_body.interest_rate_percent,
        tax_rate_percent=request_body.tax_rate_percent,
        target_transaction_count=settings.default_transaction_count if count is None else count,
        min_transaction_paisa=min_paisa or settings.default_min_transaction_paisa,
        max_transaction_paisa=max_paisa or settings.default_max_transaction_paisa,
        deposit_descriptions=template.deposits,
        withdrawal_descriptions=template.withdrawals,
        interest_label=template.interest,
        tax_label=template.tax,
        holidays=frozenset(holidays),
    )


def to_row_schema(row: LedgerRow) -> LedgerRowSchema:
    return LedgerRowSchema(
        date=row.date,
        display_date=format_display_date(row.date),
        description=row.description,
        reference=row.reference,
        debit_paisa=row.debit_paisa,
        credit_paisa=row.credit_paisa,
        running_balance_paisa=row.running_balance_paisa,
        debit="" if row.debit_paisa is None else format_money(row.debit_paisa),
        credit="" if row.credit_paisa is None else format_money(row.credit_paisa),
        balance=format_money(row.running_balance_paisa),
    )


@router.post("/statements", response_model=StatementResponse)
async def create_statement(
    request_body: StatementRequest,
    request: Request,
    holiday_client: HolidayClient = Depends(get_holiday_client),
):
    """
    Generate a mock statement converging on the requested closing balance.

    Flow:
    1. Resolve bank template (description pools, interest/tax labels)
    2. Collect holidays: request list plus shared calendar when asked
    3. Synthesize transactions and converge on target balance
    4. Record metrics and logs
    5. Return ledger rows, totals and convergence quality
    """
    start_time = time.time()
    request_id = get_request_id(request)
    template_id = request_body.template_id or settings.default_template_id

    try:
        # 1. Template
        template = get_template(template_id)

        # 2. Holidays
        holidays = {d.isoformat() for d in request_body.holidays}
        if request_body.use_holiday_calendar:
            holidays |= await holiday_client.get_holidays()

        # 3. Generate
        config = build_config(request_body, template, holidays)
        result = generate_statement(config, seed=request_body.seed)

    except UnknownTemplateError as e:
        logging.warning(f"Unknown template: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except HolidayAPIError as e:
        holiday_fetch_failures_counter.inc()
        logging.error(f"Holiday API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Holiday service unavailable")

    except InvalidStatementConfigError as e:
        logging.warning(f"Invalid statement config: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # 4. Metrics and logs
    simulation = result.simulation
    duration_ms = (time.time() - start_time) * 1000
    record_statement(result.converged, result.iterations, len(result.transactions))
    log_generation(
        request_id,
        template.id,
        len(result.transactions),
        result.iterations,
        result.converged,
        result.gap_paisa,
        duration_ms,
    )

    return StatementResponse(
        template_id=template.id,
        bank_name=template.name,
        period=f"{format_display_date(config.start_date)} to {format_display_date(config.end_date)}",
        rows=[to_row_schema(row) for row in simulation.rows],
        totals=StatementTotals(
            total_debit_paisa=simulation.total_debit_paisa,
            total_credit_paisa=simulation.total_credit_paisa,
            closing_balance_paisa=simulation.final_balance_paisa,
            closing_balance_words=amount_in_words(simulation.final_balance_paisa),
        ),
        transaction_count=len(result.transactions),
        converged=result.converged,
        gap_paisa=result.gap_paisa,
        iterations=result.iterations,
    )
