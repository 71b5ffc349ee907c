from __future__ import annotations

from fastapi import APIRouter, Depends

from beautypro.api.v1.auth import require_area
from beautypro.api.v1.schemas import EntryCreateSchema, FinanceSummarySchema, TransactionSchema
from beautypro.application.use_cases.ledger import LedgerEngine
from beautypro.application.utils.formatting import format_currency
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import get_ledger


router = APIRouter(prefix="/finance")


@router.get("", response_model=FinanceSummarySchema)
def finance_summary(
    _: User = Depends(require_area("finance")),
    ledger: LedgerEngine = Depends(get_ledger),
):
    summary = ledger.summary()
    return FinanceSummarySchema(
        income=summary.income,
        expense=summary.expense,
        balance=summary.balance,
        income_display=format_currency(summary.income),
        expense_display=format_currency(summary.expense),
        balance_display=format_currency(summary.balance),
        transactions=[TransactionSchema.model_validate(t) for t in summary.transactions],
    )


@router.post("/entries", response_model=TransactionSchema, status_code=201)
def record_entry(
    req: EntryCreateSchema,
    _: User = Depends(require_area("finance")),
    ledger: LedgerEngine = Depends(get_ledger),
):
    return ledger.record_entry(req.type, req.value, req.description, req.category)
