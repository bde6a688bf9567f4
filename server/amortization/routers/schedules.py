"""长期合同分期计划与结算 API 路由"""

from fastapi import APIRouter

from amortization.config import settings
from amortization.models.long_term import InstallmentPreview
from amortization.schemas.schedule import (
    AccountItem,
    ConfirmRequest,
    ConfirmResponse,
    ContractProgressRequest,
    ContractProgressResponse,
    DefaultAccountRequest,
    InstallmentEditRequest,
    InstallmentItem,
    InstallmentStateItem,
    InstallmentUpdateItem,
    ProposedTransactionItem,
    ReconcileRequest,
    ScheduleBalanceResponse,
    SchedulePreviewRequest,
    SchedulePreviewResponse,
    SettlementRequestBody,
    SettlementResponse,
)
from amortization.services.schedule_service import (
    confirm_schedule,
    generate_preview,
    installment_state,
    reconcile,
    summarize_contract,
    update_installment,
)
from amortization.services.settlement_service import (
    pick_default_account,
    settle_installment,
)
from amortization.utils.money import to_decimal

router = APIRouter(tags=["分期计划"])


def _to_previews(items: list[InstallmentItem]) -> list[InstallmentPreview]:
    return [
        InstallmentPreview(
            sequence_index=i.sequence_index, due_date=i.due_date, amount=to_decimal(i.amount)
        )
        for i in items
    ]


def _to_items(installments: list[InstallmentPreview]) -> list[InstallmentItem]:
    return [
        InstallmentItem(
            sequence_index=i.sequence_index, due_date=i.due_date, amount=float(i.amount)
        )
        for i in installments
    ]


def _balance_response(balance) -> ScheduleBalanceResponse:
    return ScheduleBalanceResponse(
        total_allocated=float(balance.total_allocated),
        difference=float(balance.difference),
        is_balanced=balance.is_balanced,
    )


# ───── 生成与编辑 ─────


@router.post("/schedules/preview", response_model=SchedulePreviewResponse)
async def preview_schedule(body: SchedulePreviewRequest):
    installments = generate_preview(
        body.total_value, body.installments_count, body.start_date
    )
    balance = reconcile(installments, body.total_value, settings.MONEY_EPSILON)
    return SchedulePreviewResponse(
        installments=_to_items(installments),
        balance=_balance_response(balance),
    )


@router.post("/schedules/reconcile", response_model=ScheduleBalanceResponse)
async def reconcile_schedule(body: ReconcileRequest):
    balance = reconcile(
        _to_previews(body.installments), body.total_value, settings.MONEY_EPSILON
    )
    return _balance_response(balance)


@router.post("/schedules/installments/{index}", response_model=SchedulePreviewResponse)
async def edit_installment(index: int, body: InstallmentEditRequest):
    installments = update_installment(
        _to_previews(body.installments), index,
        amount=body.amount, due_date=body.due_date,
    )
    balance = reconcile(installments, body.total_value, settings.MONEY_EPSILON)
    return SchedulePreviewResponse(
        installments=_to_items(installments),
        balance=_balance_response(balance),
    )


@router.post("/schedules/confirm", response_model=ConfirmResponse)
async def confirm_schedule_endpoint(body: ConfirmRequest):
    result = confirm_schedule(
        body.title, _to_previews(body.installments), body.total_value,
        category=body.category, epsilon=settings.MONEY_EPSILON,
    )
    return ConfirmResponse(
        ok=result.ok,
        reason=result.reason,
        balance=_balance_response(result.balance),
        transactions=[
            ProposedTransactionItem(
                sequence_index=t.sequence_index,
                description=t.description,
                amount=float(t.amount),
                date=t.date,
                category=t.category,
                status=t.status,
                type=t.type,
            )
            for t in result.transactions
        ],
    )


# ───── 合同进度 ─────


@router.post("/schedules/progress", response_model=ContractProgressResponse)
async def contract_progress(body: ContractProgressRequest):
    progress = summarize_contract(body.transactions, body.as_of)
    return ContractProgressResponse(
        paid_count=progress.paid_count,
        total_count=progress.total_count,
        paid_amount=float(progress.paid_amount),
        remaining_amount=float(progress.remaining_amount),
        percent_paid=progress.percent_paid,
        overdue_count=progress.overdue_count,
        next_due_date=progress.next_due_date,
        suggested_status=progress.suggested_status,
        installments=[
            InstallmentStateItem(id=t.id, state=installment_state(t, body.as_of))
            for t in body.transactions
        ],
    )


# ───── 结算 ─────


@router.post("/settlements", response_model=SettlementResponse)
async def settle(body: SettlementRequestBody):
    result = settle_installment(body, body.account_balance)
    update = result.installment_update
    return SettlementResponse(
        success=result.success,
        effective_amount=float(result.effective_amount),
        debit_amount=float(result.debit_amount),
        balance_after=float(result.balance_after),
        reason=result.reason,
        installment_update=InstallmentUpdateItem(
            transaction_id=update.transaction_id,
            status=update.status,
            date=update.date,
            amount=float(update.amount),
            account_id=update.account_id,
        ) if update else None,
    )


@router.post("/settlements/default-account", response_model=AccountItem | None)
async def default_account(body: DefaultAccountRequest):
    return pick_default_account(body.accounts, body.amount)
