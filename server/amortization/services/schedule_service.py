"""分期计划引擎 — 生成预览、编辑对账、确认、合同进度"""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

from amortization.models.long_term import (
    ContractProgress,
    ErrorCode,
    InstallmentPreview,
    InstallmentState,
    LongTermStatus,
    ProposedTransaction,
    ScheduleBalance,
    ScheduleConfirmation,
    TransactionStatus,
)
from amortization.utils.dates import add_months
from amortization.utils.money import MONEY_EPSILON, floor_to_cents, to_decimal

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Longo Prazo"


class ScheduleError(Exception):
    def __init__(self, detail: str, status_code: int = 400, code: ErrorCode | None = None):
        self.detail = detail
        self.status_code = status_code
        self.code = code


# ─────────────────────── 生成预览 ───────────────────────


def validate_schedule_config(total_value, installments_count: int) -> ErrorCode | None:
    """分期数 < 1 或合同总额为负 → INVALID_SCHEDULE_CONFIGURATION"""
    if installments_count < 1 or to_decimal(total_value) < 0:
        return ErrorCode.INVALID_SCHEDULE_CONFIGURATION
    return None


def generate_preview(
    total_value, installments_count: int, start_date: date
) -> list[InstallmentPreview]:
    """
    均分生成分期预览
    - 每期基础金额向下取整到分
    - 取整余差全部计入第 1 期，保证各期合计严格等于合同总额
    - 第 i 期到期日 = 起始日 + i 个月
    """
    if validate_schedule_config(total_value, installments_count):
        raise ScheduleError(
            f"无效的分期配置: 总额 {total_value}, 期数 {installments_count}",
            code=ErrorCode.INVALID_SCHEDULE_CONFIGURATION,
        )

    total = to_decimal(total_value)
    base_amount = floor_to_cents(total / installments_count)
    remainder = total - base_amount * installments_count

    installments = []
    for i in range(installments_count):
        amount = base_amount + remainder if i == 0 else base_amount
        installments.append(InstallmentPreview(
            sequence_index=i,
            due_date=add_months(start_date, i),
            amount=amount,
        ))

    logger.debug(
        f"[分期预览] 总额 {total} 分 {installments_count} 期，"
        f"基础金额 {base_amount}，首期余差 {remainder}"
    )
    return installments


# ─────────────────────── 编辑对账 ───────────────────────


def update_installment(
    installments: list[InstallmentPreview],
    index: int,
    amount=None,
    due_date: date | None = None,
) -> list[InstallmentPreview]:
    """修改单期金额或日期，返回新列表；其余各期不自动调整"""
    if not any(inst.sequence_index == index for inst in installments):
        raise ScheduleError(f"分期不存在: {index}", 404)

    updated = []
    for inst in installments:
        if inst.sequence_index == index:
            changes = {}
            if amount is not None:
                changes["amount"] = to_decimal(amount)
            if due_date is not None:
                changes["due_date"] = due_date
            inst = replace(inst, **changes)
        updated.append(inst)
    return updated


def reconcile(
    installments: list[InstallmentPreview],
    total_value,
    epsilon: Decimal = MONEY_EPSILON,
) -> ScheduleBalance:
    """差额 = 合同总额 - 已分配合计；|差额| < epsilon 视为 0"""
    total_allocated = sum((to_decimal(inst.amount) for inst in installments), Decimal("0"))
    difference = to_decimal(total_value) - total_allocated
    if abs(difference) < epsilon:
        difference = Decimal("0")
    return ScheduleBalance(
        total_allocated=total_allocated,
        difference=difference,
        is_balanced=difference == 0,
    )


def confirm_schedule(
    item_title: str,
    installments: list[InstallmentPreview],
    total_value,
    category: str | None = None,
    epsilon: Decimal = MONEY_EPSILON,
) -> ScheduleConfirmation:
    """
    确认分期计划
    未平衡时返回 SCHEDULE_NOT_BALANCED 且不生成流水；
    平衡时每期生成一条待付支出流水，由调用方落库
    """
    balance = reconcile(installments, total_value, epsilon)
    if not balance.is_balanced:
        logger.info(f"[分期确认] {item_title} 未平衡，差额 {balance.difference}")
        return ScheduleConfirmation(
            ok=False, balance=balance, reason=ErrorCode.SCHEDULE_NOT_BALANCED
        )

    transactions = [
        ProposedTransaction(
            description=f"Parcela {item_title}",
            amount=to_decimal(inst.amount),
            date=inst.due_date,
            category=category or DEFAULT_CATEGORY,
            sequence_index=inst.sequence_index,
        )
        for inst in sorted(installments, key=lambda i: i.sequence_index)
    ]
    return ScheduleConfirmation(ok=True, balance=balance, transactions=transactions)


# ─────────────────────── 合同进度 ───────────────────────


def installment_state(transaction, as_of: date | None = None) -> InstallmentState:
    """已付 → PAID；未付且到期日早于今天 → OVERDUE；否则 PENDING"""
    if TransactionStatus(transaction.status) == TransactionStatus.PAID:
        return InstallmentState.PAID
    as_of = as_of or date.today()
    if transaction.due_date < as_of:
        return InstallmentState.OVERDUE
    return InstallmentState.PENDING


def summarize_contract(transactions, as_of: date | None = None) -> ContractProgress:
    """按合同下的分期流水统计已付期数、剩余金额、逾期期数与下一到期日"""
    as_of = as_of or date.today()
    paid = [t for t in transactions if installment_state(t, as_of) == InstallmentState.PAID]
    unpaid = [t for t in transactions if installment_state(t, as_of) != InstallmentState.PAID]
    overdue = [t for t in unpaid if installment_state(t, as_of) == InstallmentState.OVERDUE]

    total_count = len(transactions)
    percent_paid = round(len(paid) / total_count * 100, 2) if total_count else 0.0
    next_due = min((t.due_date for t in unpaid), default=None)

    if total_count and not unpaid:
        suggested_status = LongTermStatus.PAID
    else:
        suggested_status = LongTermStatus.ACTIVE

    return ContractProgress(
        paid_count=len(paid),
        total_count=total_count,
        paid_amount=sum((to_decimal(t.amount) for t in paid), Decimal("0")),
        remaining_amount=sum((to_decimal(t.amount) for t in unpaid), Decimal("0")),
        percent_paid=percent_paid,
        overdue_count=len(overdue),
        next_due_date=next_due,
        suggested_status=suggested_status,
    )
