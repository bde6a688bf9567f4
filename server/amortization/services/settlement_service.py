"""分期结算 — 利息/折扣调整、账户余额校验、默认付款账户

本模块只做校验与计算，不修改任何账户或流水。
"校验余额 → 扣款" 必须由存储层在同一个按账户串行化的事务中完成
（行锁 / 余额 CAS / serializable 事务），否则并发结算可能基于过期余额同时通过校验。
"""

import logging
from decimal import Decimal

from amortization.models.long_term import (
    AccountStatus,
    ErrorCode,
    InstallmentUpdate,
    SettlementResult,
    TransactionStatus,
)
from amortization.services.schedule_service import ScheduleError
from amortization.utils.money import to_decimal

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def settle_installment(request, account_balance) -> SettlementResult:
    """
    结算一期分期
    1. 实付 = 原金额 + 利息 - 折扣
    2. 折扣超过原金额 → INVALID_DISCOUNT（先于余额校验）
    3. 实付为负按 0 处理；实付 > 账户余额 → INSUFFICIENT_BALANCE，不建议任何扣款
    4. 成功时返回需写回的分期字段与扣款金额
    """
    base_amount = to_decimal(request.base_amount)
    interest = to_decimal(request.interest)
    discount = to_decimal(request.discount)
    balance = to_decimal(account_balance)

    if interest < 0 or discount < 0:
        raise ScheduleError("利息和折扣不能为负数")

    effective_amount = base_amount + interest - discount

    if discount > base_amount:
        logger.info(
            f"[分期结算] {request.installment_transaction_id} 折扣 {discount} 超过原金额 {base_amount}"
        )
        return SettlementResult(
            success=False,
            effective_amount=effective_amount,
            debit_amount=ZERO,
            balance_after=balance,
            reason=ErrorCode.INVALID_DISCOUNT,
        )

    cost = max(effective_amount, ZERO)
    if cost > balance:
        logger.info(
            f"[分期结算] {request.installment_transaction_id} 账户 {request.account_id} "
            f"余额 {balance} 不足以支付 {cost}"
        )
        return SettlementResult(
            success=False,
            effective_amount=effective_amount,
            debit_amount=ZERO,
            balance_after=balance,
            reason=ErrorCode.INSUFFICIENT_BALANCE,
        )

    return SettlementResult(
        success=True,
        effective_amount=effective_amount,
        debit_amount=cost,
        balance_after=balance - cost,
        installment_update=InstallmentUpdate(
            transaction_id=request.installment_transaction_id,
            status=TransactionStatus.PAID,
            date=request.pay_date,
            amount=effective_amount,
            account_id=request.account_id,
        ),
    )


def pick_default_account(accounts, amount):
    """默认付款账户：第一个余额大于该金额的启用账户，否则取第一个账户"""
    amount = to_decimal(amount)
    for acc in accounts:
        if AccountStatus(acc.status) == AccountStatus.ACTIVE and to_decimal(acc.balance) > amount:
            return acc
    return accounts[0] if accounts else None
