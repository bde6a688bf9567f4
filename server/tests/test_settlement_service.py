"""分期结算 — 单元测试"""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from amortization.models.long_term import (
    ErrorCode,
    FinancialAccount,
    SettlementRequest,
    TransactionStatus,
)
from amortization.services.schedule_service import ScheduleError
from amortization.services.settlement_service import (
    pick_default_account,
    settle_installment,
)


def _request(**overrides) -> SettlementRequest:
    defaults = dict(
        installment_transaction_id="tx-1",
        pay_date=date(2025, 3, 5),
        base_amount=Decimal("100.00"),
        interest=Decimal("10.00"),
        discount=Decimal("5.00"),
        account_id="acc-1",
    )
    defaults.update(overrides)
    return SettlementRequest(**defaults)


class TestSettle:

    def test_effective_amount(self):
        """100 + 10 - 5 = 105"""
        result = settle_installment(_request(), Decimal("200.00"))
        assert result.success is True
        assert result.reason is None
        assert result.effective_amount == Decimal("105.00")
        assert result.debit_amount == Decimal("105.00")
        assert result.balance_after == Decimal("95.00")

    def test_installment_update_on_success(self):
        update = settle_installment(_request(), Decimal("200.00")).installment_update
        assert update.transaction_id == "tx-1"
        assert update.status == TransactionStatus.PAID
        assert update.date == date(2025, 3, 5)
        assert update.amount == Decimal("105.00")
        assert update.account_id == "acc-1"

    def test_insufficient_balance(self):
        """余额 50 < 实付 105 → 拒绝，不建议扣款"""
        result = settle_installment(_request(), Decimal("50.00"))
        assert result.success is False
        assert result.reason == ErrorCode.INSUFFICIENT_BALANCE
        assert result.effective_amount == Decimal("105.00")
        assert result.debit_amount == Decimal("0")
        assert result.balance_after == Decimal("50.00")
        assert result.installment_update is None

    def test_exact_balance_is_enough(self):
        result = settle_installment(_request(), Decimal("105.00"))
        assert result.success is True
        assert result.balance_after == Decimal("0")

    def test_discount_exceeds_base(self):
        """折扣超过原金额 → INVALID_DISCOUNT，先于余额校验"""
        result = settle_installment(
            _request(discount=Decimal("150.00"), interest=Decimal("0")), Decimal("0")
        )
        assert result.success is False
        assert result.reason == ErrorCode.INVALID_DISCOUNT
        assert result.debit_amount == Decimal("0")

    def test_full_discount_costs_nothing(self):
        result = settle_installment(
            _request(discount=Decimal("100.00"), interest=Decimal("0")), Decimal("0")
        )
        assert result.success is True
        assert result.effective_amount == Decimal("0")
        assert result.debit_amount == Decimal("0")

    def test_accepts_float_inputs(self):
        request = SimpleNamespace(
            installment_transaction_id="tx-2",
            pay_date=date(2025, 3, 5),
            base_amount=0.1,
            interest=0.2,
            discount=0,
            account_id="acc-1",
        )
        result = settle_installment(request, 1)
        assert result.effective_amount == Decimal("0.3")

    def test_negative_interest_is_rejected(self):
        with pytest.raises(ScheduleError):
            settle_installment(_request(interest=Decimal("-1")), Decimal("1000"))


class TestDefaultAccount:

    def test_first_active_with_enough_balance(self):
        accounts = [
            FinancialAccount(id="a1", balance=Decimal("50")),
            FinancialAccount(id="a2", balance=Decimal("500"), status="INACTIVE"),
            FinancialAccount(id="a3", balance=Decimal("300")),
        ]
        assert pick_default_account(accounts, Decimal("100")).id == "a3"

    def test_falls_back_to_first_account(self):
        accounts = [
            FinancialAccount(id="a1", balance=Decimal("10")),
            FinancialAccount(id="a2", balance=Decimal("20")),
        ]
        assert pick_default_account(accounts, Decimal("100")).id == "a1"

    def test_no_accounts(self):
        assert pick_default_account([], Decimal("100")) is None
