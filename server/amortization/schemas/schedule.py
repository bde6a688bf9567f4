"""分期计划与结算 Pydantic Schema"""

from datetime import date
from pydantic import BaseModel, Field

from amortization.config import settings
from amortization.models.long_term import (
    AccountStatus,
    ErrorCode,
    InstallmentState,
    LongTermStatus,
    TransactionStatus,
)


class SchedulePreviewRequest(BaseModel):
    total_value: float = Field(..., description="合同总额")
    installments_count: int = Field(..., le=settings.MAX_INSTALLMENTS, description="分期数")
    start_date: date = Field(..., description="首期到期日")


class InstallmentItem(BaseModel):
    sequence_index: int = Field(..., ge=0)
    due_date: date
    amount: float


class ScheduleBalanceResponse(BaseModel):
    total_allocated: float
    difference: float
    is_balanced: bool


class SchedulePreviewResponse(BaseModel):
    installments: list[InstallmentItem]
    balance: ScheduleBalanceResponse


class ReconcileRequest(BaseModel):
    total_value: float
    installments: list[InstallmentItem]


class InstallmentEditRequest(BaseModel):
    total_value: float
    installments: list[InstallmentItem]
    amount: float | None = Field(None, description="新金额，不改则省略")
    due_date: date | None = Field(None, description="新到期日，不改则省略")


class ConfirmRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    total_value: float
    installments: list[InstallmentItem] = Field(..., min_length=1)
    category: str | None = None


class ProposedTransactionItem(BaseModel):
    sequence_index: int
    description: str
    amount: float
    date: date
    category: str
    status: TransactionStatus
    type: str


class ConfirmResponse(BaseModel):
    ok: bool
    reason: ErrorCode | None
    balance: ScheduleBalanceResponse
    transactions: list[ProposedTransactionItem]


class InstallmentTransactionItem(BaseModel):
    id: str
    amount: float
    due_date: date
    status: TransactionStatus = TransactionStatus.PENDING


class ContractProgressRequest(BaseModel):
    transactions: list[InstallmentTransactionItem]
    as_of: date | None = None


class InstallmentStateItem(BaseModel):
    id: str
    state: InstallmentState


class ContractProgressResponse(BaseModel):
    paid_count: int
    total_count: int
    paid_amount: float
    remaining_amount: float
    percent_paid: float
    overdue_count: int
    next_due_date: date | None
    suggested_status: LongTermStatus
    installments: list[InstallmentStateItem]


class SettlementRequestBody(BaseModel):
    installment_transaction_id: str
    pay_date: date = Field(..., description="实际付款日期")
    base_amount: float = Field(..., ge=0, description="分期原金额")
    interest: float = Field(0, ge=0, description="利息/罚金")
    discount: float = Field(0, ge=0, description="折扣")
    account_id: str = Field(..., description="付款账户 ID")
    account_balance: float = Field(..., description="付款账户当前余额（调用方读取的快照）")


class InstallmentUpdateItem(BaseModel):
    transaction_id: str
    status: TransactionStatus
    date: date
    amount: float
    account_id: str


class SettlementResponse(BaseModel):
    success: bool
    effective_amount: float
    debit_amount: float
    balance_after: float
    reason: ErrorCode | None
    installment_update: InstallmentUpdateItem | None


class AccountItem(BaseModel):
    id: str
    name: str = ""
    balance: float
    status: AccountStatus = AccountStatus.ACTIVE


class DefaultAccountRequest(BaseModel):
    accounts: list[AccountItem]
    amount: float
