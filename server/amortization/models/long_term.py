import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class LongTermType(str, Enum):
    LOAN = "LOAN"  # 借款
    FINANCING = "FINANCING"  # 融资购置
    LICENSE = "LICENSE"  # 许可/软件订阅


class LongTermStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    PARTIAL = "PARTIAL"


class InstallmentState(str, Enum):
    """分期展示状态：已付 / 逾期 / 待付"""

    PAID = "PAID"
    OVERDUE = "OVERDUE"
    PENDING = "PENDING"


class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class ErrorCode(str, Enum):
    INVALID_SCHEDULE_CONFIGURATION = "INVALID_SCHEDULE_CONFIGURATION"
    SCHEDULE_NOT_BALANCED = "SCHEDULE_NOT_BALANCED"
    INVALID_DISCOUNT = "INVALID_DISCOUNT"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"


@dataclass(frozen=True)
class LongTermItem:
    """长期合同：借款 / 融资 / 许可"""

    type: LongTermType
    total_value: Decimal
    acquisition_date: date
    installments_count: int
    status: LongTermStatus = LongTermStatus.ACTIVE
    title: str = ""
    provider: str = ""
    validity_end_date: date | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class InstallmentPreview:
    """分期预览行（确认前不落库）"""

    sequence_index: int
    due_date: date
    amount: Decimal


@dataclass(frozen=True)
class InstallmentTransaction:
    """调用方已持久化的分期流水快照"""

    id: str
    amount: Decimal
    due_date: date
    status: TransactionStatus = TransactionStatus.PENDING


@dataclass(frozen=True)
class FinancialAccount:
    id: str
    balance: Decimal
    status: AccountStatus = AccountStatus.ACTIVE
    name: str = ""


@dataclass(frozen=True)
class ScheduleBalance:
    total_allocated: Decimal
    difference: Decimal
    is_balanced: bool


@dataclass(frozen=True)
class ProposedTransaction:
    """确认分期后建议调用方写入的待付支出流水"""

    description: str
    amount: Decimal
    date: date
    category: str
    sequence_index: int
    status: TransactionStatus = TransactionStatus.PENDING
    type: str = "EXPENSE"


@dataclass(frozen=True)
class ScheduleConfirmation:
    ok: bool
    balance: ScheduleBalance
    reason: ErrorCode | None = None
    transactions: list[ProposedTransaction] = field(default_factory=list)


@dataclass(frozen=True)
class ContractProgress:
    paid_count: int
    total_count: int
    paid_amount: Decimal
    remaining_amount: Decimal
    percent_paid: float
    overdue_count: int
    next_due_date: date | None
    suggested_status: LongTermStatus


@dataclass(frozen=True)
class SettlementRequest:
    installment_transaction_id: str
    pay_date: date
    base_amount: Decimal
    account_id: str
    interest: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")


@dataclass(frozen=True)
class InstallmentUpdate:
    """结算成功后调用方需写回分期流水的字段"""

    transaction_id: str
    status: TransactionStatus
    date: date
    amount: Decimal
    account_id: str


@dataclass(frozen=True)
class SettlementResult:
    success: bool
    effective_amount: Decimal
    debit_amount: Decimal
    balance_after: Decimal
    reason: ErrorCode | None = None
    installment_update: InstallmentUpdate | None = None
