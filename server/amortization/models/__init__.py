from amortization.models.asset import (
    AssetStatus,
    DepreciationMethod,
    DepreciationMetrics,
    DepreciationPeriod,
    FixedAsset,
    PortfolioSummary,
)
from amortization.models.long_term import (
    AccountStatus,
    ContractProgress,
    ErrorCode,
    FinancialAccount,
    InstallmentPreview,
    InstallmentState,
    InstallmentTransaction,
    InstallmentUpdate,
    LongTermItem,
    LongTermStatus,
    LongTermType,
    ProposedTransaction,
    ScheduleBalance,
    ScheduleConfirmation,
    SettlementRequest,
    SettlementResult,
    TransactionStatus,
)
