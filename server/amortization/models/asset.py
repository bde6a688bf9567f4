import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class DepreciationMethod(str, Enum):
    LINEAR = "LINEAR"  # 直线法
    SUM_OF_YEARS = "SUM_OF_YEARS"  # 年数总和法
    DECLINING_BALANCE = "DECLINING_BALANCE"  # 双倍余额递减法
    UNITS_OF_PRODUCTION = "UNITS_OF_PRODUCTION"  # 工作量法


class AssetStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SOLD = "SOLD"
    WRITTEN_OFF = "WRITTEN_OFF"


@dataclass(frozen=True)
class FixedAsset:
    """固定资产快照（由调用方从存储层读取后传入）"""

    initial_value: Decimal
    residual_value: Decimal
    acquisition_date: date
    useful_life_months: int
    depreciation_method: DepreciationMethod = DepreciationMethod.LINEAR
    usage_total_estimated: Decimal | None = None
    usage_current: Decimal | None = None
    status: AssetStatus = AssetStatus.ACTIVE
    name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class DepreciationMetrics:
    current_value: Decimal
    accumulated_depreciation: Decimal
    progress_percent: float
    months_remaining: int
    months_passed: int


@dataclass(frozen=True)
class DepreciationPeriod:
    period: int
    as_of: date
    period_depreciation: Decimal
    accumulated_depreciation: Decimal
    current_value: Decimal


@dataclass(frozen=True)
class PortfolioSummary:
    total_invested: Decimal
    total_current_value: Decimal
    total_depreciation: Decimal
    asset_count: int
    active_count: int
