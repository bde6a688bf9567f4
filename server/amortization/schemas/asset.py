"""固定资产折旧 Pydantic Schema"""

from datetime import date
from pydantic import BaseModel, Field

from amortization.models.asset import AssetStatus, DepreciationMethod


class AssetSnapshot(BaseModel):
    id: str = ""
    name: str = Field("", max_length=200)
    initial_value: float = Field(..., ge=0, description="原值")
    residual_value: float = Field(0, ge=0, description="残值")
    acquisition_date: date
    useful_life_months: int = Field(..., gt=0, description="使用寿命(月)")
    depreciation_method: DepreciationMethod = DepreciationMethod.LINEAR
    usage_total_estimated: float | None = Field(None, ge=0, description="预计总工作量")
    usage_current: float | None = Field(None, ge=0, description="当前累计工作量")
    status: AssetStatus = AssetStatus.ACTIVE


class MetricsRequest(BaseModel):
    asset: AssetSnapshot
    as_of: date | None = Field(None, description="评估日期，默认今天")


class DepreciationMetricsResponse(BaseModel):
    current_value: float
    accumulated_depreciation: float
    progress_percent: float
    months_remaining: int
    months_passed: int


class DepreciationScheduleItem(BaseModel):
    period: int
    as_of: date
    period_depreciation: float
    accumulated_depreciation: float
    current_value: float


class PortfolioRequest(BaseModel):
    assets: list[AssetSnapshot]
    as_of: date | None = None


class AssetMetricsItem(DepreciationMetricsResponse):
    asset_id: str
    name: str
    status: AssetStatus


class PortfolioResponse(BaseModel):
    total_invested: float
    total_current_value: float
    total_depreciation: float
    asset_count: int
    active_count: int
    items: list[AssetMetricsItem]
    failed_asset_ids: list[str]
