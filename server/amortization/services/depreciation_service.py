"""折旧计算引擎 — 直线法、年数总和法、双倍余额递减法、工作量法"""

from datetime import date
from decimal import Decimal

from amortization.models.asset import (
    AssetStatus,
    DepreciationMethod,
    DepreciationMetrics,
    DepreciationPeriod,
    PortfolioSummary,
)
from amortization.utils.dates import add_months, months_between
from amortization.utils.money import quantize_money, to_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class AssetError(Exception):
    def __init__(self, detail: str, status_code: int = 400):
        self.detail = detail
        self.status_code = status_code


# ─────────────────────── helpers ───────────────────────


def _resolve_method(asset) -> DepreciationMethod:
    try:
        return DepreciationMethod(asset.depreciation_method)
    except ValueError:
        raise AssetError(f"未知的折旧方法: {asset.depreciation_method}")


def get_depreciable_amount(asset) -> Decimal:
    """可折旧总额 = 原值 - 残值"""
    return to_decimal(asset.initial_value) - to_decimal(asset.residual_value)


def get_months_passed(asset, as_of: date) -> int:
    """已使用月数，限定在 [0, 使用寿命] 内"""
    passed = months_between(asset.acquisition_date, as_of)
    return min(max(0, passed), asset.useful_life_months)


# ─────────────────────── 各折旧方法 ───────────────────────


def _linear(depreciable: Decimal, life_months: int, months_passed: int) -> Decimal:
    return depreciable / life_months * months_passed


def _sum_of_years(depreciable: Decimal, life_months: int, months_passed: int) -> Decimal:
    """
    年数总和法
    n = 使用年限向上取整，S = n(n+1)/2
    第 i 个完整年度折旧 (n-i)/S，当年未满部分按已过月份比例折算
    """
    n = -(-life_months // 12)
    digits_sum = Decimal(n * (n + 1) // 2)

    full_years = months_passed // 12
    accumulated = ZERO
    for i in range(full_years):
        accumulated += Decimal(n - i) / digits_sum * depreciable

    partial_year = Decimal(months_passed % 12) / 12
    if partial_year > 0:
        fraction = Decimal(n - full_years) / digits_sum
        accumulated += fraction * depreciable * partial_year
    return accumulated


def _declining_balance(
    initial: Decimal, residual: Decimal, life_months: int, months_passed: int
) -> Decimal:
    """
    双倍余额递减法：年折旧率 = 2 / 使用年限
    逐年按账面净值计提，账面净值不得低于残值
    """
    life_years = Decimal(life_months) / 12
    rate = 2 / life_years

    book_value = initial
    accumulated = ZERO
    full_years = months_passed // 12
    for _ in range(full_years):
        dep = book_value * rate
        if book_value - dep < residual:
            # 本年只提足到残值为止
            accumulated += book_value - residual
            book_value = residual
            break
        accumulated += dep
        book_value -= dep

    partial_year = Decimal(months_passed % 12) / 12
    if partial_year > 0 and book_value > residual:
        dep = book_value * rate * partial_year
        if book_value - dep < residual:
            accumulated += book_value - residual
        else:
            accumulated += dep
    return accumulated


def _units_of_production(asset, depreciable: Decimal) -> Decimal:
    """工作量法：与时间无关；未填写预计总量时按 1 处理"""
    total_units = to_decimal(asset.usage_total_estimated)
    if total_units == 0:
        total_units = Decimal("1")
    current_usage = to_decimal(asset.usage_current)
    usage_ratio = min(Decimal("1"), current_usage / total_units)
    return usage_ratio * depreciable


# ─────────────────────── 折旧指标 ───────────────────────


def compute_metrics(asset, as_of: date | None = None) -> DepreciationMetrics:
    """
    计算资产在 as_of（默认今天）的折旧指标
    - 已使用月数按日历年/月字段相减，忽略日
    - 累计折旧以可折旧总额封顶，账面净值不低于残值
    """
    if asset.useful_life_months <= 0:
        raise AssetError("使用寿命必须大于 0 个月")

    initial = to_decimal(asset.initial_value)
    residual = to_decimal(asset.residual_value)
    if residual > initial:
        raise AssetError("残值不能大于原值")

    method = _resolve_method(asset)
    as_of = as_of or date.today()
    life_months = asset.useful_life_months
    months_passed = get_months_passed(asset, as_of)
    depreciable = initial - residual

    if method == DepreciationMethod.LINEAR:
        accumulated = _linear(depreciable, life_months, months_passed)
    elif method == DepreciationMethod.SUM_OF_YEARS:
        accumulated = _sum_of_years(depreciable, life_months, months_passed)
    elif method == DepreciationMethod.DECLINING_BALANCE:
        accumulated = _declining_balance(initial, residual, life_months, months_passed)
    else:
        accumulated = _units_of_production(asset, depreciable)

    accumulated = min(max(quantize_money(accumulated), ZERO), depreciable)
    current_value = initial - accumulated

    if depreciable > 0:
        progress = float((accumulated / depreciable * HUNDRED).quantize(Decimal("0.01")))
    else:
        progress = 0.0

    return DepreciationMetrics(
        current_value=current_value,
        accumulated_depreciation=accumulated,
        progress_percent=min(100.0, max(0.0, progress)),
        months_remaining=max(0, life_months - months_passed),
        months_passed=months_passed,
    )


def build_depreciation_schedule(asset) -> list[DepreciationPeriod]:
    """按月展开整个使用寿命内的折旧进度（第 0 期为取得当月）"""
    schedule = []
    previous = ZERO
    for period in range(asset.useful_life_months + 1):
        as_of = add_months(asset.acquisition_date, period)
        metrics = compute_metrics(asset, as_of)
        schedule.append(DepreciationPeriod(
            period=period,
            as_of=as_of,
            period_depreciation=metrics.accumulated_depreciation - previous,
            accumulated_depreciation=metrics.accumulated_depreciation,
            current_value=metrics.current_value,
        ))
        previous = metrics.accumulated_depreciation
    return schedule


# ─────────────────────── 汇总 ───────────────────────


def summarize_portfolio(assets, as_of: date | None = None) -> PortfolioSummary:
    """资产组合汇总：仅统计在用资产的投入、当前净值与累计折旧"""
    active = [a for a in assets if AssetStatus(a.status) == AssetStatus.ACTIVE]
    total_invested = sum((to_decimal(a.initial_value) for a in active), ZERO)
    total_current = sum(
        (compute_metrics(a, as_of).current_value for a in active), ZERO
    )
    return PortfolioSummary(
        total_invested=total_invested,
        total_current_value=total_current,
        total_depreciation=total_invested - total_current,
        asset_count=len(assets),
        active_count=len(active),
    )
