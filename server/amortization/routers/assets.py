"""固定资产折旧 API 路由（无状态：资产快照由调用方随请求提交）"""

from fastapi import APIRouter, HTTPException

from amortization.schemas.asset import (
    AssetMetricsItem,
    DepreciationMetricsResponse,
    DepreciationScheduleItem,
    MetricsRequest,
    AssetSnapshot,
    PortfolioRequest,
    PortfolioResponse,
)
from amortization.services.depreciation_service import (
    build_depreciation_schedule,
    compute_metrics,
    summarize_portfolio,
    AssetError,
)
from amortization.tasks.depreciation import run_portfolio_revaluation

router = APIRouter(prefix="/assets", tags=["固定资产"])


def _to_response(metrics) -> DepreciationMetricsResponse:
    return DepreciationMetricsResponse(
        current_value=float(metrics.current_value),
        accumulated_depreciation=float(metrics.accumulated_depreciation),
        progress_percent=metrics.progress_percent,
        months_remaining=metrics.months_remaining,
        months_passed=metrics.months_passed,
    )


@router.post(
    "/metrics",
    response_model=DepreciationMetricsResponse,
    summary="计算折旧指标",
)
async def get_metrics(body: MetricsRequest):
    try:
        return _to_response(compute_metrics(body.asset, body.as_of))
    except AssetError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


@router.post(
    "/depreciation-schedule",
    response_model=list[DepreciationScheduleItem],
    summary="按月折旧进度表",
)
async def get_depreciation_schedule(body: AssetSnapshot):
    try:
        schedule = build_depreciation_schedule(body)
    except AssetError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    return [
        DepreciationScheduleItem(
            period=p.period,
            as_of=p.as_of,
            period_depreciation=float(p.period_depreciation),
            accumulated_depreciation=float(p.accumulated_depreciation),
            current_value=float(p.current_value),
        )
        for p in schedule
    ]


@router.post(
    "/portfolio",
    response_model=PortfolioResponse,
    summary="资产组合汇总",
)
async def get_portfolio(body: PortfolioRequest):
    evaluated, failed = run_portfolio_revaluation(body.assets, body.as_of)
    summary = summarize_portfolio([a for a, _ in evaluated], body.as_of)

    items = []
    for asset, result in evaluated:
        metrics = _to_response(result)
        items.append(AssetMetricsItem(
            asset_id=asset.id,
            name=asset.name,
            status=asset.status,
            **metrics.model_dump(),
        ))

    return PortfolioResponse(
        total_invested=float(summary.total_invested),
        total_current_value=float(summary.total_current_value),
        total_depreciation=float(summary.total_depreciation),
        asset_count=len(body.assets),
        active_count=summary.active_count,
        items=items,
        failed_asset_ids=[a.id for a in failed],
    )
