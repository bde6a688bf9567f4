"""资产组合批量重估"""

import logging
from datetime import date

from amortization.services.depreciation_service import AssetError, compute_metrics

logger = logging.getLogger(__name__)


def run_portfolio_revaluation(assets, as_of: date | None = None):
    """
    逐个资产计算折旧指标
    单个资产数据异常只记录日志并跳过，不影响其余资产
    返回 (已计算 [(asset, DepreciationMetrics)], 失败的 asset 列表)
    """
    as_of = as_of or date.today()
    logger.info(f"[资产重估] 开始执行，评估日: {as_of}，资产数: {len(assets)}")

    evaluated = []
    failed = []
    for asset in assets:
        try:
            evaluated.append((asset, compute_metrics(asset, as_of)))
        except AssetError as e:
            logger.error(f"[资产重估] 资产 {asset.id or asset.name} 失败: {e.detail}")
            failed.append(asset)

    logger.info(f"[资产重估] 完成，共计算 {len(evaluated)} 项资产，失败 {len(failed)} 项")
    return evaluated, failed
