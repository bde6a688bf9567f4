import json
from mcp.server.fastmcp import FastMCP
from ..client import ae_client


def register(mcp: FastMCP):

    @mcp.tool()
    async def get_asset_metrics(asset: str, as_of: str = "") -> str:
        """计算固定资产的折旧指标（累计折旧、账面净值、折旧进度、剩余月数）。

        asset 参数是一个 JSON 对象字符串，包含：
        - initial_value: 原值
        - residual_value: 残值
        - acquisition_date: 取得日期 (YYYY-MM-DD)
        - useful_life_months: 使用寿命(月)
        - depreciation_method: LINEAR / SUM_OF_YEARS / DECLINING_BALANCE / UNITS_OF_PRODUCTION
        - usage_total_estimated / usage_current: (工作量法) 预计总工作量 / 当前工作量
        - as_of: 评估日期 (YYYY-MM-DD)，默认今天
        """
        try:
            asset_data = json.loads(asset)
        except json.JSONDecodeError as e:
            return f"错误：asset 参数 JSON 解析失败: {e}"
        result = await ae_client.get_asset_metrics(asset_data, as_of or None)
        return json.dumps(result, ensure_ascii=False, indent=2)

    @mcp.tool()
    async def get_depreciation_schedule(asset: str) -> str:
        """按月展开资产整个使用寿命内的折旧进度表。

        asset 参数格式同 get_asset_metrics。
        """
        try:
            asset_data = json.loads(asset)
        except json.JSONDecodeError as e:
            return f"错误：asset 参数 JSON 解析失败: {e}"
        result = await ae_client.get_depreciation_schedule(asset_data)
        return json.dumps(result, ensure_ascii=False, indent=2)

    @mcp.tool()
    async def get_portfolio(assets: str, as_of: str = "") -> str:
        """资产组合汇总：在用资产的总投入、当前净值、累计折旧及逐项指标。

        assets 参数是 JSON 数组字符串，元素格式同 get_asset_metrics 的 asset。
        """
        try:
            asset_list = json.loads(assets)
        except json.JSONDecodeError as e:
            return f"错误：assets 参数 JSON 解析失败: {e}"
        result = await ae_client.get_portfolio(asset_list, as_of or None)
        return json.dumps(result, ensure_ascii=False, indent=2)
