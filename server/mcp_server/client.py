import httpx
from .config import config


class AmortizationClient:
    """折旧与分期计算 REST API 客户端"""

    def __init__(self):
        self._base_url: str | None = None

    @property
    def base_url(self) -> str:
        if self._base_url is None:
            self._base_url = config.server_url.rstrip("/")
        return self._base_url

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        async with httpx.AsyncClient(base_url=self.base_url, timeout=config.timeout) as client:
            response = await client.request(method, path, **kwargs)
            if response.status_code >= 400:
                detail = response.json().get("detail", response.text)
                raise Exception(f"API 错误 ({response.status_code}): {detail}")
            return response.json()

    # ─── 折旧 ──────────────────────────────

    async def get_asset_metrics(self, asset: dict, as_of: str | None = None) -> dict:
        return await self._request("POST", "/assets/metrics", json={
            "asset": asset,
            "as_of": as_of,
        })

    async def get_depreciation_schedule(self, asset: dict) -> list:
        return await self._request("POST", "/assets/depreciation-schedule", json=asset)

    async def get_portfolio(self, assets: list[dict], as_of: str | None = None) -> dict:
        return await self._request("POST", "/assets/portfolio", json={
            "assets": assets,
            "as_of": as_of,
        })

    # ─── 分期 ──────────────────────────────

    async def preview_schedule(self, total_value: float, installments_count: int, start_date: str) -> dict:
        return await self._request("POST", "/schedules/preview", json={
            "total_value": total_value,
            "installments_count": installments_count,
            "start_date": start_date,
        })

    async def reconcile_schedule(self, total_value: float, installments: list[dict]) -> dict:
        return await self._request("POST", "/schedules/reconcile", json={
            "total_value": total_value,
            "installments": installments,
        })

    async def settle_installment(self, settlement: dict) -> dict:
        return await self._request("POST", "/settlements", json=settlement)


ae_client = AmortizationClient()
