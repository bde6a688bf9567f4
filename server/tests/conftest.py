"""测试公共 Fixtures —— 独立 ASGI TestClient + 资产/合同快照"""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ──────────── FastAPI TestClient ────────────

@pytest_asyncio.fixture
async def client():
    from amortization.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ──────────── 资产快照 ────────────

def make_asset(**overrides):
    """用 SimpleNamespace 模拟调用方传入的资产快照"""
    defaults = dict(
        id="asset-1",
        name="测试笔记本电脑",
        initial_value=Decimal("12000.00"),
        residual_value=Decimal("0.00"),
        acquisition_date=date(2024, 1, 15),
        useful_life_months=12,
        depreciation_method="LINEAR",
        usage_total_estimated=None,
        usage_current=None,
        status="ACTIVE",
    )
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


@pytest.fixture
def linear_asset():
    """直线法：原值 8000，残值 800，36 个月"""
    return make_asset(
        initial_value=Decimal("8000.00"),
        residual_value=Decimal("800.00"),
        acquisition_date=date(2025, 1, 1),
        useful_life_months=36,
    )


@pytest.fixture
def asset_payload() -> dict:
    """API 请求用资产 JSON"""
    return {
        "id": "asset-1",
        "name": "测试打印机",
        "initial_value": 8000,
        "residual_value": 800,
        "acquisition_date": "2025-01-01",
        "useful_life_months": 36,
        "depreciation_method": "LINEAR",
    }


# ──────────── 分期流水快照 ────────────

def make_transaction(**overrides):
    defaults = dict(
        id="tx-1",
        amount=Decimal("100.00"),
        due_date=date(2025, 1, 10),
        status="PENDING",
    )
    defaults.update(overrides)
    return SimpleNamespace(**defaults)
