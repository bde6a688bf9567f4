from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 项目信息
    APP_NAME: str = "Amortization Engine"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # 金额比较容差（两位小数货币）
    MONEY_EPSILON: Decimal = Decimal("0.01")

    # 单个合同允许的最大分期数
    MAX_INSTALLMENTS: int = 600

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
