"""金额工具 — Decimal 转换、分位舍入、容差比较"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP

CENT = Decimal("0.01")

# 两位小数货币的比较容差；其他精度的币种在此调整
MONEY_EPSILON = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """任意数值 → Decimal（经 str 转换，避免二进制浮点误差）"""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value: Decimal) -> Decimal:
    """四舍五入到分"""
    return value.quantize(CENT, ROUND_HALF_UP)


def floor_to_cents(value: Decimal) -> Decimal:
    """向下取整到分"""
    return value.quantize(CENT, ROUND_FLOOR)


def is_zero(value: Decimal, epsilon: Decimal = MONEY_EPSILON) -> bool:
    return abs(value) < epsilon
