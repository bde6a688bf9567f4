"""日期工具 — 按日历字段计算月差、按月推移日期"""

from datetime import date

from dateutil.relativedelta import relativedelta


def months_between(start: date, end: date) -> int:
    """
    日历月差 = 年差 × 12 + 月差
    日期中的"日"不参与计算，2024-01-31 → 2024-02-01 记为 1 个月
    """
    return (end.year - start.year) * 12 + (end.month - start.month)


def add_months(start: date, months: int) -> date:
    """按月推移；目标月份没有该日时取月末（1 月 31 日 + 1 月 → 2 月末）"""
    return start + relativedelta(months=months)
