"""
时间差格式化工具 - 便捷函数
提供无需实例化即可使用的便捷函数
"""

from typing import Optional

from .clock import Clock
from .formatter import TimeFormatter
from .types import TimePoint

def format_calendar_ago(
    target: TimePoint,
    reference: Optional[TimePoint] = None,
    lang: str = "cn",
    clock: Optional[Clock] = None
) -> str:
    """
    便捷函数：按日历分解格式化时间差

    Examples:
        >>> format_calendar_ago("2023-01-01", "2024-06-01")
        "1年前"
    """
    formatter = TimeFormatter(clock=clock)
    return formatter.format_calendar_ago(target, reference, lang)

def format_fixed_ago(
    timestamp: TimePoint,
    lang: Optional[str] = None,
    clock: Optional[Clock] = None
) -> str:
    """
    便捷函数：按固定除数格式化距当前时间的时间差

    Examples:
        >>> format_fixed_ago("2024-01-01 00:00:00", clock=FixedClock("2024-01-03 00:00:00"))
        "2天前"
        >>> format_fixed_ago("2024-01-01 00:00:00", "en", clock=FixedClock("2024-01-03 00:00:00"))
        "2 days ago"
    """
    formatter = TimeFormatter(clock=clock)
    return formatter.format_fixed_ago(timestamp, lang)

def time_compare(a: TimePoint, b: TimePoint) -> int:
    """
    便捷函数：类似 strcmp 比较两个时间，返回相差的秒数
    """
    return TimeFormatter(default_lang="cn").compare(a, b)

# 导出的函数
__all__ = [
    'format_calendar_ago',
    'format_fixed_ago',
    'time_compare'
]
