"""
时间差格式化工具 - 数据类型定义
包含时间单位、语言后缀表的数据类和枚举定义
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

# 可接受的时间点输入：时间戳、时间字符串或 datetime
TimePoint = Union[int, float, str, datetime]

@dataclass(frozen=True)
class TimeUnit:
    """时间单位配置类"""
    key: str
    zh_name: str
    seconds: int
    priority: int

class TimeUnitType(Enum):
    """时间单位类型枚举（日历分解使用全部单位，固定除数分解只使用天及以下）"""
    YEAR = TimeUnit("Y", "年", 365 * 24 * 60 * 60, 7)
    MONTH = TimeUnit("MO", "月", 30 * 24 * 60 * 60, 6)
    WEEK = TimeUnit("W", "周", 7 * 24 * 60 * 60, 5)
    DAY = TimeUnit("D", "天", 24 * 60 * 60, 4)
    HOUR = TimeUnit("H", "小时", 60 * 60, 3)
    MINUTE = TimeUnit("M", "分钟", 60, 2)
    SECOND = TimeUnit("S", "秒", 1, 1)

# 两种分解策略使用的单位顺序（从大到小）
CALENDAR_UNITS = tuple(TimeUnitType)
FIXED_UNITS = (TimeUnitType.DAY, TimeUnitType.HOUR, TimeUnitType.MINUTE, TimeUnitType.SECOND)

@dataclass(frozen=True)
class LanguageTable:
    """语言后缀表：时间单位键名 -> 显示后缀"""
    code: str
    suffixes: Mapping[str, str]
    zero: str

    def __post_init__(self):
        # 冻结映射，防止调用方修改
        object.__setattr__(self, "suffixes", MappingProxyType(dict(self.suffixes)))

    def render(self, magnitude: int, unit: TimeUnitType) -> str:
        return f"{magnitude}{self.suffixes[unit.value.key]}"

class Language(Enum):
    """支持的语言"""
    CN = LanguageTable(
        "cn",
        {"Y": "年前", "MO": "月前", "W": "周前", "D": "天前",
         "H": "小时前", "M": "分钟前", "S": "秒前"},
        zero="刚刚",
    )
    EN = LanguageTable(
        "en",
        {"Y": " years ago", "MO": " months ago", "W": " weeks ago", "D": " days ago",
         "H": " hours ago", "M": " minutes ago", "S": " seconds ago"},
        zero="just now",
    )

# 导出的类型
__all__ = [
    'TimePoint',
    'TimeUnit',
    'TimeUnitType',
    'LanguageTable',
    'Language',
    'CALENDAR_UNITS',
    'FIXED_UNITS',
]
