"""
时间差格式化工具 - 核心格式化器
包含"N 天前"格式化（日历分解 / 固定除数分解）与时间比较的主要逻辑
"""

import logging
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from .clock import Clock, SystemClock
from .config import load_config
from .errors import UnsupportedLocale
from .parser import to_datetime, to_timestamp
from .types import CALENDAR_UNITS, FIXED_UNITS, Language, LanguageTable, TimePoint, TimeUnitType

logger = logging.getLogger(__name__)

class TimeFormatter:
    """时间差格式化器"""

    def __init__(self, clock: Optional[Clock] = None, default_lang: Optional[str] = None):
        """
        初始化格式化器

        Args:
            clock: 当前时间来源，默认为系统时钟
            default_lang: format_fixed_ago 的默认语言，为空时读取配置（TIME_AGO_LANG）

        Raises:
            UnsupportedLocale: 默认语言不受支持时抛出
        """
        self.clock = clock or SystemClock()
        # 语言表映射 - 便于查找
        self._languages = {language.value.code: language.value for language in Language}
        if default_lang is None:
            default_lang = load_config().lang
        self.default_lang = self._get_language(default_lang).code

    def __repr__(self):
        return f"TimeFormatter(clock={self.clock!r}, default_lang={self.default_lang!r})"

    def _get_language(self, lang) -> LanguageTable:
        code = lang.strip().lower() if isinstance(lang, str) else None
        if code not in self._languages:
            raise UnsupportedLocale(lang, self._languages)
        return self._languages[code]

    def get_supported_languages(self) -> List[str]:
        """获取支持的语言代码"""
        return list(self._languages)

    def break_down_calendar(
        self,
        target: TimePoint,
        reference: Optional[TimePoint] = None
    ) -> Dict[str, int]:
        """
        按日历计算 reference - target 的时间差分解

        Args:
            target: 目标时间
            reference: 参考时间，默认为当前时间

        Returns:
            Dict[str, int]: 单位键名 -> 数值（从大到小），目标晚于参考时间时数值为负

        Raises:
            InvalidTimeFormat: 时间无法解析时抛出

        Examples:
            >>> formatter = TimeFormatter()
            >>> formatter.break_down_calendar("2024-01-01", "2024-03-16 06:30:00")
            {'Y': 0, 'MO': 2, 'W': 2, 'D': 1, 'H': 6, 'M': 30, 'S': 0}
        """
        reference_dt = self.clock.now() if reference is None else to_datetime(reference)
        target_dt = to_datetime(target).astimezone(reference_dt.tzinfo)
        diff = relativedelta(reference_dt, target_dt)

        # relativedelta 的 days 包含整周
        weeks = diff.weeks
        return {
            TimeUnitType.YEAR.value.key: diff.years,
            TimeUnitType.MONTH.value.key: diff.months,
            TimeUnitType.WEEK.value.key: weeks,
            TimeUnitType.DAY.value.key: diff.days - weeks * 7,
            TimeUnitType.HOUR.value.key: diff.hours,
            TimeUnitType.MINUTE.value.key: diff.minutes,
            TimeUnitType.SECOND.value.key: diff.seconds,
        }

    def break_down_fixed(self, seconds: int) -> Dict[str, int]:
        """
        按固定除数（86400/3600/60/1）分解秒数

        Args:
            seconds: 秒数（非负整数）

        Returns:
            Dict[str, int]: 单位键名 -> 数值（天/小时/分钟/秒）

        Raises:
            ValueError: 秒数为负或不是整数时抛出

        Examples:
            >>> TimeFormatter().break_down_fixed(283822)
            {'D': 3, 'H': 6, 'M': 50, 'S': 22}
        """
        if not isinstance(seconds, int) or isinstance(seconds, bool) or seconds < 0:
            raise ValueError("秒数必须为非负整数")

        result = {}
        remaining = seconds
        for unit in FIXED_UNITS:
            result[unit.value.key], remaining = divmod(remaining, unit.value.seconds)
        return result

    def format_calendar_ago(
        self,
        target: TimePoint,
        reference: Optional[TimePoint] = None,
        lang: str = "cn"
    ) -> str:
        """
        按日历分解格式化时间差，取最大的非零单位

        Args:
            target: 目标时间
            reference: 参考时间，默认为当前时间
            lang: 语言（'cn' / 'en'），默认中文

        Returns:
            str: 例如 "3月前"；两个时间相同时返回 "刚刚" / "just now"

        Raises:
            InvalidTimeFormat: 时间无法解析时抛出
            UnsupportedLocale: 语言不受支持时抛出

        Examples:
            >>> TimeFormatter().format_calendar_ago("2024-01-01", "2024-03-16")
            "2月前"
        """
        table = self._get_language(lang)
        breakdown = self.break_down_calendar(target, reference)

        for unit in CALENDAR_UNITS:
            value = breakdown[unit.value.key]
            if value:
                logger.debug(f"日历分解 {breakdown}，使用单位 {unit.value.key}")
                return table.render(value, unit)

        logger.debug(f"时间差为零: {target!r}")
        return table.zero

    def format_fixed_ago(self, timestamp: TimePoint, lang: Optional[str] = None) -> str:
        """
        按固定除数格式化距当前时间的时间差

        依次尝试天/小时/分钟，第一个商大于 0 的单位决定输出；
        否则按秒输出（包括 0 和负数，即未来的时间）

        Args:
            timestamp: 秒级时间戳或时间字符串
            lang: 语言（'cn' / 'en'），默认使用格式化器的默认语言

        Returns:
            str: 例如 "2天前"、"45 seconds ago"、"-5秒前"

        Raises:
            InvalidTimeFormat: 时间无法解析时抛出
            UnsupportedLocale: 语言不受支持时抛出
        """
        table = self._get_language(self.default_lang if lang is None else lang)
        interval = self.clock.now_timestamp() - to_timestamp(timestamp)

        if interval > 0:
            breakdown = self.break_down_fixed(interval)
            for unit in FIXED_UNITS[:-1]:
                value = breakdown[unit.value.key]
                if value > 0:
                    return table.render(value, unit)

        return table.render(interval, TimeUnitType.SECOND)

    def compare(self, a: TimePoint, b: TimePoint) -> int:
        """
        类似 strcmp 比较两个时间

        Returns:
            int: a 早于 b 为负数，相同为 0，晚于为正数（差值秒数）

        Raises:
            InvalidTimeFormat: 时间无法解析时抛出

        Examples:
            >>> TimeFormatter().compare("2024-01-01 00:00:01", "2024-01-01 00:00:00")
            1
        """
        return to_timestamp(a) - to_timestamp(b)

# 导出的类
__all__ = [
    'TimeFormatter'
]
