"""
时间差格式化工具 - 时钟
提供可注入的"当前时间"来源，测试时可替换为固定时间
"""

from abc import ABC, abstractmethod
from datetime import datetime

from .parser import local_zone, to_datetime
from .types import TimePoint


class Clock(ABC):
    """时钟接口"""

    @abstractmethod
    def now(self) -> datetime:
        """返回当前时间（带时区）"""

    def now_timestamp(self) -> int:
        """返回当前秒级时间戳"""
        return int(self.now().timestamp())


class SystemClock(Clock):
    """读取本机系统时钟"""

    def now(self) -> datetime:
        return datetime.now(tz=local_zone())

    def __repr__(self):
        return "SystemClock()"


class FixedClock(Clock):
    """始终返回同一时间的时钟"""

    def __init__(self, point: TimePoint):
        self._now = to_datetime(point)

    def now(self) -> datetime:
        return self._now

    def __repr__(self):
        return f"FixedClock({self._now.isoformat()!r})"


__all__ = [
    'Clock',
    'SystemClock',
    'FixedClock',
]
