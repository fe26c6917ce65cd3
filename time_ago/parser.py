"""
时间差格式化工具 - 时间点解析
把时间戳、时间字符串或 datetime 统一转换为带时区的 datetime / 秒级时间戳
"""

import logging
from datetime import datetime, tzinfo

import tzlocal
from dateutil import parser as date_parser

from .errors import InvalidTimeFormat
from .types import TimePoint

logger = logging.getLogger(__name__)


def local_zone() -> tzinfo:
    """获取本机时区"""
    return tzlocal.get_localzone()


def to_datetime(value: TimePoint) -> datetime:
    """
    将时间点转换为带时区的 datetime

    Args:
        value: 秒级时间戳（int/float）、时间字符串或 datetime；
               不带时区的时间按本机时区处理

    Returns:
        datetime: 带时区的时间

    Raises:
        InvalidTimeFormat: 输入无法解析时抛出
    """
    # bool 是 int 的子类，单独排除
    if isinstance(value, bool) or value is None:
        raise InvalidTimeFormat(value, "不支持的类型")

    if isinstance(value, datetime):
        result = value
    elif isinstance(value, (int, float)):
        try:
            result = datetime.fromtimestamp(int(value), tz=local_zone())
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimeFormat(value, str(e)) from e
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidTimeFormat(value, "空字符串")
        try:
            result = date_parser.parse(text)
        except (date_parser.ParserError, OverflowError, ValueError) as e:
            raise InvalidTimeFormat(value, str(e)) from e
    else:
        raise InvalidTimeFormat(value, f"不支持的类型 {type(value).__name__}")

    if result.tzinfo is None:
        result = result.replace(tzinfo=local_zone())
    logger.debug(f"解析时间 {value!r} -> {result.isoformat()}")
    return result


def to_timestamp(value: TimePoint) -> int:
    """将时间点转换为秒级时间戳；整数直接返回"""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(to_datetime(value).timestamp())


__all__ = [
    'local_zone',
    'to_datetime',
    'to_timestamp',
]
