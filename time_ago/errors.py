"""
时间差格式化工具 - 异常定义
"""


class TimeAgoError(ValueError):
    """时间差格式化工具的基础异常"""


class InvalidTimeFormat(TimeAgoError):
    """输入无法解析为有效的时间点"""

    def __init__(self, value, reason: str = ""):
        self.value = value
        self.reason = reason
        message = f"无法解析的时间: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedLocale(TimeAgoError):
    """不支持的语言代码"""

    def __init__(self, lang, supported=()):
        self.lang = lang
        self.supported = tuple(supported)
        message = f"不支持的语言: {lang!r}"
        if self.supported:
            message = f"{message}，可选: {', '.join(self.supported)}"
        super().__init__(message)


__all__ = [
    'TimeAgoError',
    'InvalidTimeFormat',
    'UnsupportedLocale',
]
