"""
时间差格式化工具包
提供"N 天前"格式的时间差格式化与时间比较功能

主要功能：
- 按日历分解格式化时间差（年/月/周/天/小时/分钟/秒）
- 按固定除数格式化时间差（天/小时/分钟/秒）
- 中文 / 英文两种输出
- 类似 strcmp 的时间比较
- 可注入的时钟，便于测试
"""

# 导入数据类型
from .types import TimePoint, TimeUnit, TimeUnitType, Language, LanguageTable

# 导入异常
from .errors import TimeAgoError, InvalidTimeFormat, UnsupportedLocale

# 导入时钟
from .clock import Clock, SystemClock, FixedClock

# 导入核心格式化器
from .formatter import TimeFormatter

# 导入配置
from .config import TimeAgoConfig, load_config, configure_logging

# 导入便捷函数
from .utils import format_calendar_ago, format_fixed_ago, time_compare

# 版本信息
__version__ = "1.0.0"

# 包的主要导出
__all__ = [
    # 数据类型
    'TimePoint',
    'TimeUnit',
    'TimeUnitType',
    'Language',
    'LanguageTable',

    # 异常
    'TimeAgoError',
    'InvalidTimeFormat',
    'UnsupportedLocale',

    # 时钟
    'Clock',
    'SystemClock',
    'FixedClock',

    # 核心类
    'TimeFormatter',

    # 配置
    'TimeAgoConfig',
    'load_config',
    'configure_logging',

    # 便捷函数
    'format_calendar_ago',
    'format_fixed_ago',
    'time_compare',

    # 版本信息
    '__version__',
]

# 包级别的便捷访问
def get_version():
    """获取包版本信息"""
    return __version__

def get_supported_languages():
    """获取支持的语言代码"""
    return [language.value.code for language in Language]
