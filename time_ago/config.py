"""
时间差格式化工具 - 配置
从环境变量（以及可选的 .env 文件）读取默认配置；不会修改 os.environ
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

from dotenv import dotenv_values, find_dotenv

from .types import Language

logger = logging.getLogger(__name__)

DEFAULT_LANG = "cn"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LANGS = tuple(language.value.code for language in Language)


@dataclass(frozen=True)
class TimeAgoConfig:
    """配置项"""
    lang: str = DEFAULT_LANG
    log_level: str = DEFAULT_LOG_LEVEL


@lru_cache(maxsize=None)
def read_env_file(env_path: Optional[str] = None) -> Dict[str, str]:
    """
    读取 .env 文件内容（每个路径只读取一次）

    Args:
        env_path: .env 文件路径，为空时从当前工作目录向上查找

    Returns:
        Dict[str, str]: 文件中的键值，没有文件时为空
    """
    path = env_path or find_dotenv(usecwd=True)
    if not path:
        return {}
    logger.debug(f"读取配置文件: {path}")
    return {key: value for key, value in dotenv_values(path).items() if value is not None}


def _get_setting(name: str, env_path: Optional[str]) -> Optional[str]:
    # 环境变量优先于 .env 文件
    value = os.getenv(name)
    if value is None:
        value = read_env_file(env_path).get(name)
    return value


def _check_log_level(level: str, source: str) -> str:
    level = level.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"{source}={level} 无效，使用 {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def load_config(env_path: Optional[str] = None) -> TimeAgoConfig:
    """
    读取配置

    Args:
        env_path: .env 文件路径，为空时从当前工作目录向上查找

    Returns:
        TimeAgoConfig: 配置对象
    """
    lang = (_get_setting("TIME_AGO_LANG", env_path) or DEFAULT_LANG).strip().lower()
    if lang not in SUPPORTED_LANGS:
        logger.warning(f"TIME_AGO_LANG={lang} 不受支持，使用默认语言 {DEFAULT_LANG}")
        lang = DEFAULT_LANG

    log_level = _check_log_level(
        _get_setting("TIME_AGO_LOG_LEVEL", env_path) or DEFAULT_LOG_LEVEL,
        "TIME_AGO_LOG_LEVEL"
    )

    return TimeAgoConfig(lang=lang, log_level=log_level)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """设置包日志级别（默认读取 TIME_AGO_LOG_LEVEL），没有处理器时添加控制台输出"""
    if level is None:
        level = load_config().log_level
    else:
        level = _check_log_level(level, "level")
    package_logger = logging.getLogger("time_ago")
    package_logger.setLevel(getattr(logging, level))

    if not package_logger.handlers:
        console_handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)
    return package_logger


__all__ = [
    'TimeAgoConfig',
    'load_config',
    'read_env_file',
    'configure_logging',
    'SUPPORTED_LANGS',
]
