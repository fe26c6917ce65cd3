#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置读取的单元测试
"""

import logging
import os
from unittest.mock import patch

from time_ago import FixedClock, TimeFormatter, configure_logging, format_fixed_ago, load_config
from time_ago.config import SUPPORTED_LANGS, read_env_file
from time_ago.types import Language


class TestLoadConfig:
    """
    load_config 的测试用例
    """

    def setup_method(self):
        self.missing_env = os.path.join(os.path.dirname(__file__), "missing.env")

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(self.missing_env)
        assert config.lang == "cn"
        assert config.log_level == "WARNING"

    def test_from_environment(self):
        with patch.dict(os.environ, {"TIME_AGO_LANG": " EN ", "TIME_AGO_LOG_LEVEL": "debug"}, clear=True):
            config = load_config(self.missing_env)
        assert config.lang == "en"
        assert config.log_level == "DEBUG"

    def test_unknown_lang_falls_back(self, caplog):
        with patch.dict(os.environ, {"TIME_AGO_LANG": "fr"}, clear=True):
            with caplog.at_level(logging.WARNING, logger="time_ago.config"):
                config = load_config(self.missing_env)
        assert config.lang == "cn"
        assert "TIME_AGO_LANG=fr" in caplog.text

    def test_unknown_log_level_falls_back(self):
        with patch.dict(os.environ, {"TIME_AGO_LOG_LEVEL": "LOUD"}, clear=True):
            config = load_config(self.missing_env)
        assert config.log_level == "WARNING"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "time_ago.env"
        env_file.write_text("TIME_AGO_LANG=en\n", encoding="utf-8")
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(str(env_file))
        assert config.lang == "en"

    def test_formatter_uses_configured_lang(self):
        with patch.dict(os.environ, {"TIME_AGO_LANG": "en"}, clear=True):
            formatter = TimeFormatter(clock=FixedClock(120))
        assert formatter.default_lang == "en"
        assert formatter.format_fixed_ago(0) == "2 minutes ago"


class TestConfigureLogging:
    """
    configure_logging 的测试用例
    """

    def test_single_handler(self):
        package_logger = logging.getLogger("time_ago")
        old_handlers = list(package_logger.handlers)
        package_logger.handlers = []
        try:
            configure_logging("DEBUG")
            configure_logging("INFO")
            assert len(package_logger.handlers) == 1
            assert package_logger.level == logging.INFO
        finally:
            package_logger.handlers = old_handlers
            package_logger.setLevel(logging.NOTSET)

    def test_level_from_environment(self):
        package_logger = logging.getLogger("time_ago")
        old_handlers = list(package_logger.handlers)
        try:
            with patch.dict(os.environ, {"TIME_AGO_LOG_LEVEL": "ERROR"}, clear=True):
                configure_logging()
            assert package_logger.level == logging.ERROR
        finally:
            package_logger.handlers = old_handlers
            package_logger.setLevel(logging.NOTSET)

    def test_unknown_level_falls_back(self, caplog):
        package_logger = logging.getLogger("time_ago")
        old_handlers = list(package_logger.handlers)
        try:
            with caplog.at_level(logging.WARNING, logger="time_ago.config"):
                configure_logging("LOUD")
            assert package_logger.level == logging.WARNING
            assert "level=LOUD" in caplog.text
        finally:
            package_logger.handlers = old_handlers
            package_logger.setLevel(logging.NOTSET)


class TestSupportedLangs:
    """
    支持语言列表的测试用例
    """

    def test_matches_language_enum(self):
        assert SUPPORTED_LANGS == tuple(language.value.code for language in Language)
        assert SUPPORTED_LANGS == ("cn", "en")


class TestEnvFileDiscovery:
    """
    当前工作目录下 .env 文件的测试用例
    """

    def setup_method(self):
        read_env_file.cache_clear()

    def teardown_method(self):
        read_env_file.cache_clear()

    def test_env_file_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("TIME_AGO_LANG=en\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            formatter = TimeFormatter(clock=FixedClock(120))
        assert formatter.default_lang == "en"

    def test_environment_overrides_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("TIME_AGO_LANG=en\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {"TIME_AGO_LANG": "cn"}, clear=True):
            assert load_config().lang == "cn"

    def test_environment_unchanged(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("TIME_AGO_LANG=en\nSOME_SECRET=leaked\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            TimeFormatter(clock=FixedClock(120))
            assert format_fixed_ago(0, "cn", clock=FixedClock(120)) == "2分钟前"
            assert dict(os.environ) == {}

    def test_env_file_read_once(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("TIME_AGO_LANG=en\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            assert load_config().lang == "en"
            env_file.write_text("TIME_AGO_LANG=cn\n", encoding="utf-8")
            assert load_config().lang == "en"
