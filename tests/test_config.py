# tests/test_config.py

"""Tests for settings, credentials and logging setup"""

import json
import logging

import pytest

from btcrpc.core.config import Settings
from btcrpc.core.exceptions import ConfigurationError
from btcrpc.core.logging import JSONFormatter, SimpleFormatter, setup_logging
from btcrpc.routes import health
from btcrpc.services import client, transport


class TestSettings:
    """Test suite for Settings"""

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("BTCRPC_RPC_URL", "http://10.0.0.2:18443")
        monkeypatch.setenv("BTCRPC_DAEMON_VERSION", "22")

        config = Settings()

        assert config.RPC_URL == "http://10.0.0.2:18443"
        assert config.DAEMON_VERSION == 22

    def test_no_credentials(self):
        assert Settings(RPC_USER="", RPC_COOKIE_FILE="").rpc_auth() is None

    def test_user_password(self):
        config = Settings(RPC_USER="alice", RPC_PASSWORD="secret", RPC_COOKIE_FILE="")

        assert config.rpc_auth() == ("alice", "secret")

    def test_cookie_file_wins(self, tmp_path):
        cookie = tmp_path / ".cookie"
        cookie.write_text("__cookie__:4f1c2a\n")

        config = Settings(RPC_USER="alice", RPC_PASSWORD="secret", RPC_COOKIE_FILE=str(cookie))

        assert config.rpc_auth() == ("__cookie__", "4f1c2a")

    def test_missing_cookie_file(self, tmp_path):
        config = Settings(RPC_COOKIE_FILE=str(tmp_path / "missing"))

        with pytest.raises(ConfigurationError) as exc_info:
            config.rpc_auth()

        assert "Cannot read RPC cookie file" in exc_info.value.message

    def test_malformed_cookie_file(self, tmp_path):
        cookie = tmp_path / ".cookie"
        cookie.write_text("no-separator")

        with pytest.raises(ConfigurationError):
            Settings(RPC_COOKIE_FILE=str(cookie)).rpc_auth()


class TestLogging:
    """Test suite for the log formatters"""

    def make_record(self, **extra):
        record = logging.LogRecord("btcrpc.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(self.make_record(rpc={"method": "getblockcount"})))

        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["rpc"] == {"method": "getblockcount"}

    def test_simple_formatter(self):
        line = SimpleFormatter().format(self.make_record())

        assert "INFO" in line
        assert line.endswith("hello world")

    def test_setup_logging_installs_one_handler(self):
        setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FORMAT="text"))
        setup_logging(Settings(LOG_LEVEL="WARNING", LOG_FORMAT="json"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING

    def test_module_loggers_are_named_after_their_module(self):
        assert transport.logger.name == "btcrpc.services.transport"
        assert client.logger.name == "btcrpc.services.client"
        assert health.logger.name == "btcrpc.routes.health"
