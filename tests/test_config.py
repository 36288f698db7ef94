import logging
import os

import pytest

from feedserver_client.config import ClientSettings
from feedserver_client.exceptions import ConfigurationError
from feedserver_client.log import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FEEDSERVER_TIMEOUT_SEC", "FEEDSERVER_USER_AGENT", "FEEDSERVER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestClientSettings:
    def test_defaults(self, tmp_path):
        settings = ClientSettings.from_env(str(tmp_path / "missing.env"))
        assert settings == ClientSettings()

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FEEDSERVER_TIMEOUT_SEC", "2.5")
        monkeypatch.setenv("FEEDSERVER_USER_AGENT", "widgets/1.0")
        monkeypatch.setenv("FEEDSERVER_LOG_LEVEL", "debug")
        settings = ClientSettings.from_env(str(tmp_path / "missing.env"))
        assert settings == ClientSettings(timeout_sec=2.5, user_agent="widgets/1.0", log_level="DEBUG")

    def test_reads_dotenv_file(self, tmp_path):
        env_file = tmp_path / "client.env"
        env_file.write_text("FEEDSERVER_USER_AGENT=from-file\n")
        try:
            settings = ClientSettings.from_env(str(env_file))
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("FEEDSERVER_USER_AGENT", None)
        assert settings.user_agent == "from-file"

    def test_reads_dotenv_from_working_directory(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("FEEDSERVER_USER_AGENT=from-cwd\n")
        monkeypatch.chdir(tmp_path)
        try:
            settings = ClientSettings.from_env()
        finally:
            os.environ.pop("FEEDSERVER_USER_AGENT", None)
        assert settings.user_agent == "from-cwd"

    def test_invalid_timeout(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FEEDSERVER_TIMEOUT_SEC", "soon")
        with pytest.raises(ConfigurationError):
            ClientSettings.from_env(str(tmp_path / "missing.env"))

    def test_non_positive_timeout(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FEEDSERVER_TIMEOUT_SEC", "0")
        with pytest.raises(ConfigurationError):
            ClientSettings.from_env(str(tmp_path / "missing.env"))


class TestSetupLogging:
    def test_returns_package_logger(self):
        assert setup_logging("WARNING").name == "feedserver_client"

    def test_sets_level_when_handlers_exist(self):
        root = logging.getLogger()
        previous = root.level
        try:
            handler = logging.NullHandler()
            root.addHandler(handler)
            setup_logging("ERROR")
            assert root.level == logging.ERROR
        finally:
            root.removeHandler(handler)
            root.setLevel(previous)
