from pathlib import Path

import pytest

from src.app_shell.config import AppConfig


class TestAppConfigFromEnv:
    def test_defaults(self) -> None:
        config = AppConfig.from_env({})

        assert config.rules_path == Path("rules.yaml")
        assert config.log_level == "INFO"
        assert config.view == "app"
        assert config.port == 8550

    def test_overrides(self) -> None:
        config = AppConfig.from_env(
            {
                "MCC_RULES_PATH": "/etc/mcc/rules.yaml",
                "MCC_LOG_LEVEL": "debug",
                "MCC_VIEW": "WEB",
                "MCC_PORT": "9000",
            }
        )

        assert config.rules_path == Path("/etc/mcc/rules.yaml")
        assert config.log_level == "DEBUG"
        assert config.view == "web"
        assert config.port == 9000

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCC_LOG_LEVEL", "WARNING")

        assert AppConfig.from_env().log_level == "WARNING"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            AppConfig.from_env({"MCC_LOG_LEVEL": "LOUD"})

    def test_unknown_view(self) -> None:
        with pytest.raises(ValueError, match="MCC_VIEW"):
            AppConfig.from_env({"MCC_VIEW": "terminal"})

    def test_bad_port(self) -> None:
        with pytest.raises(ValueError, match="MCC_PORT"):
            AppConfig.from_env({"MCC_PORT": "eighty"})
