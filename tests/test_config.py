"""Tests for burrow.config: AppConfig defaults and validation."""

import pytest

from burrow.config import AppConfig
from burrow.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 3000
        assert cfg.debug is False
        assert cfg.extensions == ("py",)
        assert cfg.match_timeout is None
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=8080, debug=True, match_timeout=0.25)

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8080
        assert cfg.debug is True
        assert cfg.match_timeout == 0.25

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_log_level_case_insensitive(self) -> None:
        assert AppConfig(log_level="DEBUG").log_level == "DEBUG"


class TestAppConfigValidation:
    def test_empty_extensions(self) -> None:
        with pytest.raises(ConfigurationError, match="extensions"):
            AppConfig(extensions=())

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError, match="match_timeout"):
            AppConfig(match_timeout=timeout)

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_out_of_range(self, port: int) -> None:
        with pytest.raises(ConfigurationError, match="port"):
            AppConfig(port=port)

    def test_port_zero_allowed(self) -> None:
        assert AppConfig(port=0).port == 0

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log_level"):
            AppConfig(log_level="verbose")
