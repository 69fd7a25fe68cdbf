"""Tests unitarios para la configuración de logging."""

import json
import logging
from unittest.mock import patch

import pytest

from sellercenter.core.config import Settings
from sellercenter.core.logging_config import (
    StructuredFormatter,
    get_logging_configuration,
    log_api_call,
    setup_logging,
)


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestGetLoggingConfiguration:
    """Tests para la configuración de dictConfig."""

    def test_console_only_by_default(self):
        """Sin archivo solo debe configurar la consola."""
        config = get_logging_configuration(make_settings(LOG_LEVEL="DEBUG", LOG_FILE_PATH=None))

        assert list(config["handlers"]) == ["console"]
        assert config["loggers"]["sellercenter"]["level"] == "DEBUG"

    def test_file_handler_uses_json_in_production(self, tmp_path):
        """En producción el archivo debe usar formato JSON."""
        config = get_logging_configuration(
            make_settings(ENVIRONMENT="production", LOG_FILE_PATH=str(tmp_path / "sdk.log"))
        )

        assert config["handlers"]["file"]["formatter"] == "json"
        assert "file" in config["loggers"]["sellercenter"]["handlers"]


class TestStructuredFormatter:
    """Tests para StructuredFormatter."""

    def test_includes_extra_fields(self):
        """Debe incluir los campos extra del record."""
        record = logging.LogRecord("sellercenter.test", logging.INFO, __file__, 1, "hola", None, None)
        record.request_id = "req-1"

        entry = json.loads(StructuredFormatter(app_version="0.1.0").format(record))

        assert entry["message"] == "hola"
        assert entry["app_name"] == "SellerCenterSdk"
        assert entry["extra"]["request_id"] == "req-1"


class TestLogApiCall:
    """Tests para log_api_call."""

    def test_success_is_debug(self, caplog):
        """Una llamada exitosa debe registrarse en DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="sellercenter.api.call"):
            log_api_call("GET", "GetOrders", 200, 0.25, request_id="req-1")

        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].request_id == "req-1"
        assert caplog.records[-1].duration_ms == 250.0

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    def test_failures_stay_at_debug(self, caplog, status_code):
        """Una respuesta no exitosa no debe registrarse por encima de DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="sellercenter.api.call"):
            log_api_call("GET", "GetOrders", status_code, 1.0)

        assert [record.levelno for record in caplog.records] == [logging.DEBUG]
        assert caplog.records[-1].status_code == status_code


class TestSetupLogging:
    """Tests para setup_logging."""

    def test_applies_configuration_and_quiets_http_loggers(self, tmp_path):
        """Debe crear el directorio del archivo, aplicar dictConfig y silenciar httpx."""
        log_file = tmp_path / "logs" / "sdk.log"
        settings = make_settings(LOG_FILE_PATH=str(log_file))

        with patch("logging.config.dictConfig") as dict_config:
            setup_logging(settings)

        dict_config.assert_called_once_with(get_logging_configuration(settings))
        assert log_file.parent.is_dir()
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
