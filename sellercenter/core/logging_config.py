"""
Configuración del sistema de logging del SDK.

Este módulo configura el logging con:
- Handler de consola con colores (solo TTY)
- Handler de archivo con rotación (opcional)
- Formato JSON estructurado para producción
- Helper para registrar llamadas a la API (DEBUG)
"""

import json
import logging
import logging.config
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from sellercenter.core.config import Settings, get_settings

# Atributos estándar de LogRecord que no se copian como "extra"
RESERVED_RECORD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "taskName",
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter que agrega colores al nivel de log en consola.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Verde
        "WARNING": "\033[33m",  # Amarillo
        "ERROR": "\033[31m",  # Rojo
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        """
        Formatea el record con colores si la salida es una terminal.

        Args:
            record: LogRecord a formatear

        Returns:
            str: Mensaje formateado
        """
        formatted = super().format(record)

        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
            formatted = formatted.replace(record.levelname, f"{color}{record.levelname}{reset}", 1)

        return formatted


class StructuredFormatter(logging.Formatter):
    """
    Formatter para logging estructurado en JSON.

    Incluye los campos extra del record (request_id, action, count...).
    """

    def __init__(self, *args, app_name: str = "SellerCenterSdk", app_version: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.app_name = app_name
        self.app_version = app_version

    def format(self, record):
        """
        Formatea el record como JSON.

        Args:
            record: LogRecord a formatear

        Returns:
            str: Mensaje en formato JSON
        """
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "app_name": self.app_name,
            "app_version": self.app_version,
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {
            key: value for key, value in record.__dict__.items() if key not in RESERVED_RECORD_ATTRS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def get_logging_configuration(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Genera configuración completa de logging.

    Returns:
        Dict: Configuración para logging.config.dictConfig
    """
    settings = settings or get_settings()

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": ("%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "colored": {
                "()": ColoredFormatter,
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": StructuredFormatter,
                "app_name": settings.APP_NAME,
                "app_version": settings.APP_VERSION,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "colored" if settings.DEBUG else "standard",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "sellercenter": {
                "level": settings.LOG_LEVEL,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    if settings.LOG_FILE_PATH:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "json" if settings.is_production else "detailed",
            "filename": settings.LOG_FILE_PATH,
            "maxBytes": settings.LOG_MAX_SIZE_MB * 1024 * 1024,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        config["loggers"]["sellercenter"]["handlers"].append("file")

    return config


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configura el logging del SDK.

    Las aplicaciones que ya configuran su propio logging no necesitan
    llamarla; el SDK solo usa loggers bajo ``sellercenter``.
    """
    settings = settings or get_settings()

    if settings.LOG_FILE_PATH:
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_configuration(settings))
    configure_external_loggers()

    logger = logging.getLogger(__name__)
    logger.info(f"Sistema de logging configurado - Nivel: {settings.LOG_LEVEL}")


def configure_external_loggers() -> None:
    """
    Reduce la verbosidad de librerías externas.
    """
    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def log_api_call(method: str, action: str, status_code: int, duration: float, **kwargs) -> None:
    """
    Logger específico para llamadas a la API de Seller Center.

    Args:
        method: Método HTTP
        action: Acción remota
        status_code: Código de respuesta
        duration: Duración en segundos
        **kwargs: Datos adicionales (request_id...)

    Siempre en DEBUG: los fallos llegan al llamador como excepciones.
    """
    logger = logging.getLogger("sellercenter.api.call")

    extra_data = {
        "method": method,
        "action": action,
        "status_code": status_code,
        "duration_ms": round(duration * 1000, 2),
        **kwargs,
    }

    logger.debug(
        f"API call: {method} {action} -> {status_code} ({duration * 1000:.1f}ms)",
        extra=extra_data,
    )
