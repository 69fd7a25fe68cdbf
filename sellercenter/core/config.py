"""
Configuración centralizada del SDK.

Este módulo maneja las variables de entorno del SDK de Seller Center
usando Pydantic Settings para validación automática, y construye la
configuración inmutable que comparten todas las llamadas.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from sellercenter.domain.value_objects import ParameterSet
from sellercenter.utils.error_handler import AppException, ErrorCode
from sellercenter.version import VERSION


class Settings(BaseSettings):
    """
    Configuración del SDK usando Pydantic Settings.

    Todas las configuraciones se cargan desde variables de entorno
    con valores por defecto apropiados para desarrollo.
    """

    # === CONFIGURACIÓN BÁSICA ===
    APP_NAME: str = "SellerCenterSdk"
    APP_VERSION: str = VERSION
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # === CONFIGURACIÓN DE SELLER CENTER ===
    SELLERCENTER_ENDPOINT: str = Field(default="https://sellercenter-api.example.com")
    SELLERCENTER_USER_ID: str = Field(default="")
    SELLERCENTER_API_KEY: str = Field(default="")
    SELLERCENTER_API_VERSION: str = Field(default="1.0")
    SELLERCENTER_FORMAT: str = Field(default="XML")
    SELLERCENTER_TIMEOUT_SECONDS: float = Field(default=30.0)

    # === CONFIGURACIÓN DE LOGGING ===
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: Optional[str] = Field(default=None)
    LOG_MAX_SIZE_MB: int = Field(default=10)
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_FORMAT: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("SELLERCENTER_ENDPOINT")
    @classmethod
    def validate_endpoint(cls, v):
        """Valida que el endpoint tenga esquema y sin barra final."""
        if not v.startswith("https://") and not v.startswith("http://"):
            v = f"https://{v}"
        return v.rstrip("/")

    @field_validator("SELLERCENTER_FORMAT")
    @classmethod
    def validate_format(cls, v):
        """El SDK solo interpreta respuestas XML."""
        if v.upper() != "XML":
            raise ValueError("SELLERCENTER_FORMAT debe ser XML")
        return v.upper()

    @field_validator("SELLERCENTER_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v):
        """Valida que el timeout sea positivo."""
        if v <= 0:
            raise ValueError("SELLERCENTER_TIMEOUT_SECONDS debe ser mayor que 0")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Valida que el nivel de log sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {valid_levels}")
        return v.upper()

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Valida que el entorno sea válido."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"ENVIRONMENT debe ser uno de: {valid_envs}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Verifica si está en entorno de producción."""
        return self.ENVIRONMENT == "production"


@dataclass(frozen=True)
class SellerCenterConfig:
    """
    Immutable runtime configuration shared by every call.

    Attributes:
        endpoint: Base URL of the Seller Center API
        user_id: Seller account user (sent as ``UserID``)
        api_key: Secret used to sign requests
        version: API version (sent as ``Version``)
        response_format: Requested response format (``XML``)
        timeout_seconds: HTTP timeout applied by the transport
        base_parameters: Parameters merged into every request
    """

    endpoint: str
    user_id: str
    api_key: str = field(repr=False)
    version: str = "1.0"
    response_format: str = "XML"
    timeout_seconds: float = 30.0
    base_parameters: ParameterSet = field(default_factory=ParameterSet)

    def __post_init__(self) -> None:
        if not self.user_id or not self.api_key:
            raise AppException(
                "Seller Center credentials are required (user id and api key)",
                error_code=ErrorCode.CONFIGURATION_ERROR,
            )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SellerCenterConfig":
        """Build the runtime configuration from environment settings."""
        settings = settings or get_settings()
        return cls(
            endpoint=settings.SELLERCENTER_ENDPOINT,
            user_id=settings.SELLERCENTER_USER_ID,
            api_key=settings.SELLERCENTER_API_KEY,
            version=settings.SELLERCENTER_API_VERSION,
            response_format=settings.SELLERCENTER_FORMAT,
            timeout_seconds=settings.SELLERCENTER_TIMEOUT_SECONDS,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Obtiene instancia singleton de configuración.

    Usa LRU cache para evitar recrear la configuración
    múltiples veces durante la ejecución.

    Returns:
        Settings: Instancia de configuración
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Recarga la configuración (útil para testing).

    Returns:
        Settings: Nueva instancia de configuración
    """
    get_settings.cache_clear()
    return get_settings()
