"""
Sistema de manejo de errores del SDK.

Este módulo define las excepciones del SDK de Seller Center y
su representación consistente (código, severidad, detalles).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Códigos de error estandardizados del SDK.
    """

    # Errores generales
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Errores de argumentos
    EMPTY_ARGUMENT = "EMPTY_ARGUMENT"
    INVALID_DOMAIN = "INVALID_DOMAIN"

    # Errores de respuesta
    MAPPING_ERROR = "MAPPING_ERROR"

    # Errores de API
    SELLERCENTER_API_ERROR = "SELLERCENTER_API_ERROR"
    SELLERCENTER_CONNECTION_FAILED = "SELLERCENTER_CONNECTION_FAILED"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AppException(Exception):
    """
    Excepción base para todas las excepciones del SDK.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            status_code: Código HTTP asociado
            severity: Severidad del error
            is_retryable: Si la operación puede reintentarse
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class EmptyArgumentException(AppException):
    """
    Un argumento que debe tener contenido llegó vacío.

    Se lanza antes de cualquier llamada de red.
    """

    def __init__(self, argument: str, **kwargs):
        super().__init__(
            message=f"The parameter {argument} should not be empty.",
            error_code=ErrorCode.EMPTY_ARGUMENT,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.argument = argument
        self.details.update({"argument": argument})


class InvalidDomainException(AppException):
    """
    Un valor fuera de su enumeración fija donde se exige validación estricta.
    """

    def __init__(self, argument: str, invalid_value: Any = None, **kwargs):
        super().__init__(
            message=f"The parameter {argument} is invalid.",
            error_code=ErrorCode.INVALID_DOMAIN,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.argument = argument
        self.invalid_value = invalid_value
        self.details.update(
            {
                "argument": argument,
                "invalid_value": str(invalid_value) if invalid_value is not None else None,
            }
        )


class MappingException(AppException):
    """
    La respuesta no contiene un nodo requerido.
    """

    def __init__(self, message: str, node: Optional[str] = None, **kwargs):
        """
        Inicializa la excepción de mapeo.

        Args:
            message: Mensaje de error
            node: Nombre del nodo XML faltante
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.MAPPING_ERROR,
            status_code=502,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.node = node
        self.details.update({"node": node})


class SellerCenterAPIException(AppException):
    """
    Excepción para errores de la API de Seller Center.

    Cubre errores de red, respuestas HTTP no exitosas y cuerpos
    `ErrorResponse` devueltos por la API.
    """

    def __init__(
        self,
        message: str,
        api_error_code: Optional[int] = None,
        error_type: Optional[str] = None,
        http_status: Optional[int] = None,
        action: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de Seller Center.

        Args:
            message: Mensaje de error
            api_error_code: Código de error reportado en el ErrorResponse
            error_type: Tipo de error reportado (Sender, Platform)
            http_status: Código HTTP de la respuesta, si hubo
            action: Acción remota que falló
            **kwargs: Argumentos adicionales para AppException
        """
        error_code = ErrorCode.SELLERCENTER_API_ERROR
        severity = ErrorSeverity.MEDIUM
        is_retryable = False

        if http_status is None and api_error_code is None:
            error_code = ErrorCode.SELLERCENTER_CONNECTION_FAILED
            is_retryable = True
        elif http_status and http_status >= 500:
            severity = ErrorSeverity.HIGH
            is_retryable = True

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=http_status or 503,
            severity=severity,
            is_retryable=is_retryable,
            **kwargs,
        )

        self.api_error_code = api_error_code
        self.error_type = error_type
        self.http_status = http_status
        self.action = action

        self.details.update(
            {
                "api_error_code": api_error_code,
                "error_type": error_type,
                "http_status": http_status,
                "action": action,
            }
        )
