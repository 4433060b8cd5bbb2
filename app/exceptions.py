"""Custom exceptions shared across services."""

from dataclasses import dataclass


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    code: str = "service_error"
    status_code: int | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class ValidationError(ServiceError):
    """Raised when a request or a backend response breaks its contract."""

    code: str = "validation_error"


@dataclass(eq=False)
class BackendError(ServiceError):
    """Raised when the text backend fails or cannot be reached."""

    code: str = "backend_error"
