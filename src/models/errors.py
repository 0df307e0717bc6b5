"""
Domain errors

Raised by the canvas store and configuration layer and propagated to the
caller. Nothing in the kernel recovers them internally.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class NotFoundError(DomainError, KeyError):
    """Lookup of a nonexistent canvas or spiral identifier"""


class CanvasNotFoundError(NotFoundError):
    """Canvas ID doesn't exist"""
    def __init__(self, canvas_id: str):
        super().__init__(
            code="CANVAS_NOT_FOUND",
            message=f"Canvas '{canvas_id}' not found",
            details={"canvas_id": canvas_id},
        )


class SpiralNotFoundError(NotFoundError):
    """Spiral ID doesn't exist on the given canvas"""
    def __init__(self, canvas_id: str, spiral_id: str):
        super().__init__(
            code="SPIRAL_NOT_FOUND",
            message=f"Spiral '{spiral_id}' not found on canvas '{canvas_id}'",
            details={"canvas_id": canvas_id, "spiral_id": spiral_id},
        )


class ConfigError(DomainError):
    """Configuration value can't be used"""
    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(
            code="INVALID_CONFIG",
            message=message,
            details={"key": key} if key else {},
        )
