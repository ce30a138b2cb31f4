"""
Custom Exception Classes for Block Pattern Builder

Every error raised by the plugin carries a human-readable message, an HTTP
status code (used by the dev server's error handler) and a machine-readable
error code.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error responses."""

    PLUGIN_ERROR = "PLUGIN_ERROR"
    COMPONENT_NOT_FOUND = "COMPONENT_NOT_FOUND"
    COMPONENT_UNKNOWN = "COMPONENT_UNKNOWN"
    MANIFEST_INVALID = "MANIFEST_INVALID"


class PluginError(Exception):
    """Base exception class for all plugin errors"""

    error_code: ErrorCode = ErrorCode.PLUGIN_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return self.message


# ============================================================================
# Component Exceptions
# ============================================================================


class ComponentNotFoundError(PluginError, KeyError):
    """Raised when looking up a component that was never registered"""

    error_code = ErrorCode.COMPONENT_NOT_FOUND

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            message=f"Component '{identifier}' is not registered",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"identifier": identifier},
        )


class UnknownComponentError(PluginError, KeyError):
    """Raised when registering an identifier that has no component factory"""

    error_code = ErrorCode.COMPONENT_UNKNOWN

    def __init__(self, identifier: str, available: list[str] | None = None):
        self.identifier = identifier
        super().__init__(
            message=f"No component factory for '{identifier}'",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"identifier": identifier, "available": available or []},
        )


# ============================================================================
# Asset Exceptions
# ============================================================================


class ManifestError(PluginError):
    """Raised when the build manifest exists but cannot be used"""

    error_code = ErrorCode.MANIFEST_INVALID

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
