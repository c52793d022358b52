"""Application errors – raised or returned at the query-handler level."""

from __future__ import annotations

from typing import Any

from mp_catalog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The requested view needs an acting user and none was supplied."""

    default_code = "unauthorized"


class OperationCancelledError(ApplicationError):
    """The caller's cancellation token tripped before a document was produced."""

    default_code = "cancelled"

    def __init__(self, message: str = "Operation cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ConfigurationError(ApplicationError):
    """Wiring or settings are invalid; retrying the same call cannot succeed."""

    default_code = "configuration_error"


class UnsupportedExportTypeError(ConfigurationError):
    """The export type names no renderer. It is never coerced to a default."""

    default_code = "unsupported_export_type"

    def __init__(self, export_type: object, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"export_type": repr(export_type)})
        super().__init__(f"Unsupported export type: {export_type!r}", **kwargs)
        self.export_type = export_type


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "OperationCancelledError",
    "UnauthorizedError",
    "UnsupportedExportTypeError",
]
