"""Domain errors – caller input that breaks a business rule."""

from __future__ import annotations

from typing import Any

from mp_catalog.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """One or more request fields are unacceptable.

    Field problems accumulate through :meth:`add` and are reported under
    ``errors`` in :meth:`to_dict`.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    def add(self, field: str, message: str) -> "ValidationError":
        self.errors.append({"field": field, "message": message})
        return self

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
