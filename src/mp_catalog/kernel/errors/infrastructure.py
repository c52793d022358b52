"""Infrastructure errors – the product store and payload codecs."""

from __future__ import annotations

from typing import Any

from mp_catalog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class DataAccessError(InfrastructureError):
    """The product store could not answer: unreachable, driver error or timeout.

    Raised without partial results; callers see it unmodified.
    """

    default_code = "data_access_error"

    def __init__(self, message: str, *, resource: str = "products", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource
        self.detail.setdefault("resource", resource)

    @classmethod
    def timed_out(
        cls, timeout_seconds: float, *, resource: str = "products", cause: BaseException | None = None
    ) -> "DataAccessError":
        return cls(
            f"Query against {resource} timed out after {timeout_seconds}s",
            resource=resource,
            detail={"timeout_seconds": timeout_seconds},
            cause=cause,
        )


class SerializationError(InfrastructureError):
    """A stored or supplied payload (pictures, message catalogue) is malformed."""

    default_code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
        if payload_type is not None:
            self.detail.setdefault("payload_type", payload_type)


__all__ = ["DataAccessError", "InfrastructureError", "SerializationError"]
