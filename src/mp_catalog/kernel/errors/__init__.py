"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   ├── UnauthorizedError
    │   ├── OperationCancelledError
    │   └── ConfigurationError
    │       └── UnsupportedExportTypeError
    └── InfrastructureError  (infrastructure.py)
        ├── DataAccessError
        └── SerializationError
"""

from mp_catalog.kernel.errors.application import (
    ApplicationError,
    ConfigurationError,
    OperationCancelledError,
    UnauthorizedError,
    UnsupportedExportTypeError,
)
from mp_catalog.kernel.errors.base import BaseError
from mp_catalog.kernel.errors.domain import DomainError, ValidationError
from mp_catalog.kernel.errors.infrastructure import (
    DataAccessError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DataAccessError",
    "DomainError",
    "InfrastructureError",
    "OperationCancelledError",
    "SerializationError",
    "UnauthorizedError",
    "UnsupportedExportTypeError",
    "ValidationError",
]
