"""Kernel value-object types – public re-export surface."""

from mp_catalog.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
