"""Result envelope returned by query handlers.

A handler answers ``Ok(value)`` when it produced what was asked for and
``Err(error)`` when the caller asked for something it cannot have (a bad
filter, a view that needs a user). Faults in the system itself are raised.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, NoReturn, TypeAlias, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self.value))

    def to_dict(self) -> dict[str, Any]:
        return {"succeeded": True}


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Err(Generic[E]):
    """Failure variant.

    ``kind`` is the error's ``code`` (class name for foreign exceptions) and
    ``message`` its human-readable text; both survive serialisation through
    :meth:`to_dict`.
    """

    error: E

    @property
    def kind(self) -> str:
        return getattr(self.error, "code", type(self.error).__name__)

    @property
    def message(self) -> str:
        return getattr(self.error, "message", str(self.error))

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"succeeded": False, "kind": self.kind, "message": self.message}


Result: TypeAlias = Union[Ok[T], Err[E]]

__all__ = ["Err", "Ok", "Result"]
