"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
import re
from typing import Any

_URL_PASSWORD = re.compile(r"(?P<head>://[^:/@]+:)[^@]+(?P<tail>@)")


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and override :meth:`_validate`; instances are
    validated on construction.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def redacted(self) -> dict[str, Any]:
        """Field values safe to log: passwords inside URLs are masked."""
        values = dataclasses.asdict(self)
        for name, value in values.items():
            if isinstance(value, str) and "://" in value:
                values[name] = _URL_PASSWORD.sub(r"\g<head>***\g<tail>", value)
        return values


__all__ = ["Settings"]
