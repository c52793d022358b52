"""Kernel security – UserProfile, the acting user behind a request."""
from __future__ import annotations

import dataclasses
from datetime import timedelta, timezone, tzinfo


@dataclasses.dataclass(frozen=True)
class UserProfile:
    """Authenticated identity plus the profile data queries scope on.

    ``local_time_offset`` is the user's offset from UTC; calendar-based
    filters ("created today") are evaluated in that offset.
    """
    user_id: str
    user_name: str = ""
    tenant_id: str | None = None
    local_time_offset: timedelta = timedelta(0)

    @property
    def timezone(self) -> tzinfo:
        return timezone(self.local_time_offset)


__all__ = ["UserProfile"]
