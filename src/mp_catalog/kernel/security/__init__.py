"""Kernel security – acting-user profile."""
from mp_catalog.kernel.security.user import UserProfile

__all__ = ["UserProfile"]
