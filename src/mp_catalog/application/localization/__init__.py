"""Application localization – key-to-text lookup with fallback to the key."""
from mp_catalog.application.localization.localizer import CatalogLocalizer, Localizer, NullLocalizer

__all__ = ["CatalogLocalizer", "Localizer", "NullLocalizer"]
