from __future__ import annotations


class InvalidCatalogError(ValueError):
    """Raised when a timezone catalog cannot provide a usable reference."""
