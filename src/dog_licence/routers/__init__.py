"""API routers package."""

from dog_licence.routers import fees

__all__ = ["fees"]
