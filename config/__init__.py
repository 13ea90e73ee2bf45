"""Configuration package for the interview backend."""
from .settings import Settings, settings

__all__ = ["Settings", "settings"]
