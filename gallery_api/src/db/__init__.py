"""
Database package: configuration, engine/session management and ORM models.
"""

from .base import Base
from .config import get_settings, Settings
from .session import (
    dispose_engine,
    get_engine,
    get_async_session,
)

# Import models so they register with the SQLAlchemy metadata.
from . import models as models  # noqa: F401

__all__ = [
    "Base",
    "Settings",
    "get_settings",
    "get_engine",
    "get_async_session",
    "dispose_engine",
    "models",
]
