"""
Repository pattern implementation for direct database access.
"""

from .base import (
    BaseRepository,
    RepositoryError,
    NotFoundError,
    DuplicateError
)
from .edusharing import EdusharingRepository
from .plugin_settings import PluginSettingRepository

__all__ = [
    "BaseRepository",
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "EdusharingRepository",
    "PluginSettingRepository"
]
